from __future__ import annotations

from dataclasses import dataclass, field

from ..services import CalendarService, ServiceContext


@dataclass(slots=True)
class ApiState:
    context: ServiceContext = field(default_factory=ServiceContext)
    calendar: CalendarService = field(init=False)
    loaded: bool = False

    def __post_init__(self) -> None:
        self.calendar = CalendarService(self.context)

    def ensure_loaded(self) -> CalendarService:
        if not self.loaded:
            self.calendar.load_events()
            self.loaded = True
        return self.calendar


api_state = ApiState()
