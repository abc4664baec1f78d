from __future__ import annotations

from dataclasses import InitVar, dataclass, field
from datetime import date
from typing import Optional

from ..config import AppSettings, get_settings
from ..data import EventStore, JsonEventStore, OccurrenceIndex, SupabaseGateway
from ..data.repositories import EventRepository


def build_event_store(settings: AppSettings) -> EventStore:
    if settings.storage.backend == "supabase":
        return EventRepository(
            gateway=SupabaseGateway(settings.supabase),
            table_name=settings.storage.events_table,
        )
    return JsonEventStore(settings.storage.json_path)


@dataclass(slots=True)
class ServiceContext:
    """Aggregate root for services to share settings, the event store, and the index."""

    settings: AppSettings = field(default_factory=get_settings)
    store: InitVar[Optional[EventStore]] = None
    event_store: EventStore = field(init=False)
    index: OccurrenceIndex = field(init=False)

    def __post_init__(self, store: Optional[EventStore]) -> None:
        self.event_store = store if store is not None else build_event_store(self.settings)
        self.index = OccurrenceIndex()

    @property
    def horizon(self) -> date:
        return self.settings.recurrence.default_horizon
