"""Application services orchestrating the event store and the scheduling engine."""

from __future__ import annotations

from .calendar import CalendarService
from .context import ServiceContext, build_event_store
from .errors import CalendarServiceError, EventLoadError, EventSaveError
from .repeat_groups import SavePlan, plan_create, plan_save, plan_update

__all__ = [
    "CalendarService",
    "CalendarServiceError",
    "EventLoadError",
    "EventSaveError",
    "SavePlan",
    "ServiceContext",
    "build_event_store",
    "plan_create",
    "plan_save",
    "plan_update",
]
