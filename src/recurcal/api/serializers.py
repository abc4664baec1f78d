from __future__ import annotations

from typing import Any, Dict, Iterable, List

from ..domain import EventOccurrence
from .models import EventPayload


def serialize_event(event: EventOccurrence) -> Dict[str, Any]:
    return EventPayload.from_domain(event).model_dump(mode="json")


def serialize_events(events: Iterable[EventOccurrence]) -> List[Dict[str, Any]]:
    return [serialize_event(event) for event in events]


def deserialize_event(payload: Dict[str, Any]) -> EventOccurrence:
    return EventPayload.model_validate(payload).to_domain()
