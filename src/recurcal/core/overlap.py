from __future__ import annotations

from typing import Iterable, List

from ..domain import EventOccurrence


def events_overlap(first: EventOccurrence, second: EventOccurrence) -> bool:
    """Same date and intersecting ``[start, end)`` time ranges; touching ends do not overlap."""

    if first.date != second.date:
        return False
    return first.start_minutes < second.end_minutes and second.start_minutes < first.end_minutes


def find_overlaps(candidate: EventOccurrence, existing: Iterable[EventOccurrence]) -> List[EventOccurrence]:
    """Return the events in ``existing`` that clash with ``candidate``, in input order.

    An event being edited is never reported as overlapping itself.
    """

    return [
        event
        for event in existing
        if not (candidate.id is not None and event.id == candidate.id) and events_overlap(candidate, event)
    ]
