from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, List

from ...domain import EventOccurrence


def group_index(events: Iterable[EventOccurrence]) -> Dict[str, List[str]]:
    """Map each repeat group id to the ids of its member occurrences, in input order."""

    groups: Dict[str, List[str]] = {}
    for event in events:
        if event.group_id and event.id:
            groups.setdefault(event.group_id, []).append(event.id)
    return groups


@dataclass
class OccurrenceIndex:
    """In-memory view of the stored occurrences, indexed by id and repeat group."""

    events_by_id: Dict[str, EventOccurrence] = field(default_factory=dict)
    groups_index: Dict[str, List[str]] = field(default_factory=dict)

    def hydrate(self, events: Iterable[EventOccurrence]) -> None:
        self.clear()
        for event in events:
            if not event.id:
                continue
            self.events_by_id[event.id] = event
        self.groups_index.update(group_index(self.events_by_id.values()))

    def all(self) -> List[EventOccurrence]:
        return list(self.events_by_id.values())

    def get(self, event_id: str) -> EventOccurrence | None:
        return self.events_by_id.get(event_id)

    def group_members(self, group_id: str) -> List[EventOccurrence]:
        return [self.events_by_id[event_id] for event_id in self.groups_index.get(group_id, [])]

    def clear(self) -> None:
        self.events_by_id.clear()
        self.groups_index.clear()
