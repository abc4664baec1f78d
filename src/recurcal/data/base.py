from __future__ import annotations

from typing import List, Protocol, Sequence

from ..domain import EventOccurrence


class StorageError(RuntimeError):
    """Raised when the backing store cannot complete a request."""


class EventNotFoundError(StorageError):
    """Raised when an update or delete targets an id the store does not hold."""


class EventStore(Protocol):
    """Persistence collaborator the calendar service writes materialized occurrences to."""

    def list(self) -> List[EventOccurrence]: ...

    def create_one(self, event: EventOccurrence) -> EventOccurrence: ...

    def create_many(self, events: Sequence[EventOccurrence]) -> List[EventOccurrence]: ...

    def update_one(self, event: EventOccurrence) -> EventOccurrence: ...

    def delete_one(self, event_id: str) -> None: ...
