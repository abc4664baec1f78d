from __future__ import annotations

from copy import deepcopy
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Sequence

import orjson

from ..config import EVENTS_FILE
from ..domain import EventOccurrence
from .base import EventNotFoundError, StorageError

DEFAULT_EVENT_STATE: Dict[str, Any] = {
    "events": [],
    "metadata": {"schema_version": 1},
}


class JsonEventStore:
    """File-backed event store; every call reads or rewrites a single JSON document."""

    def __init__(self, path: Optional[Path] = None) -> None:
        self._path = Path(path) if path else EVENTS_FILE
        self._state: Optional[Dict[str, Any]] = None

    @property
    def path(self) -> Path:
        return self._path

    def _ensure_materialized(self) -> None:
        if self._state is not None:
            return
        try:
            if not self._path.exists():
                self._path.parent.mkdir(parents=True, exist_ok=True)
                self._state = deepcopy(DEFAULT_EVENT_STATE)
                self.persist()
                return
            raw = self._path.read_bytes()
        except OSError as exc:
            raise StorageError(f"Cannot read event store at {self._path}") from exc
        if not raw:
            self._state = deepcopy(DEFAULT_EVENT_STATE)
            return
        try:
            self._state = orjson.loads(raw)
        except orjson.JSONDecodeError as exc:
            raise StorageError(f"Event store at {self._path} is not valid JSON") from exc
        # Backfill missing keys when upgrading.
        for key, value in DEFAULT_EVENT_STATE.items():
            if key not in self._state:
                self._state[key] = deepcopy(value)

    @property
    def data(self) -> Dict[str, Any]:
        self._ensure_materialized()
        assert self._state is not None
        return self._state

    def persist(self) -> None:
        if self._state is None:
            return
        self._write(self._state)

    def _write(self, state: Dict[str, Any]) -> None:
        payload = orjson.dumps(state, option=orjson.OPT_INDENT_2)
        try:
            self._path.write_bytes(payload + b"\n")
        except OSError as exc:
            raise StorageError(f"Cannot write event store at {self._path}") from exc

    def mutate(self, callback: Callable[[Dict[str, Any]], Any]) -> Any:
        self._ensure_materialized()
        assert self._state is not None
        working = deepcopy(self._state)
        result = callback(working)
        self._write(working)
        self._state = working
        return result

    def list(self) -> List[EventOccurrence]:
        return [EventOccurrence.from_record(record) for record in self.data["events"]]

    def create_one(self, event: EventOccurrence) -> EventOccurrence:
        return self.create_many([event])[0]

    def create_many(self, events: Sequence[EventOccurrence]) -> List[EventOccurrence]:
        records = [event.to_record() for event in events]
        if any(not record["id"] for record in records):
            raise StorageError("Events must carry an id before they are stored.")

        def _append(state: Dict[str, Any]) -> None:
            state["events"].extend(records)

        self.mutate(_append)
        return [EventOccurrence.from_record(record) for record in records]

    def update_one(self, event: EventOccurrence) -> EventOccurrence:
        record = event.to_record()

        def _replace(state: Dict[str, Any]) -> None:
            for index, existing in enumerate(state["events"]):
                if existing.get("id") == event.id:
                    state["events"][index] = record
                    return
            raise EventNotFoundError(f"Event '{event.id}' not found.")

        self.mutate(_replace)
        return EventOccurrence.from_record(record)

    def delete_one(self, event_id: str) -> None:
        def _remove(state: Dict[str, Any]) -> None:
            remaining = [record for record in state["events"] if record.get("id") != event_id]
            if len(remaining) == len(state["events"]):
                raise EventNotFoundError(f"Event '{event_id}' not found.")
            state["events"] = remaining

        self.mutate(_remove)


__all__ = ["DEFAULT_EVENT_STATE", "JsonEventStore"]
