from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List, Sequence

import httpx
from postgrest.exceptions import APIError

from ...domain import EventOccurrence
from ..base import EventNotFoundError, StorageError
from ..supabase import SupabaseGateway

_CLIENT_ERRORS = (APIError, httpx.HTTPError)


def _describe(exc: Exception) -> str:
    return exc.message if isinstance(exc, APIError) else str(exc)


def _flatten(event: EventOccurrence) -> Dict[str, Any]:
    record = event.to_record()
    repeat = record.pop("repeat")
    record.update(
        repeat_type=repeat["type"],
        repeat_interval=repeat["interval"],
        repeat_end_date=repeat.get("end_date"),
        repeat_group_id=repeat.get("group_id"),
    )
    return record


def _inflate(row: Dict[str, Any]) -> EventOccurrence:
    record = dict(row)
    record["repeat"] = {
        "type": record.pop("repeat_type", None),
        "interval": record.pop("repeat_interval", 0),
        "end_date": record.pop("repeat_end_date", None),
        "group_id": record.pop("repeat_group_id", None),
    }
    return EventOccurrence.from_record(record)


@dataclass(slots=True)
class EventRepository:
    """Event store over a Supabase table with the repeat rule flattened into columns."""

    gateway: SupabaseGateway
    table_name: str

    def list(self) -> List[EventOccurrence]:
        try:
            response = (
                self.gateway.table(self.table_name)
                .select("*")
                .order("date", desc=False)
                .order("start_time", desc=False)
                .execute()
            )
        except _CLIENT_ERRORS as exc:
            raise StorageError(f"Failed to list events: {_describe(exc)}") from exc
        return [_inflate(row) for row in response.data or []]

    def create_one(self, event: EventOccurrence) -> EventOccurrence:
        return self.create_many([event])[0]

    def create_many(self, events: Sequence[EventOccurrence]) -> List[EventOccurrence]:
        payload = [_flatten(event) for event in events]
        try:
            response = self.gateway.table(self.table_name).insert(payload).execute()
        except _CLIENT_ERRORS as exc:
            raise StorageError(f"Failed to create events: {_describe(exc)}") from exc
        rows = response.data or payload
        return [_inflate(row) for row in rows]

    def update_one(self, event: EventOccurrence) -> EventOccurrence:
        payload = _flatten(event)
        try:
            response = (
                self.gateway.table(self.table_name)
                .update(payload)
                .eq("id", event.id)
                .execute()
            )
        except _CLIENT_ERRORS as exc:
            raise StorageError(f"Failed to update event '{event.id}': {_describe(exc)}") from exc
        if not response.data:
            raise EventNotFoundError(f"Event '{event.id}' not found.")
        return _inflate(response.data[0])

    def delete_one(self, event_id: str) -> None:
        try:
            response = (
                self.gateway.table(self.table_name)
                .delete()
                .eq("id", event_id)
                .execute()
            )
        except _CLIENT_ERRORS as exc:
            raise StorageError(f"Failed to delete event '{event_id}': {_describe(exc)}") from exc
        if not response.data:
            raise EventNotFoundError(f"Event '{event_id}' not found.")
