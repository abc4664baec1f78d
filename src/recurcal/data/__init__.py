"""Data access layer."""

from __future__ import annotations

from .base import EventNotFoundError, EventStore, StorageError
from .cache import OccurrenceIndex, group_index
from .store import JsonEventStore
from .supabase import SupabaseGateway, SupabaseNotInitializedError

__all__ = [
    "EventNotFoundError",
    "EventStore",
    "JsonEventStore",
    "OccurrenceIndex",
    "StorageError",
    "SupabaseGateway",
    "SupabaseNotInitializedError",
    "group_index",
]
