"""Domain models for calendar events and repeat rules."""

from __future__ import annotations

from .enums import RepeatType, ViewGranularity
from .models import (
    EventOccurrence,
    RepeatRule,
    format_time_of_day,
    minutes_since_midnight,
    parse_time_of_day,
)

__all__ = [
    "EventOccurrence",
    "RepeatRule",
    "RepeatType",
    "ViewGranularity",
    "format_time_of_day",
    "minutes_since_midnight",
    "parse_time_of_day",
]
