"""Recurcal: recurring calendar events, overlap checks and view filtering."""

from __future__ import annotations

from .core import expand_repeat_dates, filter_events, find_overlaps
from .domain import EventOccurrence, RepeatRule, RepeatType, ViewGranularity

__all__ = [
    "EventOccurrence",
    "RepeatRule",
    "RepeatType",
    "ViewGranularity",
    "expand_repeat_dates",
    "filter_events",
    "find_overlaps",
    "main",
]


def main() -> None:
    from .cli import main as cli_main

    cli_main()
