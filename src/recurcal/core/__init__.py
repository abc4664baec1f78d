"""Pure scheduling engine: calendar arithmetic, recurrence, overlap and view filtering."""

from __future__ import annotations

from .dates import (
    add_days,
    add_months,
    add_weeks,
    add_years,
    days_in_month,
    format_date,
    format_month,
    format_week,
    is_date_in_range,
    is_leap_year,
    month_bounds,
    month_grid,
    week_dates_containing,
    week_of_month,
)
from .overlap import events_overlap, find_overlaps
from .recurrence import effective_end, expand_occurrences, expand_repeat_dates, next_occurrence
from .search import events_for_day, filter_events, filter_events_between, search_events, view_window

__all__ = [
    "add_days",
    "add_months",
    "add_weeks",
    "add_years",
    "days_in_month",
    "effective_end",
    "events_for_day",
    "events_overlap",
    "expand_occurrences",
    "expand_repeat_dates",
    "filter_events",
    "filter_events_between",
    "find_overlaps",
    "format_date",
    "format_month",
    "format_week",
    "is_date_in_range",
    "is_leap_year",
    "month_bounds",
    "month_grid",
    "next_occurrence",
    "search_events",
    "view_window",
    "week_dates_containing",
    "week_of_month",
]
