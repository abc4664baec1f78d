from __future__ import annotations

from datetime import date
from typing import Iterable, List, Union

from ..domain import EventOccurrence, ViewGranularity
from .dates import DateLike, is_date_in_range, month_bounds, to_date, week_dates_containing


def _contains_term(target: str, term: str) -> bool:
    return term.lower() in (target or "").lower()


def search_events(events: Iterable[EventOccurrence], query: str) -> List[EventOccurrence]:
    """Case-insensitive substring match on title, description or location."""

    term = query or ""
    return [
        event
        for event in events
        if _contains_term(event.title, term)
        or _contains_term(event.description, term)
        or _contains_term(event.location, term)
    ]


def filter_events_between(events: Iterable[EventOccurrence], start: DateLike, end: DateLike) -> List[EventOccurrence]:
    return [event for event in events if is_date_in_range(event.date, start, end)]


def events_for_day(events: Iterable[EventOccurrence], day: DateLike) -> List[EventOccurrence]:
    target = to_date(day)
    return [event for event in events if event.date == target]


def view_window(reference: DateLike, granularity: Union[ViewGranularity, str]) -> tuple[date, date]:
    view = ViewGranularity(granularity)
    if view is ViewGranularity.WEEK:
        week = week_dates_containing(reference)
        return week[0], week[-1]
    return month_bounds(reference)


def filter_events(
    events: Iterable[EventOccurrence],
    query: str,
    reference: DateLike,
    granularity: Union[ViewGranularity, str],
) -> List[EventOccurrence]:
    """Return the events matching ``query`` that fall in the week or month around ``reference``."""

    start, end = view_window(reference, granularity)
    return filter_events_between(search_events(events, query), start, end)
