from __future__ import annotations

from datetime import date
from typing import Any, Dict, Optional

from ..core import expand_repeat_dates, format_month, format_week, month_grid as build_month_grid, week_dates_containing
from ..domain import RepeatRule, RepeatType, ViewGranularity
from .registry import register_api
from .serializers import deserialize_event, serialize_event, serialize_events
from .state import api_state


def _parse_date(value: str) -> date:
    try:
        return date.fromisoformat(value)
    except ValueError as exc:  # noqa: TRY003
        raise ValueError(f"Invalid ISO date: {value}") from exc


@register_api(
    "list_events",
    description="Reload and return every stored event occurrence.",
    category="calendar",
    tags=("read",),
)
def list_events() -> Dict[str, Any]:
    events = api_state.calendar.load_events()
    api_state.loaded = True
    return {"events": serialize_events(events)}


@register_api(
    "visible_events",
    description="Return events matching a search term inside the week or month around a day.",
    category="calendar",
    tags=("read", "search"),
)
def visible_events(day: str, view: str = ViewGranularity.MONTH.value, query: str = "") -> Dict[str, Any]:
    reference = _parse_date(day)
    granularity = ViewGranularity(view)
    events = api_state.ensure_loaded().visible_events(query, reference, granularity)
    return {
        "day": reference.isoformat(),
        "view": granularity.value,
        "label": format_week(reference) if granularity is ViewGranularity.WEEK else format_month(reference),
        "events": serialize_events(events),
    }


@register_api(
    "find_overlaps",
    description="Return stored events whose time range clashes with the submitted event.",
    category="calendar",
    tags=("read", "conflicts"),
)
def find_overlaps(event: Dict[str, Any]) -> Dict[str, Any]:
    candidate = deserialize_event(event)
    overlapping = api_state.ensure_loaded().find_overlaps(candidate)
    return {"overlapping": serialize_events(overlapping)}


@register_api(
    "save_event",
    description="Create an event, or update an existing one, expanding repeat rules into occurrences.",
    category="calendar",
    tags=("write",),
)
def save_event(event: Dict[str, Any], editing: bool = False) -> Dict[str, Any]:
    payload = deserialize_event(event)
    written = api_state.ensure_loaded().save_event(payload, editing=editing)
    return {"events": serialize_events(written)}


@register_api(
    "delete_event",
    description="Delete a single occurrence; other members of its repeat group are kept.",
    category="calendar",
    tags=("write",),
)
def delete_event(event_id: str) -> Dict[str, Any]:
    api_state.ensure_loaded().delete_event(event_id)
    return {"deleted": event_id}


@register_api(
    "group_members",
    description="Return the occurrences sharing a repeat group id.",
    category="calendar",
    tags=("read", "repeat"),
)
def group_members(group_id: str) -> Dict[str, Any]:
    members = api_state.ensure_loaded().group_members(group_id)
    return {"group_id": group_id, "events": [serialize_event(event) for event in members]}


@register_api(
    "expand_repeat",
    description="Preview the dates a repeat rule produces from a start day.",
    category="recurrence",
    tags=("read", "repeat"),
)
def expand_repeat(
    start: str,
    repeat_type: str = RepeatType.NONE.value,
    interval: int = 1,
    end_date: Optional[str] = None,
) -> Dict[str, Any]:
    rule = RepeatRule(
        type=RepeatType(repeat_type),
        interval=interval,
        end_date=_parse_date(end_date) if end_date else None,
    )
    dates = expand_repeat_dates(_parse_date(start), rule, horizon=api_state.context.horizon)
    return {"dates": [value.isoformat() for value in dates]}


@register_api(
    "week_dates",
    description="Return the Sunday-to-Saturday dates of the week containing a day.",
    category="layout",
    tags=("read",),
)
def week_dates(day: str) -> Dict[str, Any]:
    reference = _parse_date(day)
    return {
        "label": format_week(reference),
        "dates": [value.isoformat() for value in week_dates_containing(reference)],
    }


@register_api(
    "month_grid",
    description="Return the day numbers of a month laid out in Sunday-first week rows.",
    category="layout",
    tags=("read",),
)
def month_grid(day: str) -> Dict[str, Any]:
    reference = _parse_date(day)
    return {"label": format_month(reference), "weeks": build_month_grid(reference)}
