from __future__ import annotations

from datetime import date
from typing import Callable, Dict, List, Optional

from ..config.settings import DEFAULT_REPEAT_HORIZON
from ..domain import EventOccurrence, RepeatRule, RepeatType
from .dates import add_days, add_months, add_weeks, add_years

_STEPS: Dict[RepeatType, Callable[[date, int], date]] = {
    RepeatType.DAILY: add_days,
    RepeatType.WEEKLY: add_weeks,
    RepeatType.MONTHLY: add_months,
    RepeatType.YEARLY: add_years,
}


def next_occurrence(current: date, repeat_type: RepeatType, interval: int) -> date:
    """Advance ``current`` by one step of the rule; ``NONE`` leaves it unchanged."""

    step = _STEPS.get(RepeatType(repeat_type))
    if step is None:
        return current
    return step(current, interval)


def effective_end(rule: RepeatRule, horizon: Optional[date] = None) -> date:
    boundary = horizon or DEFAULT_REPEAT_HORIZON
    if rule.end_date is not None and rule.end_date < boundary:
        return rule.end_date
    return boundary


def expand_repeat_dates(start: date, rule: RepeatRule, *, horizon: Optional[date] = None) -> List[date]:
    """Return every occurrence date of ``rule`` anchored on ``start``.

    The result always begins with ``start``. Later dates are produced by stepping from
    the previous occurrence until a step passes the end boundary, which is the rule's
    end date when it falls before ``horizon`` and ``horizon`` otherwise.
    """

    if not rule.is_recurring or rule.interval <= 0:
        return [start]

    boundary = effective_end(rule, horizon)
    dates = [start]
    current = start
    while True:
        candidate = next_occurrence(current, rule.type, rule.interval)
        if candidate > boundary:
            break
        dates.append(candidate)
        current = candidate
    return dates


def expand_occurrences(
    event: EventOccurrence,
    *,
    horizon: Optional[date] = None,
    id_factory: Optional[Callable[[], str]] = None,
) -> List[EventOccurrence]:
    """Materialize one occurrence per expanded date, copying every other field from ``event``."""

    occurrences = []
    for occurrence_date in expand_repeat_dates(event.date, event.repeat, horizon=horizon):
        identifier = id_factory() if id_factory else event.id
        occurrences.append(event.with_changes(id=identifier, date=occurrence_date))
    return occurrences
