"""Calendar arithmetic used by recurrence expansion and view windows.

All helpers are pure: they only look at the dates they are given.
"""

from __future__ import annotations

import calendar
from datetime import date, datetime, timedelta
from typing import List, Optional, Tuple, Union

DateLike = Union[date, datetime]

_SUNDAY_FIRST = calendar.Calendar(firstweekday=calendar.SUNDAY)


def is_leap_year(year: int) -> bool:
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def days_in_month(year: int, month: int) -> int:
    return calendar.monthrange(year, month)[1]


def add_days(value: date, count: int) -> date:
    return value + timedelta(days=count)


def add_weeks(value: date, count: int) -> date:
    return add_days(value, count * 7)


def add_months(value: date, count: int) -> date:
    """Move ``count`` months, skipping forward past months too short for the day.

    Jan 31 + 1 month is Mar 31, not Feb 28: the day-of-month is never clamped.
    """

    index = value.month - 1 + count
    year = value.year + index // 12
    month = index % 12 + 1
    while value.day > days_in_month(year, month):
        if month == 12:
            year, month = year + 1, 1
        else:
            month += 1
    return date(year, month, value.day)


def add_years(value: date, count: int) -> date:
    """Move ``count`` years; Feb 29 lands on Feb 29 of the first leap year at or after the target."""

    target_year = value.year + count
    if value.month == 2 and value.day == 29:
        while not is_leap_year(target_year):
            target_year += 1
        return date(target_year, 2, 29)
    return value.replace(year=target_year)


def to_date(value: DateLike) -> date:
    if isinstance(value, datetime):
        return value.date()
    return value


def format_date(value: DateLike, day: Optional[int] = None) -> str:
    """Return ``YYYY-MM-DD`` for ``value``, optionally substituting the day of month."""

    base = to_date(value)
    return f"{base.year:04d}-{base.month:02d}-{(day or base.day):02d}"


def is_date_in_range(value: DateLike, start: DateLike, end: DateLike) -> bool:
    """Inclusive range check on the date part only."""

    return to_date(start) <= to_date(value) <= to_date(end)


def week_dates_containing(value: DateLike) -> List[date]:
    """Return the seven dates, Sunday through Saturday, of the week containing ``value``."""

    day = to_date(value)
    sunday = day - timedelta(days=(day.weekday() + 1) % 7)
    return [sunday + timedelta(days=offset) for offset in range(7)]


def month_bounds(value: DateLike) -> Tuple[date, date]:
    day = to_date(value)
    first = day.replace(day=1)
    last = day.replace(day=days_in_month(day.year, day.month))
    return first, last


def month_grid(value: DateLike) -> List[List[Optional[int]]]:
    """Lay out the day numbers of ``value``'s month into Sunday-first week rows.

    Cells before the first and after the last day of the month are ``None``.
    """

    day = to_date(value)
    return [
        [cell or None for cell in week]
        for week in _SUNDAY_FIRST.monthdayscalendar(day.year, day.month)
    ]


def week_of_month(value: DateLike) -> Tuple[int, int, int]:
    """Return ``(year, month, week_number)`` where a week belongs to the month of its Thursday."""

    day = to_date(value)
    # Python weekday(): Monday=0 .. Sunday=6; the week here runs Sunday..Saturday.
    sunday_index = (day.weekday() + 1) % 7
    thursday = day + timedelta(days=4 - sunday_index)
    first_of_month = thursday.replace(day=1)
    first_thursday = first_of_month + timedelta(days=(3 - first_of_month.weekday()) % 7)
    week_number = (thursday - first_thursday).days // 7 + 1
    return thursday.year, thursday.month, week_number


def format_week(value: DateLike) -> str:
    year, month, week_number = week_of_month(value)
    return f"{calendar.month_name[month]} {year}, week {week_number}"


def format_month(value: DateLike) -> str:
    day = to_date(value)
    return f"{calendar.month_name[day.month]} {day.year}"
