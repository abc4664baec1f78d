from __future__ import annotations

from dataclasses import dataclass, field, replace
from datetime import date, datetime, time
from typing import Any, Dict, Optional

from .enums import RepeatType

DEFAULT_NOTIFICATION_MINUTES = 10


def _parse_date(value: Any) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        return date.fromisoformat(value[:10])
    raise ValueError(f"Unsupported date value: {value!r}")


def parse_time_of_day(value: Any) -> time:
    """Parse an ``HH:MM`` string (or pass a ``time`` through) into a ``time``."""

    if isinstance(value, time):
        return value.replace(second=0, microsecond=0)
    if isinstance(value, str):
        hours, _, minutes = value.strip().partition(":")
        try:
            return time(int(hours), int(minutes or 0))
        except ValueError as exc:
            raise ValueError(f"Invalid time of day: {value!r}") from exc
    raise ValueError(f"Unsupported time value: {value!r}")


def format_time_of_day(value: time) -> str:
    return value.strftime("%H:%M")


def minutes_since_midnight(value: time) -> int:
    return value.hour * 60 + value.minute


@dataclass(frozen=True, slots=True)
class RepeatRule:
    type: RepeatType = RepeatType.NONE
    interval: int = 0
    end_date: Optional[date] = None
    group_id: Optional[str] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "type", RepeatType(self.type))

    @property
    def is_recurring(self) -> bool:
        return self.type != RepeatType.NONE

    @classmethod
    def none(cls) -> "RepeatRule":
        return cls(type=RepeatType.NONE, interval=0)

    @classmethod
    def from_record(cls, record: Optional[Dict[str, Any]]) -> "RepeatRule":
        if not record:
            return cls.none()
        end_date = record.get("end_date")
        return cls(
            type=RepeatType(record.get("type") or RepeatType.NONE),
            interval=int(record.get("interval") or 0),
            end_date=_parse_date(end_date) if end_date else None,
            group_id=record.get("group_id") or None,
        )

    def to_record(self) -> Dict[str, Any]:
        record: Dict[str, Any] = {"type": self.type.value, "interval": self.interval}
        if self.end_date is not None:
            record["end_date"] = self.end_date.isoformat()
        if self.group_id:
            record["group_id"] = self.group_id
        return record


@dataclass(slots=True)
class EventOccurrence:
    """A single dated calendar entry; recurring events are stored one record per date."""

    title: str
    date: date
    start_time: time
    end_time: time
    description: str = ""
    location: str = ""
    category: str = ""
    repeat: RepeatRule = field(default_factory=RepeatRule.none)
    notification_minutes: int = DEFAULT_NOTIFICATION_MINUTES
    id: Optional[str] = None

    @property
    def group_id(self) -> Optional[str]:
        return self.repeat.group_id

    @property
    def is_recurring_member(self) -> bool:
        return bool(self.repeat.group_id)

    @property
    def start_minutes(self) -> int:
        return minutes_since_midnight(self.start_time)

    @property
    def end_minutes(self) -> int:
        return minutes_since_midnight(self.end_time)

    def with_changes(self, **changes: Any) -> "EventOccurrence":
        return replace(self, **changes)

    @classmethod
    def from_record(cls, record: Dict[str, Any]) -> "EventOccurrence":
        identifier = record.get("id")
        return cls(
            id=str(identifier) if identifier is not None else None,
            title=str(record["title"]),
            date=_parse_date(record["date"]),
            start_time=parse_time_of_day(record["start_time"]),
            end_time=parse_time_of_day(record["end_time"]),
            description=record.get("description") or "",
            location=record.get("location") or "",
            category=record.get("category") or "",
            repeat=RepeatRule.from_record(record.get("repeat")),
            notification_minutes=int(record.get("notification_minutes", DEFAULT_NOTIFICATION_MINUTES)),
        )

    def to_record(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "date": self.date.isoformat(),
            "start_time": format_time_of_day(self.start_time),
            "end_time": format_time_of_day(self.end_time),
            "description": self.description,
            "location": self.location,
            "category": self.category,
            "repeat": self.repeat.to_record(),
            "notification_minutes": self.notification_minutes,
        }
