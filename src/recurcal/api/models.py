from __future__ import annotations

import datetime as dt
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..domain import EventOccurrence, RepeatRule, RepeatType, format_time_of_day, parse_time_of_day


class RepeatPayload(BaseModel):
    model_config = ConfigDict(populate_by_name=True, use_enum_values=False)

    type: RepeatType = RepeatType.NONE
    interval: int = Field(default=0)
    end_date: Optional[dt.date] = Field(default=None, alias="endDate")
    group_id: Optional[str] = Field(default=None, alias="id")

    @classmethod
    def from_domain(cls, rule: RepeatRule) -> "RepeatPayload":
        return cls(type=rule.type, interval=rule.interval, end_date=rule.end_date, group_id=rule.group_id)

    def to_domain(self) -> RepeatRule:
        return RepeatRule(
            type=self.type,
            interval=self.interval,
            end_date=self.end_date,
            group_id=self.group_id,
        )


class EventPayload(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: Optional[str] = Field(default=None)
    title: str
    date: dt.date
    start_time: str = Field(alias="startTime")
    end_time: str = Field(alias="endTime")
    description: str = Field(default="")
    location: str = Field(default="")
    category: str = Field(default="")
    repeat: RepeatPayload = Field(default_factory=RepeatPayload)
    notification_minutes: int = Field(default=10, alias="notificationTime")

    @field_validator("start_time", "end_time")
    @classmethod
    def _normalize_time(cls, value: str) -> str:
        return format_time_of_day(parse_time_of_day(value))

    @classmethod
    def from_domain(cls, event: EventOccurrence) -> "EventPayload":
        return cls(
            id=event.id,
            title=event.title,
            date=event.date,
            start_time=format_time_of_day(event.start_time),
            end_time=format_time_of_day(event.end_time),
            description=event.description,
            location=event.location,
            category=event.category,
            repeat=RepeatPayload.from_domain(event.repeat),
            notification_minutes=event.notification_minutes,
        )

    def to_domain(self) -> EventOccurrence:
        return EventOccurrence(
            id=self.id,
            title=self.title,
            date=self.date,
            start_time=parse_time_of_day(self.start_time),
            end_time=parse_time_of_day(self.end_time),
            description=self.description,
            location=self.location,
            category=self.category,
            repeat=self.repeat.to_domain(),
            notification_minutes=self.notification_minutes,
        )
