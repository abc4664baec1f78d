from __future__ import annotations

from enum import Enum


class RepeatType(str, Enum):
    NONE = "none"
    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    YEARLY = "yearly"


class ViewGranularity(str, Enum):
    WEEK = "week"
    MONTH = "month"
