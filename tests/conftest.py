from __future__ import annotations

from datetime import date, time
from itertools import count
from pathlib import Path
from typing import Any, Callable, Iterator

import pytest

from recurcal.config import AppSettings, RecurrenceSettings, StorageSettings, SupabaseSettings
from recurcal.data import JsonEventStore
from recurcal.domain import EventOccurrence, RepeatRule
from recurcal.services import CalendarService, ServiceContext

HORIZON = date(2025, 10, 30)


def build_event(**overrides: Any) -> EventOccurrence:
    defaults: dict[str, Any] = {
        "title": "Team sync",
        "date": date(2025, 10, 15),
        "start_time": time(9, 0),
        "end_time": time(10, 0),
        "description": "",
        "location": "",
        "category": "work",
        "repeat": RepeatRule.none(),
        "notification_minutes": 10,
        "id": None,
    }
    defaults.update(overrides)
    return EventOccurrence(**defaults)


@pytest.fixture
def make_event() -> Callable[..., EventOccurrence]:
    return build_event


@pytest.fixture
def id_factory() -> Callable[[], str]:
    counter = count(1)
    return lambda: f"id-{next(counter)}"


@pytest.fixture
def events_path(tmp_path: Path) -> Path:
    return tmp_path / "events.json"


@pytest.fixture
def settings(events_path: Path) -> AppSettings:
    return AppSettings(
        recurrence=RecurrenceSettings(default_horizon=HORIZON),
        supabase=SupabaseSettings(url=None, anon_key=None),
        storage=StorageSettings(backend="json", json_path=events_path, events_table="calendar_events"),
    )


@pytest.fixture
def store(events_path: Path) -> JsonEventStore:
    return JsonEventStore(events_path)


@pytest.fixture
def context(settings: AppSettings, store: JsonEventStore) -> ServiceContext:
    return ServiceContext(settings=settings, store=store)


@pytest.fixture
def service(context: ServiceContext) -> Iterator[CalendarService]:
    calendar = CalendarService(context)
    calendar.load_events()
    yield calendar
