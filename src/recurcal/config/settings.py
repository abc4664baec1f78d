from __future__ import annotations

import os
from dataclasses import dataclass
from datetime import date
from functools import lru_cache
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from .paths import EVENTS_FILE

load_dotenv()

# Fallback expansion horizon for repeat rules without an end date.
DEFAULT_REPEAT_HORIZON = date(2025, 10, 30)

STORAGE_BACKENDS = ("json", "supabase")


@dataclass(frozen=True)
class RecurrenceSettings:
    default_horizon: date


@dataclass(frozen=True)
class SupabaseSettings:
    url: Optional[str]
    anon_key: Optional[str]

    @property
    def is_configured(self) -> bool:
        return bool(self.url and self.anon_key)

    @property
    def missing_env_vars(self) -> list[str]:
        missing = []
        if not self.url:
            missing.append("SUPABASE_URL")
        if not self.anon_key:
            missing.append("SUPABASE_ANON_KEY")
        return missing


@dataclass(frozen=True)
class StorageSettings:
    backend: str
    json_path: Path
    events_table: str


@dataclass(frozen=True)
class AppSettings:
    recurrence: RecurrenceSettings
    supabase: SupabaseSettings
    storage: StorageSettings


def _date_from_env(name: str, default: date) -> date:
    raw = os.getenv(name)
    if not raw:
        return default
    try:
        return date.fromisoformat(raw.strip())
    except ValueError:
        return default


def _backend_from_env(name: str, default: str) -> str:
    raw = (os.getenv(name) or default).strip().lower()
    return raw if raw in STORAGE_BACKENDS else default


@lru_cache(maxsize=1)
def get_settings() -> AppSettings:
    recurrence = RecurrenceSettings(
        default_horizon=_date_from_env("RECURCAL_REPEAT_HORIZON", DEFAULT_REPEAT_HORIZON),
    )

    supabase = SupabaseSettings(
        url=os.getenv("SUPABASE_URL"),
        anon_key=os.getenv("SUPABASE_ANON_KEY"),
    )

    storage = StorageSettings(
        backend=_backend_from_env("RECURCAL_STORAGE_BACKEND", "json"),
        json_path=Path(os.getenv("RECURCAL_EVENTS_FILE") or EVENTS_FILE),
        events_table=os.getenv("SUPABASE_EVENTS_TABLE", "calendar_events"),
    )

    return AppSettings(recurrence=recurrence, supabase=supabase, storage=storage)
