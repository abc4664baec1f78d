"""Configuration models and helpers."""

from __future__ import annotations

from .paths import APP_NAME, DATA_DIR, EVENTS_FILE, LOG_DIR, ensure_data_dir
from .settings import (
    DEFAULT_REPEAT_HORIZON,
    AppSettings,
    RecurrenceSettings,
    StorageSettings,
    SupabaseSettings,
    get_settings,
)

__all__ = [
    "APP_NAME",
    "AppSettings",
    "DATA_DIR",
    "DEFAULT_REPEAT_HORIZON",
    "EVENTS_FILE",
    "LOG_DIR",
    "RecurrenceSettings",
    "StorageSettings",
    "SupabaseSettings",
    "ensure_data_dir",
    "get_settings",
]
