from __future__ import annotations

import os
from pathlib import Path

from platformdirs import user_data_dir

APP_NAME = "Recurcal"
APP_AUTHOR = "Recurcal"
DATA_DIR = Path(os.getenv("RECURCAL_DATA_DIR") or user_data_dir(APP_NAME, APP_AUTHOR))
EVENTS_FILE = DATA_DIR / "events.json"
LOG_DIR = DATA_DIR / "logs"


def ensure_data_dir() -> None:
    DATA_DIR.mkdir(parents=True, exist_ok=True)
