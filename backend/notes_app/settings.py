from __future__ import annotations

import logging
import os
from pathlib import Path

APP_NAME = "notes_app"

# repository_root/data (we are in backend/notes_app/)
DEFAULT_DATA_DIR = Path(__file__).resolve().parents[2] / "data"


def data_dir() -> Path:
    return Path(os.getenv("APP_DATA_DIR", str(DEFAULT_DATA_DIR)))


def log_dir() -> Path:
    return Path(os.getenv("APP_LOG_DIR", str(data_dir() / "logs")))


def log_level() -> int:
    name = os.getenv("APP_LOG_LEVEL", "INFO").upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.INFO


def seed_enabled() -> bool:
    return os.getenv("APP_SEED_NOTES", "1").strip().lower() not in ("0", "false", "no")
