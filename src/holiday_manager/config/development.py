import os

from .base import DB_CONFIG, Config  # noqa: F401

STORAGE_BACKEND = Config.STORAGE_BACKEND

DEBUG = bool(int(os.getenv("DEBUG", "0")))
LOG_JSON = Config.LOG_JSON

# If enabled, the app applies the packaged schema.sql on startup (idempotent: CREATE IF NOT EXISTS)
AUTO_INIT_DB = bool(int(os.getenv("AUTO_INIT_DB", "1")))

MAX_CONSECUTIVE_DAYS = Config.MAX_CONSECUTIVE_DAYS
BLACKOUT_PERIODS = Config.BLACKOUT_PERIODS
