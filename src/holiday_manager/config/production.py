from .base import DB_CONFIG, Config  # noqa: F401

STORAGE_BACKEND = Config.STORAGE_BACKEND

DEBUG = False
LOG_JSON = Config.LOG_JSON

AUTO_INIT_DB = Config.AUTO_INIT_DB

MAX_CONSECUTIVE_DAYS = Config.MAX_CONSECUTIVE_DAYS
BLACKOUT_PERIODS = Config.BLACKOUT_PERIODS
