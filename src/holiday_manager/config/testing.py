from ..core.constants import DEFAULT_BLACKOUT_PERIODS, DEFAULT_MAX_CONSECUTIVE_DAYS
from .base import DB_CONFIG  # noqa: F401

STORAGE_BACKEND = "memory"

DEBUG = False
LOG_JSON = False

AUTO_INIT_DB = False

MAX_CONSECUTIVE_DAYS = DEFAULT_MAX_CONSECUTIVE_DAYS
BLACKOUT_PERIODS = list(DEFAULT_BLACKOUT_PERIODS)
