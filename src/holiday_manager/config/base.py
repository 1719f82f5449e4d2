import os

from ..core.constants import DEFAULT_BLACKOUT_PERIODS, DEFAULT_MAX_CONSECUTIVE_DAYS
from ..rules.service import parse_blackout_periods


class Config:
    STORAGE_BACKEND = os.environ.get("STORAGE_BACKEND", "memory")

    # MySQL backend
    DB_USER = os.environ.get("DB_USER", "root")
    DB_PASSWORD = os.environ.get("DB_PASSWORD", "")
    DB_HOST = os.environ.get("DB_HOST", "localhost")
    DB_PORT = int(os.environ.get("DB_PORT", "3306"))
    DB_NAME = os.environ.get("DB_NAME", "holiday_db")

    AUTO_INIT_DB = bool(int(os.environ.get("AUTO_INIT_DB", "0")))
    LOG_JSON = bool(int(os.environ.get("LOG_JSON", "0")))

    MAX_CONSECUTIVE_DAYS = int(os.environ.get("MAX_CONSECUTIVE_DAYS", str(DEFAULT_MAX_CONSECUTIVE_DAYS)))
    BLACKOUT_PERIODS = (
        parse_blackout_periods(os.environ["HOLIDAY_BLACKOUT_PERIODS"])
        if "HOLIDAY_BLACKOUT_PERIODS" in os.environ
        else list(DEFAULT_BLACKOUT_PERIODS)
    )


DB_CONFIG = {
    "host": Config.DB_HOST,
    "port": Config.DB_PORT,
    "user": Config.DB_USER,
    "password": Config.DB_PASSWORD,
    "database": Config.DB_NAME,
}
