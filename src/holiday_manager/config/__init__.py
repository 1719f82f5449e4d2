import os
from typing import Optional

_SETTINGS_PACKAGE = "holiday_manager.config"


def get_settings_module(env: Optional[str] = None) -> str:
    # APP_ENV picks the settings module, 'development' by default
    env = (env or os.getenv("APP_ENV", "development")).lower()

    if env in {"prod", "production"}:
        return f"{_SETTINGS_PACKAGE}.production"

    if env in {"test", "testing"}:
        return f"{_SETTINGS_PACKAGE}.testing"

    return f"{_SETTINGS_PACKAGE}.development"
