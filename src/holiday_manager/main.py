from __future__ import annotations

import importlib
from typing import Optional

import structlog
from dotenv import find_dotenv, load_dotenv

from .config import get_settings_module
from .config.logging import configure_logging
from .container import Container, build_container
from .core.enums import StorageBackend
from .database.bootstrap import apply_schema, list_tables

logger = structlog.get_logger(__name__)


def create_app(
    *,
    env: Optional[str] = None,
    verbose: Optional[bool] = None,
    log_json: Optional[bool] = None,
) -> Container:
    """Load settings, wire the repositories and install the holiday rules."""
    load_dotenv(find_dotenv(usecwd=True), override=False)

    settings_module = get_settings_module(env)
    settings = importlib.import_module(settings_module)

    debug = bool(getattr(settings, "DEBUG", False))
    configure_logging(
        verbose=debug if verbose is None else verbose,
        log_json=bool(getattr(settings, "LOG_JSON", False)) if log_json is None else log_json,
    )

    backend = str(getattr(settings, "STORAGE_BACKEND", StorageBackend.MEMORY.value))
    db_config = dict(getattr(settings, "DB_CONFIG", {}))
    logger.debug("settings_loaded", settings=settings_module, backend=backend)

    if backend == StorageBackend.MYSQL.value and bool(getattr(settings, "AUTO_INIT_DB", False)):
        apply_schema(db_config)
        logger.debug("schema_ready", tables=len(list_tables(db_config)))

    container = build_container(backend=backend, db_config=db_config)
    rules = container.rules_service.configure(
        max_consecutive_days=getattr(settings, "MAX_CONSECUTIVE_DAYS"),
        blackout_periods=getattr(settings, "BLACKOUT_PERIODS", ()),
    )
    logger.debug(
        "holiday_rules_configured",
        max_consecutive_days=rules.max_consecutive_days,
        blackout_periods=[p.format() for p in rules.blackout_periods],
    )
    return container
