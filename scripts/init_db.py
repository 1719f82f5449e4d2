from __future__ import annotations

import importlib

from dotenv import find_dotenv, load_dotenv

from holiday_manager.config import get_settings_module
from holiday_manager.config.logging import configure_logging
from holiday_manager.database.bootstrap import apply_schema, list_tables


def main() -> None:
    load_dotenv(find_dotenv(usecwd=True), override=False)
    configure_logging(verbose=True)
    settings = importlib.import_module(get_settings_module())
    db_config = dict(settings.DB_CONFIG)

    apply_schema(db_config)
    tables = list_tables(db_config)
    print(
        "OK: Applied schema.sql -> "
        f"{db_config.get('user')}@{db_config.get('host')}:{db_config.get('port', 3306)}/{db_config.get('database')} "
        f"(tables={len(tables)})"
    )


if __name__ == "__main__":
    main()
