from __future__ import annotations

import pytest
from click.testing import CliRunner

from holiday_manager.config.logging import configure_logging
from holiday_manager.container import Container, build_container


@pytest.fixture(autouse=True)
def _quiet_logging():
    configure_logging(verbose=False)


@pytest.fixture
def cli_runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def container() -> Container:
    """In-memory container with 20 max days and a March 2024 blackout."""
    c = build_container(backend="memory")
    c.rules_service.configure(
        max_consecutive_days=20,
        blackout_periods=[("2024-03-01", "2024-03-31")],
    )
    return c
