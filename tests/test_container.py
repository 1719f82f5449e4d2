from __future__ import annotations

import importlib
import os

from holiday_manager.config import get_settings_module
from holiday_manager.container import build_container
from holiday_manager.main import create_app


def test_settings_module_selection():
    assert get_settings_module("production") == "holiday_manager.config.production"
    assert get_settings_module("test") == "holiday_manager.config.testing"
    assert get_settings_module("anything-else") == "holiday_manager.config.development"


def test_services_share_the_container_repositories():
    container = build_container(backend="memory")
    ana = container.employee_service.add_employee(name="Ana")
    assert container.employees_repo.get_by_id(ana.employee_id) == ana


def test_create_app_installs_configured_rules():
    container = create_app(env="testing")
    rules = container.rules_service.current()
    assert rules.max_consecutive_days == 20
    assert [p.format() for p in rules.blackout_periods] == [
        "2024-03-01 ~ 2024-03-31",
        "2024-09-01 ~ 2024-09-01",
    ]


def test_development_settings_are_quiet_unless_debug_is_set(monkeypatch):
    from holiday_manager.config import development

    monkeypatch.delenv("DEBUG", raising=False)
    assert importlib.reload(development).DEBUG is False

    monkeypatch.setenv("DEBUG", "1")
    assert importlib.reload(development).DEBUG is True

    monkeypatch.delenv("DEBUG")
    importlib.reload(development)


def test_create_app_reads_dotenv_from_the_working_directory(tmp_path, monkeypatch):
    (tmp_path / ".env").write_text("HOLIDAY_MANAGER_DOTENV_MARKER=found\n", encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("HOLIDAY_MANAGER_DOTENV_MARKER", raising=False)

    try:
        create_app(env="testing")
        assert os.environ["HOLIDAY_MANAGER_DOTENV_MARKER"] == "found"
    finally:
        os.environ.pop("HOLIDAY_MANAGER_DOTENV_MARKER", None)
