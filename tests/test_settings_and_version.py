from __future__ import annotations

import logging

import pytest

from infra import version as version_mod
from infra.path import default_db_path
from infra.settings import AppSettings


def test_settings_from_environment(tmp_path):
    settings = AppSettings.from_env(
        {
            "CAPACITY_PLANNER_DATA_DIR": str(tmp_path / "data"),
            "CAPACITY_PLANNER_LOG_LEVEL": "debug",
            "CAPACITY_PLANNER_SQL_ECHO": "yes",
        }
    )

    assert settings.data_dir == tmp_path / "data"
    assert settings.data_dir.is_dir()
    assert settings.db_url == f"sqlite:///{(tmp_path / 'data' / 'capacity_planner.db').as_posix()}"
    assert settings.log_level == logging.DEBUG
    assert settings.sql_echo is True
    assert settings.log_dir == tmp_path / "data" / "logs"


def test_settings_db_url_override_and_defaults(tmp_path):
    settings = AppSettings.from_env(
        {
            "CAPACITY_PLANNER_DATA_DIR": str(tmp_path),
            "CAPACITY_PLANNER_DB_URL": "postgresql+psycopg://planner@db/capacity",
        }
    )

    assert settings.db_url == "postgresql+psycopg://planner@db/capacity"
    assert settings.log_level == logging.INFO
    assert settings.sql_echo is False


def test_settings_reject_unknown_log_level(tmp_path):
    with pytest.raises(ValueError):
        AppSettings.from_env(
            {"CAPACITY_PLANNER_DATA_DIR": str(tmp_path), "CAPACITY_PLANNER_LOG_LEVEL": "chatty"}
        )


def test_default_db_path_lives_in_data_dir(tmp_path):
    assert default_db_path(tmp_path) == tmp_path / "capacity_planner.db"


def test_get_app_version_prefers_env_override(monkeypatch):
    monkeypatch.setenv("CAPACITY_PLANNER_VERSION", " 9.9.9 ")

    assert version_mod.get_app_version() == "9.9.9"


def test_get_app_version_falls_back_to_default(monkeypatch):
    monkeypatch.delenv("CAPACITY_PLANNER_VERSION", raising=False)
    assert version_mod.get_app_version() == version_mod._DEFAULT_APP_VERSION

    monkeypatch.setenv("CAPACITY_PLANNER_VERSION", "   ")
    assert version_mod.get_app_version() == version_mod._DEFAULT_APP_VERSION
