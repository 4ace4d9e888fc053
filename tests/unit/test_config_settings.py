"""Unit tests for application settings configuration."""

import logging
from pathlib import Path

import pytest
from pydantic import ValidationError

from myblog.config import Settings
from myblog.infrastructure.database.session import _get_async_url
from myblog.infrastructure.logging.log_config import _parse_level, setup_logging


def test_settings_uses_project_env_file_independent_of_cwd():
    """Settings should always include the project-level .env as an env source."""
    env_files = Settings.model_config.get("env_file")
    assert env_files is not None

    normalized = {str(Path(item)) for item in env_files}
    expected_project_env = str(Path(__file__).resolve().parents[2] / ".env")

    assert expected_project_env in normalized
    assert str(Path(".env")) in normalized


def test_blank_database_url_is_rejected():
    with pytest.raises(ValidationError, match="database_url"):
        Settings(database_url="   ")


def test_database_url_from_environment(monkeypatch):
    monkeypatch.setenv("DATABASE_URL", "sqlite:///./blog.db")
    assert Settings().database_url == "sqlite:///./blog.db"


@pytest.mark.parametrize(
    ("url", "expected"),
    [
        ("postgresql://u:p@localhost/blog", "postgresql+asyncpg://u:p@localhost/blog"),
        ("sqlite:///./blog.db", "sqlite+aiosqlite:///./blog.db"),
        ("postgresql+asyncpg://u:p@h/db", "postgresql+asyncpg://u:p@h/db"),
    ],
)
def test_async_url_conversion(url, expected):
    assert _get_async_url(url) == expected


def test_parse_level_defaults_to_info():
    assert _parse_level("debug") == logging.DEBUG
    assert _parse_level("nonsense") == logging.INFO


def test_setup_logging_applies_category_levels():
    settings = Settings(log_level_sql="ERROR", log_level_services="DEBUG")

    setup_logging(settings)

    assert logging.getLogger("sqlalchemy.engine").level == logging.ERROR
    assert logging.getLogger("myblog.application.services").level == logging.DEBUG
