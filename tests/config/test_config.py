# ruff: noqa: S101

"""Tests for settings and startup helpers."""

import logging
from pathlib import Path

import pytest
from loguru import logger

from students_api.config.config import Settings, settings
from students_api.config.db import engine_options, sqlite_directory
from students_api.config.logger import InterceptHandler
from students_api.utils.banner import create_banner


def test_testing_environment() -> None:
    """The test run uses the testing environment."""
    assert settings.app_env == "testing"
    assert settings.reload is False


def test_production_caps_debug_logging() -> None:
    """DEBUG is lowered to INFO in production."""
    production = Settings(ENV="production", LOG_LEVEL="DEBUG")
    assert production.log_level == "INFO"


def test_log_path() -> None:
    """The log path joins directory and file name."""
    custom = Settings(log_dir="logs", log_file="students.log")
    assert custom.log_path == Path("logs") / "students.log"


@pytest.mark.parametrize(
    ("db_url", "directory"),
    [
        ("sqlite+aiosqlite:///storage/students.db", Path("storage")),
        ("sqlite+aiosqlite:////var/lib/students/students.db", Path("/var/lib/students")),
        ("sqlite+aiosqlite:///:memory:", None),
        ("sqlite+aiosqlite://", None),
        ("postgresql+asyncpg://user:pw@db/students", None),
    ],
)
def test_sqlite_directory(db_url: str, directory: Path | None) -> None:
    """Only file-backed SQLite URLs need a directory."""
    assert sqlite_directory(db_url) == directory


def test_banner() -> None:
    """The banner names the service and its database."""
    banner = create_banner(settings, silent=True)

    assert f"Students API v{settings.version}" in banner
    assert settings.db_url in banner


def test_engine_options_sqlite() -> None:
    """SQLite connections get the busy timeout and cross-thread access."""
    options = engine_options(Settings(DATABASE_URL="sqlite+aiosqlite:///data/s.db"))

    assert options["connect_args"] == {
        "check_same_thread": False,
        "timeout": settings.db_timeout,
    }
    assert options["pool_size"] == settings.db_pool_size


def test_engine_options_other_backend() -> None:
    """Other backends only receive the pool settings."""
    options = engine_options(
        Settings(DATABASE_URL="postgresql+asyncpg://user:pw@db/students")
    )

    assert "connect_args" not in options
    assert options["max_overflow"] == settings.db_max_overflow


def test_intercept_handler() -> None:
    """Standard library records reach loguru tagged with their logger name."""
    messages = []
    sink_id = logger.add(messages.append, level="DEBUG", format="{message}")
    std_logger = logging.getLogger("students_api.intercept_check")
    std_logger.addHandler(InterceptHandler())
    std_logger.propagate = False
    try:
        std_logger.warning("pool exhausted")
    finally:
        logger.remove(sink_id)
        std_logger.handlers.clear()

    [message] = messages
    assert message.record["message"] == "pool exhausted"
    assert message.record["level"].name == "WARNING"
    assert message.record["extra"]["std_logger"] == "students_api.intercept_check"
