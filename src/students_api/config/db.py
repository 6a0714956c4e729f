"""Database engine and request-scoped sessions."""

from collections.abc import AsyncGenerator
from pathlib import Path
from typing import Any, Final

from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import create_async_engine
from sqlmodel.ext.asyncio.session import AsyncSession

from .config import Settings, settings

__all__ = ["engine", "engine_options", "get_session", "sqlite_directory"]


def engine_options(config: Settings) -> dict[str, Any]:
    """Keyword arguments for ``create_async_engine`` derived from ``config``.

    SQLite gets a busy timeout and may be shared across the loop's threads;
    other backends only receive the pool settings.
    """
    options: dict[str, Any] = {
        "echo": config.db_logging,
        "future": config.db_future,
        "pool_size": config.db_pool_size,
        "max_overflow": config.db_max_overflow,
        "pool_timeout": config.db_pool_timeout,
        "pool_recycle": config.db_pool_recycle,
        "pool_pre_ping": config.db_pool_pre_ping,
    }
    if make_url(config.db_url).get_backend_name() == "sqlite":
        options["connect_args"] = {
            "check_same_thread": False,
            "timeout": config.db_timeout,
        }
    return options


engine: Final = create_async_engine(settings.db_url, **engine_options(settings))


async def get_session() -> AsyncGenerator[AsyncSession]:
    """Yield one session per request.

    Stores commit their own writes. Closing the session rolls back whatever a
    failed request left open.
    """
    async with AsyncSession(engine, expire_on_commit=False) as session:
        yield session


def sqlite_directory(db_url: str) -> Path | None:
    """Return the directory holding a file-backed SQLite database, if any."""
    url = make_url(db_url)
    if url.get_backend_name() != "sqlite" or url.database in {None, "", ":memory:"}:
        return None
    return Path(url.database).parent
