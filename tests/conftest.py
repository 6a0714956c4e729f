"""Common test fixtures for the application."""

import os

os.environ.setdefault("ENV", "testing")

from collections.abc import AsyncGenerator, Generator
from pathlib import Path

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.pool import NullPool
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

from students_api.app import app
from students_api.config.db import get_session
from students_api.student.repository import get_student_store
from tests.utils import InMemoryStudentStore


@pytest.fixture(name="db_path")
def db_path_fixture(tmp_path: Path) -> Path:
    """Create an SQLite file with the students table in a temp directory."""
    db_path = tmp_path / "students.db"
    sync_engine = create_engine(f"sqlite:///{db_path}")
    SQLModel.metadata.create_all(sync_engine)
    sync_engine.dispose()
    return db_path


@pytest.fixture(name="db_url")
def db_url_fixture(db_path: Path) -> str:
    """Async driver URL of the test database."""
    return f"sqlite+aiosqlite:///{db_path}"


@pytest.fixture
async def session(db_url: str) -> AsyncGenerator[AsyncSession]:
    """Open a session on the test database in the test's event loop."""
    test_engine = create_async_engine(db_url, poolclass=NullPool)
    async with AsyncSession(test_engine, expire_on_commit=False) as db:
        yield db
    await test_engine.dispose()


@pytest.fixture(name="client")
def client_fixture(db_url: str) -> Generator[TestClient]:
    """Create a test client backed by the temporary SQLite database.

    The engine uses ``NullPool`` so that no connection outlives the event loop
    of the request that opened it.
    """
    test_engine = create_async_engine(
        db_url, poolclass=NullPool, connect_args={"check_same_thread": False}
    )

    async def get_session_override() -> AsyncGenerator[AsyncSession]:
        async with AsyncSession(test_engine, expire_on_commit=False) as db:
            yield db

    app.dependency_overrides[get_session] = get_session_override
    client = TestClient(app, base_url="http://testserver")  # NOSONAR
    yield client

    app.dependency_overrides.clear()


@pytest.fixture(name="fake_store")
def fake_store_fixture() -> InMemoryStudentStore:
    """In-memory student store."""
    return InMemoryStudentStore()


@pytest.fixture(name="fake_client")
def fake_client_fixture(fake_store: InMemoryStudentStore) -> Generator[TestClient]:
    """Create a test client whose student store is the in-memory fake.

    Server exceptions are rendered instead of re-raised so the 500 envelope
    can be asserted.
    """
    app.dependency_overrides[get_student_store] = lambda: fake_store
    client = TestClient(app, raise_server_exceptions=False)
    yield client

    app.dependency_overrides.clear()
