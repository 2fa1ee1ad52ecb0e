"""
Noteful Backend — Test Configuration (conftest.py)
===================================================

What:  Shared pytest fixtures for the entire test suite.

Fixture Hierarchy (all function-scoped):
    ├── mock_db_session: AsyncMock session for service unit tests
    ├── db_engine:       SQLite (aiosqlite) engine with a fresh schema per test
    ├── db_session:      AsyncSession on db_engine for repository tests
    └── test_client:     HTTPX AsyncClient over the app, sessions from db_engine
"""

import os
import tempfile
from typing import AsyncGenerator
from unittest.mock import AsyncMock, MagicMock

# Settings are read at import time; point them at SQLite before the app loads
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///" + os.path.join(
    tempfile.mkdtemp(prefix="noteful_test_"), "default.db"
)
os.environ["LOG_LEVEL"] = "WARNING"

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

import noteful.models  # noqa: F401  (registers every table)
from noteful.database import Base, build_engine, get_db_session


@pytest.fixture
def mock_db_session():
    """
    Provides a mock async database session.

    Service unit tests patch the repositories; this session only has to
    prove that nothing reached the store when validation fails.
    """
    session = AsyncMock(spec=AsyncSession)
    session.execute = AsyncMock()
    session.scalars = AsyncMock()
    session.get = AsyncMock()
    session.flush = AsyncMock()
    session.commit = AsyncMock()
    session.rollback = AsyncMock()
    session.close = AsyncMock()
    session.add = MagicMock()
    return session


@pytest_asyncio.fixture
async def db_engine(tmp_path):
    """A SQLite database file in tmp_path with the full schema created."""
    engine = build_engine(f"sqlite+aiosqlite:///{tmp_path / 'noteful.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(db_engine) -> AsyncGenerator[AsyncSession, None]:
    factory = async_sessionmaker(db_engine, expire_on_commit=False)
    async with factory() as session:
        yield session


@pytest_asyncio.fixture
async def test_client(db_engine):
    """
    Provides an async HTTP test client for endpoint testing.

    get_db_session is overridden to open sessions on the per-test engine,
    with the same commit/rollback behaviour as production.
    raise_app_exceptions=False lets 500 handlers be asserted on.
    """
    from noteful.main import app

    factory = async_sessionmaker(db_engine, expire_on_commit=False)

    async def override_session():
        async with factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db_session] = override_session
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()
