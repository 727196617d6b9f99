"""Pytest configuration and shared fixtures for the rate service.

- In-memory SQLite engine + session for repository/service tests
- File-backed SQLite app (lifespan run, seeded) + httpx client for route tests
"""

from collections.abc import AsyncGenerator

import pytest
import pytest_asyncio
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from rates.app import create_app
from rates.config import Settings
from rates.db.session import create_engine, create_session_factory, init_db

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


# =============================================================================
# Database Fixtures
# =============================================================================


@pytest_asyncio.fixture
async def test_engine() -> AsyncGenerator[AsyncEngine, None]:
    """Fresh in-memory database with the schema created."""
    engine = create_engine(TEST_DATABASE_URL)
    await init_db(engine)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(test_engine: AsyncEngine) -> async_sessionmaker:
    return create_session_factory(test_engine)


@pytest_asyncio.fixture
async def db_session(session_factory: async_sessionmaker) -> AsyncGenerator[AsyncSession, None]:
    async with session_factory() as session:
        yield session
        await session.rollback()


# =============================================================================
# App Fixtures
# =============================================================================


@pytest.fixture
def test_settings(tmp_path) -> Settings:
    return Settings(
        database_url=f"sqlite+aiosqlite:///{tmp_path / 'rates.db'}",
        log_dir=str(tmp_path / "logs"),
    )


@pytest_asyncio.fixture
async def test_app(test_settings: Settings) -> AsyncGenerator[FastAPI, None]:
    """App with its lifespan entered: schema created and seed rows written."""
    app = create_app(test_settings)
    async with app.router.lifespan_context(app):
        yield app


@pytest_asyncio.fixture
async def client(test_app: FastAPI) -> AsyncGenerator[AsyncClient, None]:
    async with AsyncClient(transport=ASGITransport(app=test_app), base_url="http://test") as c:
        yield c
