"""
Engine and session factory construction for the rate store.
"""

from sqlalchemy import MetaData
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool, StaticPool

metadata = MetaData()


def _is_memory_sqlite(database_url: str) -> bool:
    url = make_url(database_url)
    return url.get_backend_name() == "sqlite" and url.database in (None, "", ":memory:")


def create_engine(database_url: str, echo: bool = False) -> AsyncEngine:
    """
    Build the async engine for DATABASE_URL.

    - SQLite in-memory: one shared connection (StaticPool)
    - SQLite file: no pooling
    - PostgreSQL (asyncpg): pooled connections
    """
    backend = make_url(database_url).get_backend_name()

    if backend == "sqlite":
        if _is_memory_sqlite(database_url):
            return create_async_engine(
                database_url,
                echo=echo,
                connect_args={"check_same_thread": False},
                poolclass=StaticPool,
            )
        return create_async_engine(database_url, echo=echo, poolclass=NullPool)

    return create_async_engine(
        database_url,
        echo=echo,
        pool_size=10,
        max_overflow=20,
        pool_timeout=30,
        pool_recycle=300,
        pool_pre_ping=True,
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker:
    return async_sessionmaker(
        engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
    )


async def init_db(engine: AsyncEngine) -> None:
    """Create the schema if it does not exist yet."""
    # models registers its tables on `metadata`
    from . import models  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(metadata.create_all)
