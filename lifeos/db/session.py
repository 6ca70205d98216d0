"""Database session configuration"""

import logging
from functools import lru_cache
from typing import AsyncGenerator
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from lifeos import config

logger = logging.getLogger(__name__)


def to_async_url(database_url: str) -> str:
    """
    Convert a PostgreSQL connection string to the async psycopg driver format.

    Handles postgresql://, postgresql+psycopg:// and legacy postgresql+asyncpg:// URLs.
    """
    if database_url.startswith("postgresql://"):
        return database_url.replace("postgresql://", "postgresql+psycopg://", 1)
    if database_url.startswith("postgresql+psycopg://"):
        return database_url
    if database_url.startswith("postgresql+asyncpg://"):
        return database_url.replace("postgresql+asyncpg://", "postgresql+psycopg://", 1)
    raise ValueError(f"Unsupported database URL format: {database_url}")


@lru_cache(maxsize=1)
def get_engine() -> AsyncEngine:
    """
    Create the async SQLAlchemy engine on first use.

    The application imports and serves health checks without a database;
    DATABASE_URL is only required once a session is opened.
    """
    if not config.DATABASE_URL:
        raise ValueError("DATABASE_URL environment variable is not set")

    engine = create_async_engine(
        to_async_url(config.DATABASE_URL),
        pool_pre_ping=True,  # Verify connections before using them
        pool_size=config.DB_POOL_SIZE,
        max_overflow=config.DB_MAX_OVERFLOW,
        pool_timeout=config.DB_POOL_TIMEOUT,
        pool_recycle=config.DB_POOL_RECYCLE,
        echo=False,
    )

    @event.listens_for(engine.sync_engine, "connect")
    def on_connect(dbapi_conn, connection_record):
        logger.debug("New database connection created")

    @event.listens_for(engine.sync_engine, "invalidate")
    def on_invalidate(dbapi_conn, connection_record, exception):
        logger.warning(
            f"Database connection invalidated: {exception}",
            exc_info=exception
        )

    return engine


@lru_cache(maxsize=1)
def get_sessionmaker() -> async_sessionmaker:
    return async_sessionmaker(
        get_engine(),
        class_=AsyncSession,
        autocommit=False,
        autoflush=False,
        expire_on_commit=False,
    )


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """
    Dependency function for FastAPI routes.

    Usage:
        @router.get("/example")
        async def example(db: AsyncSession = Depends(get_db)):
            ...
    """
    session_factory = get_sessionmaker()
    async with session_factory() as session:
        try:
            yield session
        finally:
            await session.close()
