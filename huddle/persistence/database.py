"""Async PostgreSQL engine and session factory (asyncpg driver)."""

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from huddle.config import Settings


def create_engine(settings: Settings) -> AsyncEngine:
    """Create the pooled async engine.

    SQL echo follows ``debug``. Connections identify themselves through
    ``application_name`` so they can be told apart in pg_stat_activity.
    """
    database = settings.database
    return create_async_engine(
        database.url,
        echo=settings.debug,
        pool_pre_ping=True,
        pool_size=database.pool_size,
        max_overflow=database.max_overflow,
        pool_timeout=database.pool_timeout,
        connect_args={
            "server_settings": {"application_name": database.application_name},
            "command_timeout": database.command_timeout,
        },
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Sessions keep loaded rows usable after commit and flush explicitly."""
    return async_sessionmaker(engine, expire_on_commit=False, autoflush=False)
