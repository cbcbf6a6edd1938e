"""Async engine and session factory for PostgreSQL."""

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from showcase.config import Settings


def create_engine(settings: Settings) -> AsyncEngine:
    """Create the async engine.

    Every connection runs with ``timezone = 'UTC'`` so that ``NOW()``
    defaults and ``vote_day`` agree with the UTC day windows computed in
    the domain layer.

    Args:
        settings: Application settings with database URL and pool sizes

    Returns:
        Configured async engine
    """
    return create_async_engine(
        settings.database_url,
        echo=settings.debug,
        pool_pre_ping=True,
        pool_size=settings.database.pool_size,
        max_overflow=settings.database.max_overflow,
        connect_args={"server_settings": {"timezone": "UTC"}},
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Create the session factory.

    Sessions never autoflush; repositories flush after each statement so
    constraint violations surface inside the repository call.

    Args:
        engine: Database engine

    Returns:
        Session factory, one session per request scope
    """
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )
