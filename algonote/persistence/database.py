"""Async engine and session factory."""

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from algonote.config import Settings


def create_engine(settings: Settings) -> AsyncEngine:
    """Engine for ``settings.database``; SQL is echoed when ``debug`` is set."""
    db = settings.database
    return create_async_engine(
        db.url,
        echo=settings.debug,
        pool_pre_ping=True,
        pool_size=db.pool_size,
        max_overflow=db.max_overflow,
    )


def create_session_factory(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    """Session factory for one-session-per-request units of work.

    Objects stay usable after commit and nothing is flushed implicitly, so
    the tag repository's SAVEPOINT is the only place a partial write can
    hit the database before the request commits.
    """
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )
