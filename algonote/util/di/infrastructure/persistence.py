"""Persistence infrastructure providers."""

from collections.abc import AsyncIterator

from dishka import Scope, provide
import logfire
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker

from algonote.config import Settings
from algonote.domain.repository import (
    MemberRepository,
    ProblemRepository,
    ProblemTagRepository,
    ReviewRepository,
    ReviewTagRepository,
    TagRepository,
)
from algonote.persistence.database import create_engine, create_session_factory
from algonote.persistence.repository import (
    PostgresMemberRepository,
    PostgresProblemRepository,
    PostgresProblemTagRepository,
    PostgresReviewRepository,
    PostgresReviewTagRepository,
    PostgresTagRepository,
)
from algonote.util.di.base import ProviderBase
from algonote.util.observability import instrument_sqlalchemy


class PersistenceProvider(ProviderBase):
    """Persistence component base."""

    __mock_component__ = "persistence"


class ProdPersistenceProvider(PersistenceProvider):
    """Production persistence provider using PostgreSQL."""

    __is_mock__ = False

    scope = Scope.APP

    @provide(scope=Scope.APP)
    def get_engine(self, settings: Settings) -> AsyncEngine:
        """Provide database engine."""
        engine = create_engine(settings)
        instrument_sqlalchemy(engine)
        return engine

    @provide(scope=Scope.APP)
    def get_session_factory(
        self, engine: AsyncEngine
    ) -> async_sessionmaker[AsyncSession]:
        """Provide session factory."""
        return create_session_factory(engine)

    @provide(scope=Scope.REQUEST)
    async def get_session(
        self, session_factory: async_sessionmaker[AsyncSession]
    ) -> AsyncIterator[AsyncSession]:
        """Provide database session for request scope.

        This is the unit of work: the session is committed at the end of the
        request if no exception occurred, or rolled back if one was raised.
        """
        async with session_factory() as session:
            try:
                yield session
                await session.commit()
                logfire.info("Session committed")
            except Exception as e:
                logfire.warn("Session rollback", error=str(e))
                await session.rollback()
                raise

    @provide(scope=Scope.REQUEST)
    def get_member_repository(self, session: AsyncSession) -> MemberRepository:
        """Provide Member repository."""
        return PostgresMemberRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_tag_repository(self, session: AsyncSession) -> TagRepository:
        """Provide Tag repository."""
        return PostgresTagRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_problem_repository(self, session: AsyncSession) -> ProblemRepository:
        """Provide Problem repository."""
        return PostgresProblemRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_problem_tag_repository(self, session: AsyncSession) -> ProblemTagRepository:
        """Provide ProblemTag repository."""
        return PostgresProblemTagRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_review_repository(self, session: AsyncSession) -> ReviewRepository:
        """Provide Review repository."""
        return PostgresReviewRepository(session)

    @provide(scope=Scope.REQUEST)
    def get_review_tag_repository(self, session: AsyncSession) -> ReviewTagRepository:
        """Provide ReviewTag repository."""
        return PostgresReviewTagRepository(session)
