"""PostgreSQL implementation of Problem repository."""

from typing import List, Optional

import logfire
from sqlalchemy import desc, select
from sqlalchemy.ext.asyncio import AsyncSession

from algonote.domain.model import Problem
from algonote.domain.repository import ProblemRepository
from algonote.domain.value import MemberId, ProblemId
from algonote.persistence.mappers import problem_to_dict, row_to_problem
from algonote.persistence.repository.tag_link import PostgresProblemTagRepository
from algonote.persistence.tables import problems_table


class PostgresProblemRepository(ProblemRepository):
    """PostgreSQL implementation of ProblemRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session
        self.problem_tags = PostgresProblemTagRepository(session)

    async def _with_tags(self, rows) -> List[Problem]:
        """Build problems, fetching tags for all rows in a single query."""
        if not rows:
            return []
        tag_map = await self.problem_tags.find_by_owners([row.id for row in rows])
        return [
            row_to_problem(row._asdict(), tags=tag_map.get(row.id, []))
            for row in rows
        ]

    async def find_by_id(self, problem_id: ProblemId) -> Optional[Problem]:
        """Find a problem by ID."""
        with logfire.span("problem_repository.find_by_id", problem_id=str(problem_id)):
            stmt = select(problems_table).where(problems_table.c.id == problem_id)
            result = await self.session.execute(stmt)
            row = result.fetchone()

            if not row:
                return None

            problems = await self._with_tags([row])
            return problems[0]

    async def find_by_member(
        self, member_id: MemberId, limit: int = 100, offset: int = 0
    ) -> List[Problem]:
        """Find problems by a specific member."""
        stmt = (
            select(problems_table)
            .where(problems_table.c.member_id == member_id)
            .order_by(desc(problems_table.c.created_at))
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)
        return await self._with_tags(result.fetchall())

    async def find_all(self, limit: int = 100, offset: int = 0) -> List[Problem]:
        """Find all problems with pagination."""
        with logfire.span("problem_repository.find_all", limit=limit, offset=offset):
            stmt = (
                select(problems_table)
                .order_by(desc(problems_table.c.created_at))
                .limit(limit)
                .offset(offset)
            )
            result = await self.session.execute(stmt)
            problems = await self._with_tags(result.fetchall())
            logfire.info("Found problems", count=len(problems))
            return problems

    async def save(self, problem: Problem) -> Problem:
        """Save a problem row (create or update)."""
        with logfire.span("problem_repository.save", problem_id=str(problem.id)):
            exists = await self.session.scalar(
                select(problems_table.c.id).where(problems_table.c.id == problem.id)
            )

            problem_dict = problem_to_dict(problem)  # Note: tags are excluded by mapper

            if exists:
                stmt = (
                    problems_table.update()
                    .where(problems_table.c.id == problem.id)
                    .values(**problem_dict)
                )
            else:
                stmt = problems_table.insert().values(**problem_dict)
            await self.session.execute(stmt)

            await self.session.flush()
            return problem
