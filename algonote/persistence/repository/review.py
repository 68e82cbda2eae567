"""PostgreSQL implementation of Review repository."""

from typing import List, Optional

import logfire
from sqlalchemy import desc, select
from sqlalchemy.ext.asyncio import AsyncSession

from algonote.domain.model import Review
from algonote.domain.repository import ReviewRepository
from algonote.domain.value import MemberId, ProblemId, ReviewId
from algonote.persistence.mappers import review_to_dict, row_to_review
from algonote.persistence.repository.tag_link import PostgresReviewTagRepository
from algonote.persistence.tables import reviews_table


class PostgresReviewRepository(ReviewRepository):
    """PostgreSQL implementation of ReviewRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session
        self.review_tags = PostgresReviewTagRepository(session)

    async def _with_tags(self, rows) -> List[Review]:
        """Build reviews, fetching tags for all rows in a single query."""
        if not rows:
            return []
        tag_map = await self.review_tags.find_by_owners([row.id for row in rows])
        return [
            row_to_review(row._asdict(), tags=tag_map.get(row.id, [])) for row in rows
        ]

    async def find_by_id(self, review_id: ReviewId) -> Optional[Review]:
        """Find a review by ID."""
        stmt = select(reviews_table).where(reviews_table.c.id == review_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()

        if not row:
            return None

        reviews = await self._with_tags([row])
        return reviews[0]

    async def find_by_member(self, member_id: MemberId) -> List[Review]:
        """Find reviews written by a member."""
        stmt = (
            select(reviews_table)
            .where(reviews_table.c.member_id == member_id)
            .order_by(desc(reviews_table.c.created_at))
        )
        result = await self.session.execute(stmt)
        return await self._with_tags(result.fetchall())

    async def find_by_problem(self, problem_id: ProblemId) -> List[Review]:
        """Find reviews of a problem."""
        stmt = (
            select(reviews_table)
            .where(reviews_table.c.problem_id == problem_id)
            .order_by(desc(reviews_table.c.created_at))
        )
        result = await self.session.execute(stmt)
        return await self._with_tags(result.fetchall())

    async def save(self, review: Review) -> Review:
        """Save a review row (create or update)."""
        with logfire.span("review_repository.save", review_id=str(review.id)):
            exists = await self.session.scalar(
                select(reviews_table.c.id).where(reviews_table.c.id == review.id)
            )

            review_dict = review_to_dict(review)

            if exists:
                stmt = (
                    reviews_table.update()
                    .where(reviews_table.c.id == review.id)
                    .values(**review_dict)
                )
            else:
                stmt = reviews_table.insert().values(**review_dict)
            await self.session.execute(stmt)

            await self.session.flush()
            return review
