"""PostgreSQL implementations of the tag join-row repositories."""

from collections import defaultdict
from typing import Any, Callable, Dict, Generic, TypeVar
from uuid import UUID

import logfire
from sqlalchemy import Column, Table, delete, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from algonote.domain.model import ProblemTag, ReviewTag, TagLink
from algonote.domain.repository import ProblemTagRepository, ReviewTagRepository
from algonote.persistence.mappers import (
    problem_tag_to_dict,
    review_tag_to_dict,
    row_to_problem_tag,
    row_to_review_tag,
)
from algonote.persistence.tables import (
    problem_tags_table,
    review_tags_table,
    tags_table,
)

L = TypeVar("L", bound=TagLink)


class _PostgresTagLinks(Generic[L]):
    """Shared queries for a join table keyed by its owning aggregate."""

    table: Table
    owner_column: str
    to_dict: Callable[[L], Dict[str, Any]]
    from_row: Callable[[Dict[str, Any]], L]

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    @property
    def _owner(self) -> Column:
        return self.table.c[self.owner_column]

    async def save_all(self, links: list[L]) -> list[L]:
        """Insert join rows in order."""
        if not links:
            return []

        with logfire.span(f"{self.table.name}.save_all", count=len(links)):
            # One statement per row keeps seq in list order
            for link in links:
                await self.session.execute(
                    insert(self.table).values(**self.to_dict(link))
                )
            await self.session.flush()
            return links

    async def find_by_owner(self, owner_id: UUID) -> list[L]:
        """Find the join rows of an aggregate in insertion order."""
        return (await self.find_by_owners([owner_id])).get(owner_id, [])

    async def find_by_owners(self, owner_ids: list[UUID]) -> dict[UUID, list[L]]:
        """Fetch join rows for many aggregates in a single query.

        Args:
            owner_ids: Problem or review IDs

        Returns:
            Dict mapping owner ID -> join rows in insertion order
        """
        if not owner_ids:
            return {}

        stmt = (
            select(self.table, tags_table.c.name.label("tag_name"))
            .select_from(self.table)
            .join(tags_table, self.table.c.tag_id == tags_table.c.id)
            .where(self._owner.in_(owner_ids))
            .order_by(self.table.c.seq)
        )
        result = await self.session.execute(stmt)

        links: dict[UUID, list[L]] = defaultdict(list)
        for row in result.mappings():
            links[row[self.owner_column]].append(self.from_row(dict(row)))
        return links

    async def delete_all_for_owner(self, owner_id: UUID) -> int:
        """Delete every join row of an aggregate."""
        stmt = delete(self.table).where(self._owner == owner_id)
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount or 0


class PostgresProblemTagRepository(
    _PostgresTagLinks[ProblemTag], ProblemTagRepository
):
    """PostgreSQL implementation of ProblemTagRepository."""

    table = problem_tags_table
    owner_column = "problem_id"
    to_dict = staticmethod(problem_tag_to_dict)
    from_row = staticmethod(row_to_problem_tag)


class PostgresReviewTagRepository(_PostgresTagLinks[ReviewTag], ReviewTagRepository):
    """PostgreSQL implementation of ReviewTagRepository."""

    table = review_tags_table
    owner_column = "review_id"
    to_dict = staticmethod(review_tag_to_dict)
    from_row = staticmethod(row_to_review_tag)
