"""PostgreSQL implementation of Tag repository."""

from typing import Optional

import logfire
from sqlalchemy import insert, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from algonote.domain.error import TagConflictError
from algonote.domain.model.tag import Tag
from algonote.domain.repository.tag import TagRepository
from algonote.domain.value import TagName
from algonote.persistence.mappers import row_to_tag, tag_to_dict
from algonote.persistence.tables import tags_table


class PostgresTagRepository(TagRepository):
    """PostgreSQL implementation of TagRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: Async database session
        """
        self.session = session

    async def save(self, tag: Tag) -> Tag:
        """Insert a new tag.

        The insert runs in a SAVEPOINT so that losing a race on the unique
        name only rolls back this statement, not the caller's transaction.

        Raises:
            TagConflictError: If a tag with the same name already exists
        """
        try:
            async with self.session.begin_nested():
                await self.session.execute(insert(tags_table).values(**tag_to_dict(tag)))
        except IntegrityError as e:
            logfire.info("Tag insert conflicted", tag_name=tag.name.root, error=str(e))
            raise TagConflictError(tag.name.root) from e
        return tag

    async def find_by_name(self, name: TagName) -> Optional[Tag]:
        """Find tag by name."""
        stmt = select(tags_table).where(tags_table.c.name == name.root)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_tag(row._asdict()) if row else None

    async def find_by_names(self, names: list[TagName]) -> list[Tag]:
        """Find multiple tags by names in a single query."""
        if not names:
            return []

        stmt = select(tags_table).where(
            tags_table.c.name.in_([name.root for name in names])
        )
        result = await self.session.execute(stmt)
        rows = result.fetchall()
        return [row_to_tag(row._asdict()) for row in rows]
