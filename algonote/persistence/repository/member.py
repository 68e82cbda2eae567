"""PostgreSQL implementation of Member repository."""

from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from algonote.domain.model import Member
from algonote.domain.repository import MemberRepository
from algonote.domain.value import MemberId
from algonote.persistence.mappers import member_to_dict, row_to_member
from algonote.persistence.tables import members_table


class PostgresMemberRepository(MemberRepository):
    """PostgreSQL implementation of MemberRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, member_id: MemberId) -> Optional[Member]:
        """Find a member by ID."""
        stmt = select(members_table).where(members_table.c.id == member_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_member(dict(row)) if row else None

    async def find_by_email(self, email: str) -> Optional[Member]:
        """Find a member by email."""
        stmt = select(members_table).where(members_table.c.email == email)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_member(dict(row)) if row else None

    async def save(self, member: Member) -> Member:
        """Save a member (create or update)."""
        existing = await self.find_by_id(member.id)

        member_dict = member_to_dict(member)

        if existing:
            stmt = (
                members_table.update()
                .where(members_table.c.id == member.id)
                .values(**member_dict)
            )
        else:
            stmt = members_table.insert().values(**member_dict)
        await self.session.execute(stmt)

        await self.session.flush()
        return member
