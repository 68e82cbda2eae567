"""In-memory member repository for testing."""

from typing import Optional

from algonote.domain.model.member import Member
from algonote.domain.repository.member import MemberRepository
from algonote.domain.value import MemberId


class InMemoryMemberRepository(MemberRepository):
    """In-memory implementation of MemberRepository for testing."""

    def __init__(self) -> None:
        self._members: dict[MemberId, Member] = {}

    async def find_by_id(self, member_id: MemberId) -> Optional[Member]:
        """Find a member by ID."""
        return self._members.get(member_id)

    async def find_by_email(self, email: str) -> Optional[Member]:
        """Find a member by email."""
        for member in self._members.values():
            if member.email == email:
                return member
        return None

    async def save(self, member: Member) -> Member:
        """Save a member."""
        self._members[member.id] = member
        return member
