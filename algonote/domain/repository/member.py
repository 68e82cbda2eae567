"""Member repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from algonote.domain.model.member import Member
from algonote.domain.value import MemberId


class MemberRepository(ABC):
    """Repository for Member entities.

    Members are registered elsewhere; this contract is the directory the
    core reads from.
    """

    @abstractmethod
    async def find_by_id(self, member_id: MemberId) -> Optional[Member]:
        """Find a member by ID.

        Args:
            member_id: The member's unique identifier

        Returns:
            The member if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[Member]:
        """Find a member by email.

        Args:
            email: The member's email address

        Returns:
            The member if found, None otherwise
        """
        pass

    @abstractmethod
    async def save(self, member: Member) -> Member:
        """Save a member (create or update).

        Args:
            member: The member to save

        Returns:
            The saved member
        """
        pass
