"""Member domain service."""

import logfire

from algonote.domain.error import NotFoundError
from algonote.domain.model import Member
from algonote.domain.repository import MemberRepository
from algonote.domain.value import MemberId

from .base import Service


class MemberService(Service):
    """Domain service for resolving members."""

    def __init__(self, member_repository: MemberRepository) -> None:
        """Initialize member service.

        Args:
            member_repository: Member repository
        """
        self.member_repository = member_repository

    async def get_by_id(self, member_id: MemberId) -> Member:
        """Get member by ID.

        Args:
            member_id: Member ID

        Returns:
            Member entity

        Raises:
            NotFoundError: If member not found
        """
        with logfire.span("member_service.get_by_id", member_id=str(member_id)):
            member = await self.member_repository.find_by_id(member_id)
            if not member:
                logfire.warn("Member not found", member_id=str(member_id))
                raise NotFoundError("Member", str(member_id))
            return member

    async def get_by_email(self, email: str) -> Member | None:
        """Get member by email.

        Args:
            email: Member email

        Returns:
            Member if found, None otherwise
        """
        with logfire.span("member_service.get_by_email"):
            member = await self.member_repository.find_by_email(email)
            if member is None:
                logfire.warn("Member not found by email")
            return member
