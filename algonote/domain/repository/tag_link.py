"""Tag join-row repository interfaces.

Join rows belong to exactly one aggregate and are only ever replaced as a
whole: everything owned by an aggregate is deleted, then the new set is
inserted.
"""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar
from uuid import UUID

from algonote.domain.model.tag import ProblemTag, ReviewTag, TagLink

L = TypeVar("L", bound=TagLink)


class TagLinkRepository(ABC, Generic[L]):
    """Repository for the tag join rows of one aggregate kind."""

    @abstractmethod
    async def save_all(self, links: list[L]) -> list[L]:
        """Insert join rows.

        Args:
            links: Join rows to insert

        Returns:
            The inserted join rows
        """
        pass

    @abstractmethod
    async def find_by_owner(self, owner_id: UUID) -> list[L]:
        """Find the join rows owned by an aggregate, in insertion order.

        Args:
            owner_id: Problem or review ID

        Returns:
            Join rows of the aggregate
        """
        pass

    @abstractmethod
    async def find_by_owners(self, owner_ids: list[UUID]) -> dict[UUID, list[L]]:
        """Fetch join rows for many aggregates at once.

        Owners without rows are absent from the result.

        Args:
            owner_ids: Problem or review IDs

        Returns:
            Dict mapping owner ID to its join rows in insertion order
        """
        pass

    @abstractmethod
    async def delete_all_for_owner(self, owner_id: UUID) -> int:
        """Delete every join row owned by an aggregate.

        Args:
            owner_id: Problem or review ID

        Returns:
            Number of deleted rows
        """
        pass


class ProblemTagRepository(TagLinkRepository[ProblemTag]):
    """Repository for ProblemTag join rows."""


class ReviewTagRepository(TagLinkRepository[ReviewTag]):
    """Repository for ReviewTag join rows."""
