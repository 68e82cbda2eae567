"""In-memory tag join-row repositories for testing."""

from collections import defaultdict
from typing import Generic, TypeVar
from uuid import UUID

from sqlalchemy.exc import IntegrityError

from algonote.domain.model import ProblemTag, ReviewTag, TagLink
from algonote.domain.repository import ProblemTagRepository, ReviewTagRepository

L = TypeVar("L", bound=TagLink)


class _InMemoryTagLinks(Generic[L]):
    """Join rows kept in insertion order, unique per (owner, tag)."""

    def __init__(self) -> None:
        self._links: list[L] = []

    async def save_all(self, links: list[L]) -> list[L]:
        """Insert join rows.

        Raises:
            IntegrityError: If an owner would be linked to the same tag twice
        """
        existing = {(link.owner_id, link.tag_id) for link in self._links}
        for link in links:
            key = (link.owner_id, link.tag_id)
            if key in existing:
                raise IntegrityError("Duplicate tag link", None, Exception())
            existing.add(key)
        self._links.extend(links)
        return list(links)

    async def find_by_owner(self, owner_id: UUID) -> list[L]:
        """Find the join rows of an aggregate in insertion order."""
        return [link for link in self._links if link.owner_id == owner_id]

    async def find_by_owners(self, owner_ids: list[UUID]) -> dict[UUID, list[L]]:
        """Group the join rows of several aggregates by owner."""
        wanted = set(owner_ids)
        links: dict[UUID, list[L]] = defaultdict(list)
        for link in self._links:
            if link.owner_id in wanted:
                links[link.owner_id].append(link)
        return links

    async def delete_all_for_owner(self, owner_id: UUID) -> int:
        """Delete every join row of an aggregate."""
        kept = [link for link in self._links if link.owner_id != owner_id]
        deleted = len(self._links) - len(kept)
        self._links = kept
        return deleted

    def count(self) -> int:
        """Number of stored join rows."""
        return len(self._links)


class InMemoryProblemTagRepository(_InMemoryTagLinks[ProblemTag], ProblemTagRepository):
    """In-memory implementation of ProblemTagRepository."""


class InMemoryReviewTagRepository(_InMemoryTagLinks[ReviewTag], ReviewTagRepository):
    """In-memory implementation of ReviewTagRepository."""
