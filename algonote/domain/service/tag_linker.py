"""Tag linker: wraps tags in join rows for a given aggregate."""

from datetime import datetime
from uuid import UUID, uuid4

from algonote.domain.model.tag import ProblemTag, ReviewTag, Tag
from algonote.domain.value import (
    ProblemId,
    ProblemTagId,
    ReviewId,
    ReviewTagId,
    TaggableType,
)

from .base import Service


class TagLinker(Service):
    """Builds ProblemTag/ReviewTag rows. Persists nothing."""

    def link(
        self, tags: list[Tag], owner_type: TaggableType, owner_id: UUID
    ) -> list[ProblemTag] | list[ReviewTag]:
        """Create one join row per tag, scoped to the owning aggregate.

        Args:
            tags: Resolved tags
            owner_type: Kind of the owning aggregate
            owner_id: ID of the owning problem or review

        Returns:
            Join rows in tag order
        """
        now = datetime.now()
        if owner_type is TaggableType.PROBLEM:
            return [
                ProblemTag(
                    id=ProblemTagId(uuid4()),
                    problem_id=ProblemId(owner_id),
                    tag_id=tag.id,
                    tag_name=tag.name,
                    created_at=now,
                )
                for tag in tags
            ]
        return [
            ReviewTag(
                id=ReviewTagId(uuid4()),
                review_id=ReviewId(owner_id),
                tag_id=tag.id,
                tag_name=tag.name,
                created_at=now,
            )
            for tag in tags
        ]
