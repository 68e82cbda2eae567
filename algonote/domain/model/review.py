"""Review aggregate root."""

from datetime import datetime
from typing import ClassVar

from pydantic import Field

from algonote.domain.model.common import DomainModel
from algonote.domain.model.content import Content
from algonote.domain.model.tag import ReviewTag
from algonote.domain.value import (
    TAG_DELIMITER,
    MemberId,
    ProblemId,
    ReviewId,
    TaggableType,
    TagName,
)


class Review(DomainModel):
    """Review aggregate root.

    A member's write-up of a problem they recorded themselves. At creation
    member_id equals the problem's member_id; afterwards only member_id
    decides who may edit the review.
    """

    taggable_type: ClassVar[TaggableType] = TaggableType.REVIEW

    id: ReviewId
    member_id: MemberId
    problem_id: ProblemId
    title: str = Field(min_length=1, max_length=300)
    content: Content
    tags: list[ReviewTag] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)

    @property
    def tag_names(self) -> list[TagName]:
        """Tag names in attachment order."""
        return [link.tag_name for link in self.tags]

    @property
    def tag_text(self) -> str:
        """Canonical tag text, e.g. ``"dp,graph"``."""
        return TAG_DELIMITER.join(name.root for name in self.tag_names)
