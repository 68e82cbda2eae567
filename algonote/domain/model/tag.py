"""Tag entity and the join rows that attach tags to problems and reviews."""

from datetime import datetime

from pydantic import Field

from algonote.domain.model.common import DomainModel
from algonote.domain.value import (
    ProblemId,
    ProblemTagId,
    ReviewId,
    ReviewTagId,
    TagId,
    TagName,
)


class Tag(DomainModel):
    """Shared tag, unique by name.

    Tags are created lazily the first time a name is used and are never
    deleted by the core, even when no problem or review references them.
    """

    id: TagId
    name: TagName
    created_at: datetime = Field(default_factory=datetime.now)


class TagLink(DomainModel):
    """Fields shared by every tag join row.

    The tag name is denormalized so an aggregate can render its tag text
    without another lookup.
    """

    tag_id: TagId
    tag_name: TagName
    created_at: datetime = Field(default_factory=datetime.now)


class ProblemTag(TagLink):
    """Join row linking one problem to one tag."""

    id: ProblemTagId
    problem_id: ProblemId

    @property
    def owner_id(self) -> ProblemId:
        return self.problem_id


class ReviewTag(TagLink):
    """Join row linking one review to one tag."""

    id: ReviewTagId
    review_id: ReviewId

    @property
    def owner_id(self) -> ReviewId:
        return self.review_id
