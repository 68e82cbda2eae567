"""Problem aggregate root.

A problem is an algorithm exercise a member recorded, optionally pointing
at the judge site it came from.
"""

from datetime import datetime
from typing import ClassVar, Optional

from pydantic import Field

from algonote.domain.model.common import DomainModel
from algonote.domain.model.content import Content
from algonote.domain.model.tag import ProblemTag
from algonote.domain.value import (
    TAG_DELIMITER,
    MemberId,
    ProblemId,
    TaggableType,
    TagName,
)


class Problem(DomainModel):
    """Problem aggregate root.

    Owns its Content and its ProblemTag rows. The owning member is fixed at
    creation and is the only member allowed to edit the problem or review it.
    """

    taggable_type: ClassVar[TaggableType] = TaggableType.PROBLEM

    id: ProblemId
    member_id: MemberId
    title: str = Field(min_length=1, max_length=300)
    content: Content
    site: Optional[str] = Field(default=None, max_length=100)
    url: Optional[str] = None
    tags: list[ProblemTag] = Field(default_factory=list)
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
