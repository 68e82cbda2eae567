"""Member entity.

Members are registered outside this service; the core only reads them to
resolve who is acting and who owns a problem or review.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from algonote.domain.model.common import DomainModel
from algonote.domain.value import MemberId


class Member(DomainModel):
    """A registered member who writes problems and reviews."""

    id: MemberId
    email: str = Field(min_length=3, max_length=255)  # Unique, used for lookup
    name: str = Field(min_length=1, max_length=100)
    picture: Optional[str] = None
    created_at: datetime = Field(default_factory=datetime.now)
