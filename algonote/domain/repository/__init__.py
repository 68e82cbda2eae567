"""Repository interfaces for algonote domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the persistence layer.
"""

from algonote.domain.repository.member import MemberRepository
from algonote.domain.repository.problem import ProblemRepository
from algonote.domain.repository.review import ReviewRepository
from algonote.domain.repository.tag import TagRepository
from algonote.domain.repository.tag_link import (
    ProblemTagRepository,
    ReviewTagRepository,
    TagLinkRepository,
)

__all__ = [
    "MemberRepository",
    "TagRepository",
    "TagLinkRepository",
    "ProblemTagRepository",
    "ReviewTagRepository",
    "ProblemRepository",
    "ReviewRepository",
]
