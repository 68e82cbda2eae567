"""In-memory repository implementations for testing."""

from .member import InMemoryMemberRepository
from .problem import InMemoryProblemRepository
from .review import InMemoryReviewRepository
from .tag import InMemoryTagRepository
from .tag_link import InMemoryProblemTagRepository, InMemoryReviewTagRepository

__all__ = [
    "InMemoryMemberRepository",
    "InMemoryProblemRepository",
    "InMemoryProblemTagRepository",
    "InMemoryReviewRepository",
    "InMemoryReviewTagRepository",
    "InMemoryTagRepository",
]
