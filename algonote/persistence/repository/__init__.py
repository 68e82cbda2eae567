"""PostgreSQL repository implementations."""

from algonote.persistence.repository.member import PostgresMemberRepository
from algonote.persistence.repository.problem import PostgresProblemRepository
from algonote.persistence.repository.review import PostgresReviewRepository
from algonote.persistence.repository.tag import PostgresTagRepository
from algonote.persistence.repository.tag_link import (
    PostgresProblemTagRepository,
    PostgresReviewTagRepository,
)

__all__ = [
    "PostgresMemberRepository",
    "PostgresTagRepository",
    "PostgresProblemRepository",
    "PostgresProblemTagRepository",
    "PostgresReviewRepository",
    "PostgresReviewTagRepository",
]
