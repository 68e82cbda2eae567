"""Domain value objects for algonote."""

from algonote.domain.value.identifiers import (
    MemberId,
    ProblemId,
    ProblemTagId,
    ReviewId,
    ReviewTagId,
    TagId,
)
from algonote.domain.value.types import (
    TAG_DELIMITER,
    TAG_NAME_MAX_LENGTH,
    TaggableType,
    TagName,
)

__all__ = [
    # Identifiers
    "MemberId",
    "TagId",
    "ProblemId",
    "ProblemTagId",
    "ReviewId",
    "ReviewTagId",
    # Types
    "TAG_DELIMITER",
    "TAG_NAME_MAX_LENGTH",
    "TaggableType",
    "TagName",
]
