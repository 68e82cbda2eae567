"""Domain value objects for algonote.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

from enum import Enum

from pydantic import field_validator

from algonote.domain.value.common import RootValueObject

TAG_DELIMITER = ","
TAG_NAME_MAX_LENGTH = 255


class TaggableType(str, Enum):
    """Kind of aggregate a tag can be attached to."""

    PROBLEM = "problem"
    REVIEW = "review"


class TagName(RootValueObject[str]):
    """Name of a shared tag.

    1-255 characters (the column width), no surrounding whitespace and no
    delimiter, so that a list of names always survives a render/parse round trip.
    Examples: 'dp', 'graph', 'two pointers'
    """

    @field_validator("root")
    @classmethod
    def validate_tag_name(cls, v: str) -> str:
        """Validate tag name format."""
        if not v or len(v) > TAG_NAME_MAX_LENGTH:
            raise ValueError(f"Tag name must be 1-{TAG_NAME_MAX_LENGTH} characters")
        if v != v.strip():
            raise ValueError("Tag name must not start or end with whitespace")
        if TAG_DELIMITER in v:
            raise ValueError(f"Tag name must not contain '{TAG_DELIMITER}'")
        return v
