"""Content value object embedded in problems and reviews."""

from pydantic import field_validator

from algonote.domain.error import ContentError
from algonote.domain.value.common import ValueObject


class Content(ValueObject):
    """Body text of a problem or review.

    Content has no identity of its own. It is always embedded 1:1 in its
    aggregate and replaced as a whole on edit.
    """

    text: str

    @field_validator("text")
    @classmethod
    def validate_text(cls, v: str) -> str:
        """Reject blank text."""
        if not v.strip():
            raise ValueError("Content text must not be blank")
        return v

    @classmethod
    def create(cls, text: str | None) -> "Content":
        """Create content, raising ContentError for null or blank text."""
        if text is None or not text.strip():
            raise ContentError()
        return cls(text=text)

    def edit(self, text: str | None) -> "Content":
        """Return the edited content. The same rules as create apply."""
        return Content.create(text)
