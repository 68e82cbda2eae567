"""Unit tests for the Content value object."""

import pytest
from pydantic import ValidationError

from algonote.domain.error import ContentError
from algonote.domain.model import Content


class TestContentCreate:
    """Tests for Content.create."""

    def test_create_keeps_text_verbatim(self):
        """Text is stored as given, including surrounding whitespace."""
        content = Content.create("  use a hash map  ")

        assert content.text == "  use a hash map  "

    @pytest.mark.parametrize("text", [None, "", "   ", "\n\t"])
    def test_create_rejects_null_or_blank(self, text):
        """Null or blank text should raise ContentError."""
        with pytest.raises(ContentError):
            Content.create(text)

    def test_constructor_rejects_blank(self):
        """Direct construction enforces the same rule."""
        with pytest.raises(ValidationError):
            Content(text="  ")


class TestContentEdit:
    """Tests for Content.edit."""

    def test_edit_returns_new_content(self):
        """Editing produces a new value and leaves the original untouched."""
        original = Content.create("first draft")

        edited = original.edit("second draft")

        assert edited.text == "second draft"
        assert original.text == "first draft"

    def test_edit_rejects_blank(self):
        """Editing to blank text should raise ContentError."""
        with pytest.raises(ContentError):
            Content.create("first draft").edit(" ")
