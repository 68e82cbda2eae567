"""Parsing and rendering of free-text tag lists."""

from collections.abc import Iterable

from algonote.domain.value import TAG_DELIMITER, TagName


class TagNameParser:
    """Turns comma-separated tag text into tag names and back.

    ``"dp, graph ,,greedy"`` parses to ``["dp", "graph", "greedy"]`` and the
    canonical text of that input is ``"dp,graph,greedy"``.
    """

    @staticmethod
    def parse(tag_text: str | None) -> list[str]:
        """Split tag text into trimmed, non-blank names in input order.

        Repeated names are kept; collapsing them is the registry's job.
        """
        if tag_text is None or not tag_text.strip():
            return []
        names = (piece.strip() for piece in tag_text.split(TAG_DELIMITER))
        return [name for name in names if name]

    @staticmethod
    def render(names: Iterable[str | TagName]) -> str:
        """Join names with the delimiter."""
        return TAG_DELIMITER.join(
            name.root if isinstance(name, TagName) else name for name in names
        )

    @staticmethod
    def distinct(names: Iterable[str]) -> list[str]:
        """Drop repeated names, keeping the first occurrence."""
        return list(dict.fromkeys(names))

    @classmethod
    def canonicalize(cls, tag_text: str | None) -> str:
        """Canonical tag text of raw input: parsed, de-duplicated, re-joined."""
        return cls.render(cls.distinct(cls.parse(tag_text)))
