"""Tag registry: resolves tag names to shared Tag entities."""

from collections.abc import Sequence
from datetime import datetime
from uuid import uuid4

import logfire
from pydantic import ValidationError

from algonote.config import TagSettings
from algonote.domain.error import TagConflictError, TagNameError
from algonote.domain.model.tag import Tag
from algonote.domain.repository import TagRepository
from algonote.domain.value import TagId, TagName

from .base import Service
from .tag_parser import TagNameParser


class TagRegistry(Service):
    """Domain service guaranteeing one Tag per distinct name."""

    def __init__(self, tag_repository: TagRepository, tag_settings: TagSettings) -> None:
        """Initialize tag registry.

        Args:
            tag_repository: Tag repository
            tag_settings: Tag settings (conflict retry budget)
        """
        self.tag_repository = tag_repository
        self.conflict_retries = tag_settings.conflict_retries

    async def resolve(self, names: Sequence[str]) -> list[Tag]:
        """Resolve names to tags, creating the ones that don't exist yet.

        Repeated names collapse to their first occurrence, so the result has
        one Tag per distinct name in input order.

        Args:
            names: Tag names, typically from TagNameParser.parse

        Returns:
            Tags in the order of first occurrence

        Raises:
            TagNameError: If a name cannot be stored, e.g. it is too long
            TagConflictError: If creation kept losing races past the retry budget
        """
        tag_names = [_to_tag_name(name) for name in TagNameParser.distinct(names)]
        if not tag_names:
            return []

        with logfire.span(
            "tag_registry.resolve", tags=[name.root for name in tag_names]
        ):
            existing = await self.tag_repository.find_by_names(tag_names)
            by_name = {tag.name.root: tag for tag in existing}

            tags = []
            created = 0
            for name in tag_names:
                tag = by_name.get(name.root)
                if tag is None:
                    tag = await self._create(name)
                    by_name[name.root] = tag
                    created += 1
                tags.append(tag)

            logfire.info("Tags resolved", count=len(tags), created=created)
            return tags

    async def _create(self, name: TagName) -> Tag:
        """Create a tag, falling back to the concurrent winner on conflict."""
        for attempt in range(1, self.conflict_retries + 1):
            try:
                return await self.tag_repository.save(
                    Tag(id=TagId(uuid4()), name=name, created_at=datetime.now())
                )
            except TagConflictError:
                logfire.info(
                    "Tag created concurrently, fetching winner",
                    tag_name=name.root,
                    attempt=attempt,
                )
                winner = await self.tag_repository.find_by_name(name)
                if winner is not None:
                    return winner

        logfire.error("Tag conflict retries exhausted", tag_name=name.root)
        raise TagConflictError(name.root)


def _to_tag_name(name: str) -> TagName:
    try:
        return TagName(name)
    except ValidationError as e:
        raise TagNameError(name, e.errors()[0]["msg"]) from e
