"""Unit tests for TagRegistry."""

from typing import Optional

import pytest
from algonote.config import TagSettings
from algonote.domain.error import TagConflictError, TagNameError
from algonote.domain.model.tag import Tag
from algonote.domain.repository import TagRepository
from algonote.domain.service import TagRegistry
from algonote.domain.value import TagName
from algonote.persistence.repository.inmemory import InMemoryTagRepository
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class StaleReadTagRepository(InMemoryTagRepository):
    """Tag repository whose bulk lookup misses tags another request just created."""

    async def find_by_names(self, names: list[TagName]) -> list[Tag]:
        return []


class AlwaysConflictingTagRepository(InMemoryTagRepository):
    """Tag repository that loses every insert race and never sees the winner."""

    def __init__(self) -> None:
        super().__init__()
        self.save_attempts = 0

    async def save(self, tag: Tag) -> Tag:
        self.save_attempts += 1
        raise TagConflictError(tag.name.root)

    async def find_by_name(self, name: TagName) -> Optional[Tag]:
        return None


class TestResolve:
    """Tests for resolve."""

    @pytest.mark.asyncio
    async def test_creates_missing_tags_in_order(self, unit_env):
        """Unknown names are created and returned in input order."""
        # Arrange
        registry = await unit_env.get(TagRegistry)
        tag_repo = await unit_env.get(TagRepository)

        # Act
        tags = await registry.resolve(["graph", "dp"])

        # Assert
        assert [tag.name.root for tag in tags] == ["graph", "dp"]
        assert tag_repo.count() == 2

    @pytest.mark.asyncio
    async def test_is_idempotent(self, unit_env):
        """Resolving the same names twice reuses the same tags."""
        registry = await unit_env.get(TagRegistry)
        tag_repo = await unit_env.get(TagRepository)

        first = await registry.resolve(["dp", "graph"])
        second = await registry.resolve(["graph", "dp"])

        assert {tag.id for tag in first} == {tag.id for tag in second}
        assert tag_repo.count() == 2

    @pytest.mark.asyncio
    async def test_collapses_repeated_names(self, unit_env):
        """A repeated name yields a single tag at its first position."""
        registry = await unit_env.get(TagRegistry)

        tags = await registry.resolve(["dp", "graph", "dp"])

        assert [tag.name.root for tag in tags] == ["dp", "graph"]

    @pytest.mark.asyncio
    async def test_empty_input_touches_nothing(self, unit_env):
        """No names means no tags and no writes."""
        registry = await unit_env.get(TagRegistry)
        tag_repo = await unit_env.get(TagRepository)

        assert await registry.resolve([]) == []
        assert tag_repo.count() == 0

    @pytest.mark.asyncio
    async def test_rejects_oversized_name(self, unit_env):
        """A name wider than the column fails as TagNameError before anything is created."""
        registry = await unit_env.get(TagRegistry)
        tag_repo = await unit_env.get(TagRepository)

        with pytest.raises(TagNameError) as exc_info:
            await registry.resolve(["dp", "x" * 256])
        assert exc_info.value.name == "x" * 256
        assert tag_repo.count() == 0


class TestConcurrentCreation:
    """Tests for recovering from lost tag-creation races."""

    @pytest.mark.asyncio
    async def test_lost_race_returns_winner(self):
        """A conflicting insert falls back to the tag that won the race."""
        # Arrange - another request already created "dp", but our bulk read missed it
        tag_repo = StaleReadTagRepository()
        winner = (await TagRegistry(tag_repo, TagSettings()).resolve(["dp"]))[0]
        registry = TagRegistry(tag_repo, TagSettings())

        # Act
        tags = await registry.resolve(["dp", "graph"])

        # Assert
        assert tags[0].id == winner.id
        assert tag_repo.count() == 2

    @pytest.mark.asyncio
    async def test_gives_up_after_retry_budget(self):
        """Conflicts that never resolve surface as TagConflictError."""
        tag_repo = AlwaysConflictingTagRepository()
        registry = TagRegistry(tag_repo, TagSettings(conflict_retries=2))

        with pytest.raises(TagConflictError) as exc_info:
            await registry.resolve(["dp"])

        assert exc_info.value.name == "dp"
        assert tag_repo.save_attempts == 2
