"""Integration tests for the PostgreSQL tag repositories.

Require DATABASE__URL pointing at a migrated database.
"""

import asyncio
from datetime import datetime
from uuid import uuid4

import pytest

from algonote.domain.error import TagConflictError
from algonote.domain.model import Tag
from algonote.domain.repository import (
    MemberRepository,
    ProblemRepository,
    ProblemTagRepository,
    TagRepository,
)
from algonote.domain.service import TagLinker, TagRegistry
from algonote.domain.value import TagId, TaggableType, TagName
from tests.conftest import make_problem, seed_member
from tests.di import build_test_container
from tests.harness import create_env_fixture, requires_database

# Integration test fixture
integration_env = create_env_fixture(unmock={"persistence"})

pytestmark = requires_database


def _unique_name(prefix: str) -> TagName:
    return TagName(f"{prefix}-{uuid4().hex[:8]}")


class TestPostgresTagRepository:
    """Integration tests for PostgresTagRepository."""

    @pytest.mark.asyncio
    async def test_duplicate_name_raises_conflict_and_keeps_session(
        self, integration_env
    ):
        """A duplicate insert raises TagConflictError without poisoning the session."""
        # Arrange
        tag_repo = await integration_env.get(TagRepository)
        name = _unique_name("dp")
        original = await tag_repo.save(
            Tag(id=TagId(uuid4()), name=name, created_at=datetime.now())
        )

        # Act
        with pytest.raises(TagConflictError):
            await tag_repo.save(Tag(id=TagId(uuid4()), name=name, created_at=datetime.now()))

        # Assert - the enclosing transaction is still usable
        found = await tag_repo.find_by_name(name)
        assert found.id == original.id

    @pytest.mark.asyncio
    async def test_find_by_names_returns_existing_only(self, integration_env):
        """Bulk lookup skips unknown names."""
        tag_repo = await integration_env.get(TagRepository)
        known = _unique_name("graph")
        await tag_repo.save(Tag(id=TagId(uuid4()), name=known, created_at=datetime.now()))

        found = await tag_repo.find_by_names([known, _unique_name("missing")])

        assert [tag.name for tag in found] == [known]


class TestPostgresProblemTagRepository:
    """Integration tests for PostgresProblemTagRepository."""

    @pytest.mark.asyncio
    async def test_rows_round_trip_in_insertion_order(self, integration_env):
        """Join rows come back in insertion order with their tag names."""
        # Arrange
        member = await seed_member(await integration_env.get(MemberRepository))
        problem_repo = await integration_env.get(ProblemRepository)
        tag_repo = await integration_env.get(TagRepository)
        link_repo = await integration_env.get(ProblemTagRepository)

        problem = await problem_repo.save(make_problem(member.id))
        tags = [
            await tag_repo.save(
                Tag(id=TagId(uuid4()), name=_unique_name(prefix), created_at=datetime.now())
            )
            for prefix in ("zeta", "alpha")
        ]
        links = TagLinker().link(tags, TaggableType.PROBLEM, problem.id)

        # Act
        await link_repo.save_all(links)
        stored = await link_repo.find_by_owner(problem.id)
        reloaded = await problem_repo.find_by_id(problem.id)

        # Assert
        assert [link.tag_name for link in stored] == [tag.name for tag in tags]
        assert reloaded.tag_names == [tag.name for tag in tags]
        assert await link_repo.delete_all_for_owner(problem.id) == 2
        assert await link_repo.find_by_owner(problem.id) == []


class TestConcurrentResolve:
    """Two units of work creating the same brand-new tag at once."""

    @pytest.mark.asyncio
    async def test_parallel_resolves_share_one_tag_row(self):
        """Both requests get the same Tag and exactly one row is stored.

        The loser's INSERT waits on the winner's uncommitted row, fails once
        the winner commits, rolls back its SAVEPOINT and re-reads the winner.
        """
        container = build_test_container(unmock={"persistence"})
        name = _unique_name("union-find")

        async def resolve_in_own_request() -> Tag:
            # Leaving the request scope commits the session
            async with container() as request_container:
                registry = await request_container.get(TagRegistry)
                (tag,) = await registry.resolve([name.root])
            return tag

        try:
            # Act
            first, second = await asyncio.gather(
                resolve_in_own_request(), resolve_in_own_request()
            )

            # Assert
            assert first.id == second.id
            async with container() as request_container:
                tag_repo = await request_container.get(TagRepository)
                stored = await tag_repo.find_by_names([name])
            assert [tag.id for tag in stored] == [first.id]
        finally:
            await container.close()
