"""Unit tests for TagDiffUpdater."""

import pytest

from algonote.domain.repository import (
    MemberRepository,
    ProblemRepository,
    ProblemTagRepository,
    TagRepository,
)
from algonote.domain.service import ProblemService, TagDiffUpdater
from tests.conftest import seed_member
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


async def _tagged_problem(unit_env, tag_text: str):
    member = await seed_member(await unit_env.get(MemberRepository))
    problem_service = await unit_env.get(ProblemService)
    return await problem_service.register(
        member_id=member.id,
        title="Two Sum",
        content_text="Find two numbers that add up to target.",
        tag_text=tag_text,
    )


class TestReconcile:
    """Tests for reconcile."""

    @pytest.mark.asyncio
    async def test_equivalent_text_is_a_no_op(self, unit_env):
        """Whitespace and repeats don't count as a change."""
        # Arrange
        problem = await _tagged_problem(unit_env, "dp,graph")
        updater = await unit_env.get(TagDiffUpdater)
        link_repo = await unit_env.get(ProblemTagRepository)

        # Act
        result = await updater.reconcile(problem, " dp , graph,dp ")

        # Assert
        assert result.unchanged is True
        assert [link.id for link in result.tags] == [link.id for link in problem.tags]
        stored = await link_repo.find_by_owner(problem.id)
        assert [link.id for link in stored] == [link.id for link in problem.tags]

    @pytest.mark.asyncio
    async def test_changed_text_replaces_rows(self, unit_env):
        """A different tag set replaces every join row."""
        problem = await _tagged_problem(unit_env, "dp,graph")
        updater = await unit_env.get(TagDiffUpdater)
        link_repo = await unit_env.get(ProblemTagRepository)

        result = await updater.reconcile(problem, "graph, greedy")

        assert result.unchanged is False
        assert [link.tag_name.root for link in result.tags] == ["graph", "greedy"]
        stored = await link_repo.find_by_owner(problem.id)
        assert [link.tag_name.root for link in stored] == ["graph", "greedy"]
        assert not {link.id for link in stored} & {link.id for link in problem.tags}

    @pytest.mark.asyncio
    async def test_reorder_is_a_change(self, unit_env):
        """Tag text is compared in order."""
        problem = await _tagged_problem(unit_env, "dp,graph")
        updater = await unit_env.get(TagDiffUpdater)

        result = await updater.reconcile(problem, "graph,dp")

        assert result.unchanged is False
        assert [link.tag_name.root for link in result.tags] == ["graph", "dp"]

    @pytest.mark.asyncio
    async def test_blank_text_clears_tags(self, unit_env):
        """Blank tag text removes every row but keeps the shared tags."""
        problem = await _tagged_problem(unit_env, "dp")
        updater = await unit_env.get(TagDiffUpdater)
        tag_repo = await unit_env.get(TagRepository)
        problem_repo = await unit_env.get(ProblemRepository)

        result = await updater.reconcile(problem, "   ")

        assert result.unchanged is False
        assert result.tags == []
        reloaded = await problem_repo.find_by_id(problem.id)
        assert reloaded.tags == []
        assert tag_repo.count() == 1

    @pytest.mark.asyncio
    async def test_untagged_and_blank_is_a_no_op(self, unit_env):
        """No tags before and none requested is unchanged."""
        problem = await _tagged_problem(unit_env, None)
        updater = await unit_env.get(TagDiffUpdater)

        result = await updater.reconcile(problem, None)

        assert result.unchanged is True
        assert result.tags == []

    @pytest.mark.asyncio
    async def test_invalid_name_leaves_rows_in_place(self, unit_env):
        """A failure while resolving the new set keeps the current rows."""
        problem = await _tagged_problem(unit_env, "dp")
        updater = await unit_env.get(TagDiffUpdater)
        link_repo = await unit_env.get(ProblemTagRepository)

        with pytest.raises(ValueError):
            await updater.reconcile(problem, "graph," + "x" * 51)

        stored = await link_repo.find_by_owner(problem.id)
        assert [link.tag_name.root for link in stored] == ["dp"]
