"""Unit tests for CreateProblemUseCase."""

from uuid import uuid4

import pytest

from algonote.application.usecase.problem import (
    CreateProblemRequest,
    CreateProblemUseCase,
)
from algonote.domain.error import ContentError, NotFoundError
from algonote.domain.repository import MemberRepository
from tests.conftest import seed_member
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestCreateProblemUseCase:
    """Tests for CreateProblemUseCase."""

    @pytest.mark.asyncio
    async def test_create_problem_success(self, unit_env):
        """Creating a problem returns its canonical tag text."""
        # Arrange
        member = await seed_member(await unit_env.get(MemberRepository))
        use_case = await unit_env.get(CreateProblemUseCase)

        request = CreateProblemRequest(
            member_id=str(member.id),
            title="Two Sum",
            content="Use a hash map.",
            tag_text=" dp,graph , dp",
            site="leetcode",
        )

        # Act
        response = await use_case.execute(request)

        # Assert
        assert response.member_id == str(member.id)
        assert response.title == "Two Sum"
        assert response.content == "Use a hash map."
        assert response.tag_names == ["dp", "graph"]
        assert response.tag_text == "dp,graph"
        assert response.site == "leetcode"
        assert response.url is None

    @pytest.mark.asyncio
    async def test_create_problem_unknown_member(self, unit_env):
        """An unknown member raises NotFoundError."""
        use_case = await unit_env.get(CreateProblemUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(
                CreateProblemRequest(
                    member_id=str(uuid4()), title="Two Sum", content="body"
                )
            )

    @pytest.mark.asyncio
    async def test_create_problem_null_content(self, unit_env):
        """Null content raises ContentError."""
        member = await seed_member(await unit_env.get(MemberRepository))
        use_case = await unit_env.get(CreateProblemUseCase)

        with pytest.raises(ContentError):
            await use_case.execute(
                CreateProblemRequest(
                    member_id=str(member.id), title="Two Sum", content=None
                )
            )
