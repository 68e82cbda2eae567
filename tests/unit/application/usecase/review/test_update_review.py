"""Unit tests for UpdateReviewUseCase, GetReviewUseCase and ListReviewsUseCase."""

from uuid import uuid4

import pytest
from pydantic import ValidationError

from algonote.application.usecase.problem import (
    CreateProblemRequest,
    CreateProblemUseCase,
)
from algonote.application.usecase.review import (
    CreateReviewRequest,
    CreateReviewUseCase,
    GetReviewRequest,
    GetReviewUseCase,
    ListReviewsRequest,
    ListReviewsUseCase,
    UpdateReviewRequest,
    UpdateReviewUseCase,
)
from algonote.domain.error import ContentError
from algonote.domain.repository import MemberRepository
from tests.conftest import seed_member
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


async def _create_review(unit_env, member, tag_text="dp"):
    create_problem = await unit_env.get(CreateProblemUseCase)
    problem = await create_problem.execute(
        CreateProblemRequest(member_id=str(member.id), title="Two Sum", content="body")
    )
    create_review = await unit_env.get(CreateReviewUseCase)
    return await create_review.execute(
        CreateReviewRequest(
            member_id=str(member.id),
            problem_id=problem.problem_id,
            title="Notes",
            content="v1",
            tag_text=tag_text,
        )
    )


class TestUpdateReviewUseCase:
    """Tests for UpdateReviewUseCase."""

    @pytest.mark.asyncio
    async def test_update_review_success(self, unit_env):
        """The writer's edit is returned and visible on reload."""
        # Arrange
        member = await seed_member(await unit_env.get(MemberRepository))
        review = await _create_review(unit_env, member)
        use_case = await unit_env.get(UpdateReviewUseCase)
        get_use_case = await unit_env.get(GetReviewUseCase)

        # Act
        response = await use_case.execute(
            UpdateReviewRequest(
                review_id=review.review_id,
                member_id=str(member.id),
                title="Notes v2",
                content="v2",
                tag_text="dp, greedy",
            )
        )

        # Assert
        assert response.tag_text == "dp,greedy"
        fetched = await get_use_case.execute(GetReviewRequest(review_id=review.review_id))
        assert fetched.title == "Notes v2"
        assert fetched.content == "v2"
        assert fetched.tag_names == ["dp", "greedy"]

    @pytest.mark.asyncio
    async def test_update_review_blank_content(self, unit_env):
        """Blank content raises ContentError and keeps the old tags."""
        member = await seed_member(await unit_env.get(MemberRepository))
        review = await _create_review(unit_env, member)
        use_case = await unit_env.get(UpdateReviewUseCase)
        get_use_case = await unit_env.get(GetReviewUseCase)

        with pytest.raises(ContentError):
            await use_case.execute(
                UpdateReviewRequest(
                    review_id=review.review_id,
                    member_id=str(member.id),
                    title="Notes",
                    content="   ",
                    tag_text="graph",
                )
            )

        fetched = await get_use_case.execute(GetReviewRequest(review_id=review.review_id))
        assert fetched.tag_text == "dp"


class TestGetAndListReviews:
    """Tests for GetReviewUseCase and ListReviewsUseCase."""

    @pytest.mark.asyncio
    async def test_get_missing_review_returns_none(self, unit_env):
        """Unknown IDs yield None."""
        use_case = await unit_env.get(GetReviewUseCase)

        assert await use_case.execute(GetReviewRequest(review_id=str(uuid4()))) is None

    @pytest.mark.asyncio
    async def test_list_by_problem_and_member(self, unit_env):
        """Reviews can be listed by problem or by writer."""
        member = await seed_member(await unit_env.get(MemberRepository))
        review = await _create_review(unit_env, member)
        use_case = await unit_env.get(ListReviewsUseCase)

        by_problem = await use_case.execute(
            ListReviewsRequest(problem_id=review.problem_id)
        )
        by_member = await use_case.execute(ListReviewsRequest(member_id=str(member.id)))

        assert [r.review_id for r in by_problem.reviews] == [review.review_id]
        assert [r.review_id for r in by_member.reviews] == [review.review_id]

    def test_list_requires_exactly_one_filter(self):
        """Either problem_id or member_id, not neither or both."""
        with pytest.raises(ValidationError):
            ListReviewsRequest()
        with pytest.raises(ValidationError):
            ListReviewsRequest(problem_id=str(uuid4()), member_id=str(uuid4()))
