"""List reviews use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from algonote.domain.service import ReviewService
from algonote.domain.value import MemberId, ProblemId

from .common import ReviewResponse


class ListReviewsRequest(BaseModel):
    """List reviews request.

    Filters by problem or by writer; exactly one must be given.
    """

    problem_id: str | None = None
    member_id: str | None = None

    def model_post_init(self, __context):
        """Validate that exactly one filter is provided."""
        if not self.problem_id and not self.member_id:
            raise ValueError("Either problem_id or member_id must be provided")
        if self.problem_id and self.member_id:
            raise ValueError("Provide either problem_id or member_id, not both")


class ListReviewsResponse(BaseModel):
    """List reviews response."""

    reviews: list[ReviewResponse]


class ListReviewsUseCase:
    """Use case for listing reviews, newest first."""

    def __init__(self, review_service: ReviewService) -> None:
        """Initialize list reviews use case.

        Args:
            review_service: Review domain service
        """
        self.review_service = review_service

    async def execute(self, request: ListReviewsRequest) -> ListReviewsResponse:
        """Execute list reviews flow.

        Args:
            request: List reviews request

        Returns:
            Matching reviews
        """
        with logfire.span(
            "list_reviews.execute",
            problem_id=request.problem_id,
            member_id=request.member_id,
        ):
            if request.problem_id:
                reviews = await self.review_service.get_reviews_for_problem(
                    ProblemId(UUID(request.problem_id))
                )
            else:
                reviews = await self.review_service.get_reviews_by_member(
                    MemberId(UUID(request.member_id))
                )

            return ListReviewsResponse(
                reviews=[ReviewResponse.from_review(r) for r in reviews]
            )
