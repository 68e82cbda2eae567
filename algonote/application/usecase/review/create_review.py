"""Create review use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from algonote.domain.service import ReviewService
from algonote.domain.value import MemberId, ProblemId

from .common import ReviewResponse


class CreateReviewRequest(BaseModel):
    """Create review request."""

    member_id: str  # Acting member, must have recorded the problem
    problem_id: str
    title: str
    content: str | None
    tag_text: str | None = None


class CreateReviewResponse(ReviewResponse):
    """Create review response."""


class CreateReviewUseCase:
    """Use case for writing a review of a problem."""

    def __init__(self, review_service: ReviewService) -> None:
        """Initialize create review use case.

        Args:
            review_service: Review domain service
        """
        self.review_service = review_service

    async def execute(self, request: CreateReviewRequest) -> CreateReviewResponse:
        """Execute create review flow.

        Steps:
        1. Load the member and the problem
        2. Check the member recorded the problem
        3. Validate content and resolve tags
        4. Save the review and its tag links

        Args:
            request: Create review request

        Returns:
            Created review details

        Raises:
            NotFoundError: If the member or problem doesn't exist
            AuthorizationError: If the member didn't record the problem
            ContentError: If content is None or blank
        """
        with logfire.span(
            "create_review.execute",
            member_id=request.member_id,
            problem_id=request.problem_id,
        ):
            review = await self.review_service.create_review(
                member_id=MemberId(UUID(request.member_id)),
                problem_id=ProblemId(UUID(request.problem_id)),
                title=request.title,
                content_text=request.content,
                tag_text=request.tag_text,
            )
            logfire.info("Review created successfully", review_id=str(review.id))
            return CreateReviewResponse.from_review(review)
