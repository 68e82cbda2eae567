"""Update review use case."""

from uuid import UUID

from pydantic import BaseModel

from algonote.domain.service import ReviewService
from algonote.domain.value import MemberId, ReviewId

from .common import ReviewResponse


class UpdateReviewRequest(BaseModel):
    """Update review request."""

    review_id: str  # UUID string
    member_id: str  # Current member ID (must be the writer)
    title: str
    content: str | None
    tag_text: str | None = None


class UpdateReviewResponse(ReviewResponse):
    """Update review response."""


class UpdateReviewUseCase:
    """Use case for editing a review."""

    def __init__(self, review_service: ReviewService) -> None:
        """Initialize update review use case.

        Args:
            review_service: Review domain service
        """
        self.review_service = review_service

    async def execute(self, request: UpdateReviewRequest) -> UpdateReviewResponse:
        """Execute update review flow.

        Raises:
            NotFoundError: If the review doesn't exist
            AuthorizationError: If the member didn't write the review
            ContentError: If content is None or blank
        """
        review = await self.review_service.edit(
            member_id=MemberId(UUID(request.member_id)),
            review_id=ReviewId(UUID(request.review_id)),
            title=request.title,
            content_text=request.content,
            tag_text=request.tag_text,
        )
        return UpdateReviewResponse.from_review(review)
