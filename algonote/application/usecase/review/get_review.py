"""Get review use case."""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel

from algonote.domain.repository import ReviewRepository
from algonote.domain.value import ReviewId

from .common import ReviewResponse


class GetReviewRequest(BaseModel):
    """Get review request."""

    review_id: str  # UUID string


class GetReviewResponse(ReviewResponse):
    """Get review response."""


class GetReviewUseCase:
    """Use case for retrieving a review by ID."""

    def __init__(self, review_repository: ReviewRepository) -> None:
        """Initialize get review use case.

        Args:
            review_repository: Review repository
        """
        self.review_repository = review_repository

    async def execute(self, request: GetReviewRequest) -> Optional[GetReviewResponse]:
        """Execute get review flow.

        Args:
            request: Get review request

        Returns:
            Review details if found, None otherwise
        """
        review = await self.review_repository.find_by_id(
            ReviewId(UUID(request.review_id))
        )
        if not review:
            return None
        return GetReviewResponse.from_review(review)
