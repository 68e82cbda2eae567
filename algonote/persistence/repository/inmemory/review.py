"""In-memory review repository for testing."""

from typing import Optional

from algonote.domain.model.review import Review
from algonote.domain.repository.review import ReviewRepository
from algonote.domain.value import MemberId, ProblemId, ReviewId

from .tag_link import InMemoryReviewTagRepository


class InMemoryReviewRepository(ReviewRepository):
    """In-memory implementation of ReviewRepository for testing."""

    def __init__(self, review_tags: InMemoryReviewTagRepository) -> None:
        self._reviews: dict[ReviewId, Review] = {}
        self.review_tags = review_tags

    async def _with_tags(self, review: Review) -> Review:
        tags = await self.review_tags.find_by_owner(review.id)
        return review.model_copy(update={"tags": tags})

    async def _newest_first(self, reviews: list[Review]) -> list[Review]:
        reviews.sort(key=lambda r: r.created_at, reverse=True)
        return [await self._with_tags(r) for r in reviews]

    async def find_by_id(self, review_id: ReviewId) -> Optional[Review]:
        """Find a review by ID."""
        review = self._reviews.get(review_id)
        return await self._with_tags(review) if review else None

    async def find_by_member(self, member_id: MemberId) -> list[Review]:
        """Find reviews written by a member."""
        return await self._newest_first(
            [r for r in self._reviews.values() if r.member_id == member_id]
        )

    async def find_by_problem(self, problem_id: ProblemId) -> list[Review]:
        """Find reviews of a problem."""
        return await self._newest_first(
            [r for r in self._reviews.values() if r.problem_id == problem_id]
        )

    async def save(self, review: Review) -> Review:
        """Save a review row."""
        self._reviews[review.id] = review.model_copy(update={"tags": []})
        return review
