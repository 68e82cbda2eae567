"""Review repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from algonote.domain.model.review import Review
from algonote.domain.value import MemberId, ProblemId, ReviewId


class ReviewRepository(ABC):
    """Repository for Review aggregate.

    ``save`` persists the review row only; its tag join rows go through
    ReviewTagRepository. Finders return reviews with their tags loaded.
    """

    @abstractmethod
    async def find_by_id(self, review_id: ReviewId) -> Optional[Review]:
        """Find a review by ID.

        Args:
            review_id: The review's unique identifier

        Returns:
            The review with its tags if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_member(self, member_id: MemberId) -> List[Review]:
        """Find reviews written by a member, newest first.

        Args:
            member_id: The writer's member ID

        Returns:
            List of reviews by the member
        """
        pass

    @abstractmethod
    async def find_by_problem(self, problem_id: ProblemId) -> List[Review]:
        """Find reviews of a problem, newest first.

        Args:
            problem_id: The reviewed problem's ID

        Returns:
            List of reviews of the problem
        """
        pass

    @abstractmethod
    async def save(self, review: Review) -> Review:
        """Save a review row (create or update).

        Args:
            review: The review to save

        Returns:
            The saved review
        """
        pass
