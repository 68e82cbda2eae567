"""Problem repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from algonote.domain.model.problem import Problem
from algonote.domain.value import MemberId, ProblemId


class ProblemRepository(ABC):
    """Repository for Problem aggregate.

    ``save`` persists the problem row only; its tag join rows go through
    ProblemTagRepository. Finders return problems with their tags loaded.
    """

    @abstractmethod
    async def find_by_id(self, problem_id: ProblemId) -> Optional[Problem]:
        """Find a problem by ID.

        Args:
            problem_id: The problem's unique identifier

        Returns:
            The problem with its tags if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_member(
        self, member_id: MemberId, limit: int = 100, offset: int = 0
    ) -> List[Problem]:
        """Find problems written by a member, newest first.

        Args:
            member_id: The writer's member ID
            limit: Maximum number of problems to return
            offset: Number of problems to skip

        Returns:
            List of problems by the member
        """
        pass

    @abstractmethod
    async def find_all(self, limit: int = 100, offset: int = 0) -> List[Problem]:
        """Find all problems, newest first.

        Args:
            limit: Maximum number of problems to return
            offset: Number of problems to skip

        Returns:
            List of problems
        """
        pass

    @abstractmethod
    async def save(self, problem: Problem) -> Problem:
        """Save a problem row (create or update).

        Args:
            problem: The problem to save

        Returns:
            The saved problem
        """
        pass
