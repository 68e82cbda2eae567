"""In-memory problem repository for testing."""

from typing import Optional

from algonote.domain.model.problem import Problem
from algonote.domain.repository.problem import ProblemRepository
from algonote.domain.value import MemberId, ProblemId

from .tag_link import InMemoryProblemTagRepository


class InMemoryProblemRepository(ProblemRepository):
    """In-memory implementation of ProblemRepository for testing.

    Stores problem rows only and reads tags back from the join-row
    repository, like the database-backed implementation.
    """

    def __init__(self, problem_tags: InMemoryProblemTagRepository) -> None:
        self._problems: dict[ProblemId, Problem] = {}
        self.problem_tags = problem_tags

    async def _with_tags(self, problem: Problem) -> Problem:
        tags = await self.problem_tags.find_by_owner(problem.id)
        return problem.model_copy(update={"tags": tags})

    async def find_by_id(self, problem_id: ProblemId) -> Optional[Problem]:
        """Find a problem by ID."""
        problem = self._problems.get(problem_id)
        return await self._with_tags(problem) if problem else None

    async def find_by_member(
        self, member_id: MemberId, limit: int = 100, offset: int = 0
    ) -> list[Problem]:
        """Find problems by a specific member."""
        problems = [p for p in self._problems.values() if p.member_id == member_id]
        problems.sort(key=lambda p: p.created_at, reverse=True)
        return [await self._with_tags(p) for p in problems[offset : offset + limit]]

    async def find_all(self, limit: int = 100, offset: int = 0) -> list[Problem]:
        """Find all problems with pagination."""
        problems = sorted(
            self._problems.values(), key=lambda p: p.created_at, reverse=True
        )
        return [await self._with_tags(p) for p in problems[offset : offset + limit]]

    async def save(self, problem: Problem) -> Problem:
        """Save a problem row."""
        self._problems[problem.id] = problem.model_copy(update={"tags": []})
        return problem
