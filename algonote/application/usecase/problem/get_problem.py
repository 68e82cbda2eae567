"""Get problem use case."""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel

from algonote.domain.repository import ProblemRepository
from algonote.domain.value import ProblemId

from .common import ProblemResponse


class GetProblemRequest(BaseModel):
    """Get problem request."""

    problem_id: str  # UUID string


class GetProblemResponse(ProblemResponse):
    """Get problem response."""


class GetProblemUseCase:
    """Use case for retrieving a problem by ID."""

    def __init__(self, problem_repository: ProblemRepository) -> None:
        """Initialize get problem use case.

        Args:
            problem_repository: Problem repository
        """
        self.problem_repository = problem_repository

    async def execute(self, request: GetProblemRequest) -> Optional[GetProblemResponse]:
        """Execute get problem flow.

        Args:
            request: Get problem request

        Returns:
            Problem details if found, None otherwise
        """
        problem = await self.problem_repository.find_by_id(
            ProblemId(UUID(request.problem_id))
        )
        if not problem:
            return None
        return GetProblemResponse.from_problem(problem)
