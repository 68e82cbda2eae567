"""List problems use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel, Field

from algonote.domain.service import ProblemService
from algonote.domain.value import MemberId

from .common import ProblemResponse


class ListProblemsRequest(BaseModel):
    """List problems request."""

    member_id: str | None = None  # Filter by writer
    limit: int = Field(default=100, ge=1, le=100)
    offset: int = Field(default=0, ge=0)


class ListProblemsResponse(BaseModel):
    """List problems response."""

    problems: list[ProblemResponse]
    limit: int
    offset: int


class ListProblemsUseCase:
    """Use case for listing problems, newest first."""

    def __init__(self, problem_service: ProblemService) -> None:
        """Initialize list problems use case.

        Args:
            problem_service: Problem domain service
        """
        self.problem_service = problem_service

    async def execute(self, request: ListProblemsRequest) -> ListProblemsResponse:
        """Execute list problems flow.

        Args:
            request: List problems request with optional writer filter

        Returns:
            Page of problems
        """
        with logfire.span(
            "list_problems.execute",
            member_id=request.member_id,
            limit=request.limit,
            offset=request.offset,
        ):
            if request.member_id:
                problems = await self.problem_service.get_problems_by_member(
                    MemberId(UUID(request.member_id)),
                    limit=request.limit,
                    offset=request.offset,
                )
            else:
                problems = await self.problem_service.get_problems(
                    limit=request.limit, offset=request.offset
                )

            return ListProblemsResponse(
                problems=[ProblemResponse.from_problem(p) for p in problems],
                limit=request.limit,
                offset=request.offset,
            )
