"""Update problem use case."""

from uuid import UUID

from pydantic import BaseModel

from algonote.domain.service import ProblemService
from algonote.domain.value import MemberId, ProblemId

from .common import ProblemResponse


class UpdateProblemRequest(BaseModel):
    """Update problem request."""

    problem_id: str  # UUID string
    member_id: str  # Current member ID (must be the writer)
    title: str
    content: str | None
    tag_text: str | None = None
    site: str | None = None
    url: str | None = None


class UpdateProblemResponse(ProblemResponse):
    """Update problem response."""


class UpdateProblemUseCase:
    """Use case for editing a problem."""

    def __init__(self, problem_service: ProblemService) -> None:
        """Initialize update problem use case.

        Args:
            problem_service: Problem domain service
        """
        self.problem_service = problem_service

    async def execute(self, request: UpdateProblemRequest) -> UpdateProblemResponse:
        """Execute update problem flow.

        Args:
            request: Update problem request

        Returns:
            Updated problem details

        Raises:
            NotFoundError: If the problem doesn't exist
            AuthorizationError: If the member didn't write the problem
            ContentError: If content is None or blank
        """
        problem = await self.problem_service.edit(
            member_id=MemberId(UUID(request.member_id)),
            problem_id=ProblemId(UUID(request.problem_id)),
            title=request.title,
            content_text=request.content,
            tag_text=request.tag_text,
            site=request.site,
            url=request.url,
        )
        return UpdateProblemResponse.from_problem(problem)
