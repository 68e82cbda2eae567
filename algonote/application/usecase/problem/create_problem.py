"""Create problem use case."""

from uuid import UUID

import logfire
from pydantic import BaseModel

from algonote.domain.service import ProblemService
from algonote.domain.value import MemberId

from .common import ProblemResponse


class CreateProblemRequest(BaseModel):
    """Create problem request."""

    member_id: str  # Acting member
    title: str
    content: str | None
    tag_text: str | None = None  # e.g. "dp, graph"
    site: str | None = None
    url: str | None = None


class CreateProblemResponse(ProblemResponse):
    """Create problem response."""


class CreateProblemUseCase:
    """Use case for recording a new problem."""

    def __init__(self, problem_service: ProblemService) -> None:
        """Initialize create problem use case.

        Args:
            problem_service: Problem domain service
        """
        self.problem_service = problem_service

    async def execute(self, request: CreateProblemRequest) -> CreateProblemResponse:
        """Execute create problem flow.

        Steps:
        1. Load the member (via ProblemService)
        2. Validate content and fields
        3. Resolve tag names, creating missing tags
        4. Save the problem and its tag links

        Args:
            request: Create problem request

        Returns:
            Created problem details

        Raises:
            NotFoundError: If the member doesn't exist
            ContentError: If content is None or blank
        """
        with logfire.span(
            "create_problem.execute", member_id=request.member_id, title=request.title
        ):
            problem = await self.problem_service.register(
                member_id=MemberId(UUID(request.member_id)),
                title=request.title,
                content_text=request.content,
                tag_text=request.tag_text,
                site=request.site,
                url=request.url,
            )
            logfire.info("Problem created successfully", problem_id=str(problem.id))
            return CreateProblemResponse.from_problem(problem)
