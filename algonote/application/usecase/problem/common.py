"""Problem response payload shared by the problem use cases."""

from datetime import datetime

from pydantic import BaseModel

from algonote.domain.model import Problem


class ProblemResponse(BaseModel):
    """Problem details."""

    problem_id: str
    member_id: str
    title: str
    content: str
    site: str | None
    url: str | None
    tag_names: list[str]
    tag_text: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_problem(cls, problem: Problem) -> "ProblemResponse":
        return cls(
            problem_id=str(problem.id),
            member_id=str(problem.member_id),
            title=problem.title,
            content=problem.content.text,
            site=problem.site,
            url=problem.url,
            tag_names=[name.root for name in problem.tag_names],
            tag_text=problem.tag_text,
            created_at=problem.created_at,
            updated_at=problem.updated_at,
        )
