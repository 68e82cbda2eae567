"""Review response payload shared by the review use cases."""

from datetime import datetime

from pydantic import BaseModel

from algonote.domain.model import Review


class ReviewResponse(BaseModel):
    """Review details."""

    review_id: str
    member_id: str
    problem_id: str
    title: str
    content: str
    tag_names: list[str]
    tag_text: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_review(cls, review: Review) -> "ReviewResponse":
        return cls(
            review_id=str(review.id),
            member_id=str(review.member_id),
            problem_id=str(review.problem_id),
            title=review.title,
            content=review.content.text,
            tag_names=[name.root for name in review.tag_names],
            tag_text=review.tag_text,
            created_at=review.created_at,
            updated_at=review.updated_at,
        )
