"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict
from uuid import UUID

from algonote.domain.model import (
    Content,
    Member,
    Problem,
    ProblemTag,
    Review,
    ReviewTag,
    Tag,
)
from algonote.domain.value import (
    MemberId,
    ProblemId,
    ProblemTagId,
    ReviewId,
    ReviewTagId,
    TagId,
    TagName,
)


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_member(row: Dict[str, Any]) -> Member:
    """Convert database row to Member domain model."""
    return Member(
        id=MemberId(_uuid(row["id"])),
        email=row["email"],
        name=row["name"],
        picture=row.get("picture"),
        created_at=row["created_at"],
    )


def member_to_dict(member: Member) -> Dict[str, Any]:
    """Convert Member domain model to database dict."""
    return member.model_dump()


def row_to_tag(row: Dict[str, Any]) -> Tag:
    """Convert database row to Tag domain model."""
    return Tag(
        id=TagId(_uuid(row["id"])),
        name=TagName(row["name"]),
        created_at=row["created_at"],
    )


def tag_to_dict(tag: Tag) -> Dict[str, Any]:
    """Convert Tag domain model to database dict."""
    return {"id": tag.id, "name": tag.name.root, "created_at": tag.created_at}


def row_to_problem_tag(row: Dict[str, Any]) -> ProblemTag:
    """Convert a problem_tags row joined with its tag name.

    Args:
        row: Database row as dict, with ``tag_name`` from the tags table

    Returns:
        ProblemTag domain model
    """
    return ProblemTag(
        id=ProblemTagId(_uuid(row["id"])),
        problem_id=ProblemId(_uuid(row["problem_id"])),
        tag_id=TagId(_uuid(row["tag_id"])),
        tag_name=TagName(row["tag_name"]),
        created_at=row["created_at"],
    )


def problem_tag_to_dict(link: ProblemTag) -> Dict[str, Any]:
    """Convert ProblemTag to database dict (tag name is not stored)."""
    return {
        "id": link.id,
        "problem_id": link.problem_id,
        "tag_id": link.tag_id,
        "created_at": link.created_at,
    }


def row_to_review_tag(row: Dict[str, Any]) -> ReviewTag:
    """Convert a review_tags row joined with its tag name."""
    return ReviewTag(
        id=ReviewTagId(_uuid(row["id"])),
        review_id=ReviewId(_uuid(row["review_id"])),
        tag_id=TagId(_uuid(row["tag_id"])),
        tag_name=TagName(row["tag_name"]),
        created_at=row["created_at"],
    )


def review_tag_to_dict(link: ReviewTag) -> Dict[str, Any]:
    """Convert ReviewTag to database dict (tag name is not stored)."""
    return {
        "id": link.id,
        "review_id": link.review_id,
        "tag_id": link.tag_id,
        "created_at": link.created_at,
    }


def row_to_problem(row: Dict[str, Any], tags: list[ProblemTag]) -> Problem:
    """Convert database row to Problem domain model.

    Args:
        row: Database row as dict
        tags: Join rows of this problem, in insertion order

    Returns:
        Problem domain model
    """
    return Problem(
        id=ProblemId(_uuid(row["id"])),
        member_id=MemberId(_uuid(row["member_id"])),
        title=row["title"],
        content=Content(text=row["content"]),
        site=row.get("site"),
        url=row.get("url"),
        tags=tags,
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def problem_to_dict(problem: Problem) -> Dict[str, Any]:
    """Convert Problem domain model to database dict.

    Tags are excluded; they live in the problem_tags table.
    """
    return {
        "id": problem.id,
        "member_id": problem.member_id,
        "title": problem.title,
        "content": problem.content.text,
        "site": problem.site,
        "url": problem.url,
        "created_at": problem.created_at,
        "updated_at": problem.updated_at,
    }


def row_to_review(row: Dict[str, Any], tags: list[ReviewTag]) -> Review:
    """Convert database row to Review domain model."""
    return Review(
        id=ReviewId(_uuid(row["id"])),
        member_id=MemberId(_uuid(row["member_id"])),
        problem_id=ProblemId(_uuid(row["problem_id"])),
        title=row["title"],
        content=Content(text=row["content"]),
        tags=tags,
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def review_to_dict(review: Review) -> Dict[str, Any]:
    """Convert Review domain model to database dict."""
    return {
        "id": review.id,
        "member_id": review.member_id,
        "problem_id": review.problem_id,
        "title": review.title,
        "content": review.content.text,
        "created_at": review.created_at,
        "updated_at": review.updated_at,
    }
