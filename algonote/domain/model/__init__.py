"""Domain model entities for algonote."""

from algonote.domain.model.content import Content
from algonote.domain.model.member import Member
from algonote.domain.model.problem import Problem
from algonote.domain.model.review import Review
from algonote.domain.model.tag import ProblemTag, ReviewTag, Tag, TagLink

__all__ = [
    "Member",
    "Content",
    "Tag",
    "TagLink",
    "ProblemTag",
    "ReviewTag",
    "Problem",
    "Review",
]
