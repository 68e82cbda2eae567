"""Domain services."""

from .base import Service
from .member_service import MemberService
from .ownership import OwnershipValidator
from .problem_service import ProblemService
from .review_service import ReviewService
from .tag_diff_updater import TagDiffUpdater, TagReconciliation
from .tag_linker import TagLinker
from .tag_parser import TagNameParser
from .tag_registry import TagRegistry

__all__ = [
    "MemberService",
    "OwnershipValidator",
    "ProblemService",
    "ReviewService",
    "Service",
    "TagDiffUpdater",
    "TagLinker",
    "TagNameParser",
    "TagReconciliation",
    "TagRegistry",
]
