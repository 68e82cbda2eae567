"""Strongly typed identifiers for algonote domain entities.

Using NewType for strong typing prevents mixing up different entity IDs
and makes the code more self-documenting.
"""

from typing import NewType
from uuid import UUID

MemberId = NewType("MemberId", UUID)
TagId = NewType("TagId", UUID)
ProblemId = NewType("ProblemId", UUID)
ProblemTagId = NewType("ProblemTagId", UUID)
ReviewId = NewType("ReviewId", UUID)
ReviewTagId = NewType("ReviewTagId", UUID)
