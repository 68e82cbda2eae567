"""Test configuration and fixtures."""

from datetime import datetime
from uuid import uuid4

import logfire

from algonote.domain.model import Content, Member, Problem
from algonote.domain.repository import MemberRepository
from algonote.domain.value import MemberId, ProblemId

# Keep telemetry local while testing
logfire.configure(send_to_logfire=False, console=False)


def make_member(name: str = "tester") -> Member:
    """Build a member with a unique email."""
    member_id = MemberId(uuid4())
    return Member(
        id=member_id,
        email=f"{name}-{str(member_id)[:8]}@algonote.dev",
        name=name,
        created_at=datetime.now(),
    )


async def seed_member(member_repository: MemberRepository, name: str = "tester") -> Member:
    """Save a fresh member and return it."""
    return await member_repository.save(make_member(name))


def make_problem(member_id: MemberId, title: str = "Two Sum") -> Problem:
    """Build an untagged problem owned by ``member_id``."""
    now = datetime.now()
    return Problem(
        id=ProblemId(uuid4()),
        member_id=member_id,
        title=title,
        content=Content(text="Find two numbers that add up to target."),
        site="leetcode",
        url="https://leetcode.com/problems/two-sum/",
        created_at=now,
        updated_at=now,
    )

