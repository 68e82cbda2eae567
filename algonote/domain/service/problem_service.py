"""Problem domain service."""

from datetime import datetime
from uuid import uuid4

import logfire

from algonote.domain.error import NotFoundError
from algonote.domain.model import Content, Problem
from algonote.domain.repository import ProblemRepository, ProblemTagRepository
from algonote.domain.value import MemberId, ProblemId, TaggableType

from .base import Service
from .member_service import MemberService
from .ownership import OwnershipValidator
from .tag_diff_updater import TagDiffUpdater
from .tag_linker import TagLinker
from .tag_parser import TagNameParser
from .tag_registry import TagRegistry


class ProblemService(Service):
    """Domain service for problem operations."""

    def __init__(
        self,
        problem_repository: ProblemRepository,
        problem_tag_repository: ProblemTagRepository,
        member_service: MemberService,
        tag_registry: TagRegistry,
        tag_linker: TagLinker,
        ownership_validator: OwnershipValidator,
        tag_diff_updater: TagDiffUpdater,
    ) -> None:
        """Initialize problem service.

        Args:
            problem_repository: Problem repository
            problem_tag_repository: ProblemTag repository
            member_service: Member domain service
            tag_registry: Tag registry
            tag_linker: Tag linker
            ownership_validator: Ownership validator
            tag_diff_updater: Tag diff updater
        """
        self.problem_repository = problem_repository
        self.problem_tag_repository = problem_tag_repository
        self.member_service = member_service
        self.tag_registry = tag_registry
        self.tag_linker = tag_linker
        self.ownership_validator = ownership_validator
        self.tag_diff_updater = tag_diff_updater

    async def register(
        self,
        member_id: MemberId,
        title: str,
        content_text: str | None,
        tag_text: str | None = None,
        site: str | None = None,
        url: str | None = None,
    ) -> Problem:
        """Record a new problem with its content and tags.

        Every field is validated before any tag is created.

        Args:
            member_id: Writer's member ID
            title: Problem title
            content_text: Problem body
            tag_text: Comma-separated tag names (None or blank for no tags)
            site: Judge site name
            url: Problem URL on the judge site

        Returns:
            The saved problem with its tags

        Raises:
            NotFoundError: If the member doesn't exist
            ContentError: If content_text is None or blank
            TagNameError: If a tag name is longer than the name column
        """
        with logfire.span(
            "problem_service.register", member_id=str(member_id), title=title
        ):
            member = await self.member_service.get_by_id(member_id)
            content = Content.create(content_text)

            now = datetime.now()
            problem = Problem(
                id=ProblemId(uuid4()),
                member_id=member.id,
                title=title,
                content=content,
                site=site,
                url=url,
                tags=[],
                created_at=now,
                updated_at=now,
            )

            tags = await self.tag_registry.resolve(TagNameParser.parse(tag_text))
            links = self.tag_linker.link(tags, TaggableType.PROBLEM, problem.id)

            saved = await self.problem_repository.save(problem)
            saved_links = await self.problem_tag_repository.save_all(links)

            logfire.info(
                "Problem registered",
                problem_id=str(saved.id),
                tags=[link.tag_name.root for link in saved_links],
            )
            return saved.model_copy(update={"tags": saved_links})

    async def edit(
        self,
        member_id: MemberId,
        problem_id: ProblemId,
        title: str,
        content_text: str | None,
        tag_text: str | None = None,
        site: str | None = None,
        url: str | None = None,
    ) -> Problem:
        """Edit a problem's fields, content and tags.

        Only the writer may edit. Nothing is written unless the ownership
        check and content validation pass; tag rows are replaced only when
        the canonical tag text changed.

        Args:
            member_id: Acting member ID
            problem_id: Problem to edit
            title: New title
            content_text: New body
            tag_text: New comma-separated tag names
            site: New judge site name
            url: New problem URL

        Returns:
            The updated problem

        Raises:
            NotFoundError: If the problem doesn't exist
            AuthorizationError: If the acting member is not the writer
            ContentError: If content_text is None or blank
            TagNameError: If a tag name is longer than the name column
        """
        with logfire.span(
            "problem_service.edit",
            member_id=str(member_id),
            problem_id=str(problem_id),
        ):
            problem = await self.get_problem_by_id(problem_id)
            self.ownership_validator.check_same_writer(
                member_id, problem.member_id, "problem", str(problem_id)
            )
            content = problem.content.edit(content_text)

            edited = Problem(
                id=problem.id,
                member_id=problem.member_id,
                title=title,
                content=content,
                site=site,
                url=url,
                tags=problem.tags,
                created_at=problem.created_at,
                updated_at=datetime.now(),
            )

            reconciliation = await self.tag_diff_updater.reconcile(problem, tag_text)
            edited = edited.model_copy(update={"tags": reconciliation.tags})

            saved = await self.problem_repository.save(edited)
            logfire.info(
                "Problem edited",
                problem_id=str(problem_id),
                tags_changed=not reconciliation.unchanged,
            )
            return saved

    async def get_problem_by_id(self, problem_id: ProblemId) -> Problem:
        """Get a problem by ID.

        Args:
            problem_id: Problem ID

        Returns:
            Problem with its tags

        Raises:
            NotFoundError: If problem not found
        """
        with logfire.span(
            "problem_service.get_problem_by_id", problem_id=str(problem_id)
        ):
            problem = await self.problem_repository.find_by_id(problem_id)
            if problem is None:
                logfire.warn("Problem not found", problem_id=str(problem_id))
                raise NotFoundError("Problem", str(problem_id))
            return problem

    async def get_problems_by_member(
        self, member_id: MemberId, limit: int = 100, offset: int = 0
    ) -> list[Problem]:
        """Get the problems a member recorded, newest first."""
        with logfire.span(
            "problem_service.get_problems_by_member",
            member_id=str(member_id),
            limit=limit,
            offset=offset,
        ):
            problems = await self.problem_repository.find_by_member(
                member_id, limit=limit, offset=offset
            )
            logfire.info("Problems retrieved", count=len(problems))
            return problems

    async def get_problems(self, limit: int = 100, offset: int = 0) -> list[Problem]:
        """Get all problems, newest first."""
        with logfire.span("problem_service.get_problems", limit=limit, offset=offset):
            problems = await self.problem_repository.find_all(
                limit=limit, offset=offset
            )
            logfire.info("Problems retrieved", count=len(problems))
            return problems
