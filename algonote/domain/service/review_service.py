"""Review domain service."""

from datetime import datetime
from uuid import uuid4

import logfire

from algonote.domain.error import NotFoundError
from algonote.domain.model import Content, Review
from algonote.domain.repository import ReviewRepository, ReviewTagRepository
from algonote.domain.value import MemberId, ProblemId, ReviewId, TaggableType

from .base import Service
from .member_service import MemberService
from .ownership import OwnershipValidator
from .problem_service import ProblemService
from .tag_diff_updater import TagDiffUpdater
from .tag_linker import TagLinker
from .tag_parser import TagNameParser
from .tag_registry import TagRegistry


class ReviewService(Service):
    """Domain service for review operations."""

    def __init__(
        self,
        review_repository: ReviewRepository,
        review_tag_repository: ReviewTagRepository,
        member_service: MemberService,
        problem_service: ProblemService,
        tag_registry: TagRegistry,
        tag_linker: TagLinker,
        ownership_validator: OwnershipValidator,
        tag_diff_updater: TagDiffUpdater,
    ) -> None:
        """Initialize review service.

        Args:
            review_repository: Review repository
            review_tag_repository: ReviewTag repository
            member_service: Member domain service
            problem_service: Problem domain service
            tag_registry: Tag registry
            tag_linker: Tag linker
            ownership_validator: Ownership validator
            tag_diff_updater: Tag diff updater
        """
        self.review_repository = review_repository
        self.review_tag_repository = review_tag_repository
        self.member_service = member_service
        self.problem_service = problem_service
        self.tag_registry = tag_registry
        self.tag_linker = tag_linker
        self.ownership_validator = ownership_validator
        self.tag_diff_updater = tag_diff_updater

    async def create_review(
        self,
        member_id: MemberId,
        problem_id: ProblemId,
        title: str,
        content_text: str | None,
        tag_text: str | None = None,
    ) -> Review:
        """Write a review of a problem.

        Only the member who recorded the problem may review it.

        Args:
            member_id: Acting member ID
            problem_id: Problem being reviewed
            title: Review title
            content_text: Review body
            tag_text: Comma-separated tag names

        Returns:
            The saved review with its tags

        Raises:
            NotFoundError: If the member or problem doesn't exist
            AuthorizationError: If the acting member didn't write the problem
            ContentError: If content_text is None or blank
            TagNameError: If a tag name is longer than the name column
        """
        with logfire.span(
            "review_service.create_review",
            member_id=str(member_id),
            problem_id=str(problem_id),
        ):
            member = await self.member_service.get_by_id(member_id)
            problem = await self.problem_service.get_problem_by_id(problem_id)
            self.ownership_validator.check_same_writer(
                member.id, problem.member_id, "problem", str(problem_id)
            )
            content = Content.create(content_text)

            now = datetime.now()
            review = Review(
                id=ReviewId(uuid4()),
                member_id=member.id,
                problem_id=problem.id,
                title=title,
                content=content,
                tags=[],
                created_at=now,
                updated_at=now,
            )

            tags = await self.tag_registry.resolve(TagNameParser.parse(tag_text))
            links = self.tag_linker.link(tags, TaggableType.REVIEW, review.id)

            saved = await self.review_repository.save(review)
            saved_links = await self.review_tag_repository.save_all(links)

            logfire.info(
                "Review created",
                review_id=str(saved.id),
                problem_id=str(problem_id),
                tags=[link.tag_name.root for link in saved_links],
            )
            return saved.model_copy(update={"tags": saved_links})

    async def edit(
        self,
        member_id: MemberId,
        review_id: ReviewId,
        title: str,
        content_text: str | None,
        tag_text: str | None = None,
    ) -> Review:
        """Patch a review's title, content and tags.

        Ownership is checked against the review's own writer, not the
        problem's.

        Args:
            member_id: Acting member ID
            review_id: Review to edit
            title: New title
            content_text: New body
            tag_text: New comma-separated tag names

        Returns:
            The updated review

        Raises:
            NotFoundError: If the review doesn't exist
            AuthorizationError: If the acting member is not the writer
            ContentError: If content_text is None or blank
            TagNameError: If a tag name is longer than the name column
        """
        with logfire.span(
            "review_service.edit", member_id=str(member_id), review_id=str(review_id)
        ):
            review = await self.get_review_by_id(review_id)
            self.ownership_validator.check_same_writer(
                member_id, review.member_id, "review", str(review_id)
            )
            content = review.content.edit(content_text)

            edited = Review(
                id=review.id,
                member_id=review.member_id,
                problem_id=review.problem_id,
                title=title,
                content=content,
                tags=review.tags,
                created_at=review.created_at,
                updated_at=datetime.now(),
            )

            reconciliation = await self.tag_diff_updater.reconcile(review, tag_text)
            edited = edited.model_copy(update={"tags": reconciliation.tags})

            saved = await self.review_repository.save(edited)
            logfire.info(
                "Review edited",
                review_id=str(review_id),
                tags_changed=not reconciliation.unchanged,
            )
            return saved

    async def get_review_by_id(self, review_id: ReviewId) -> Review:
        """Get a review by ID.

        Raises:
            NotFoundError: If review not found
        """
        with logfire.span("review_service.get_review_by_id", review_id=str(review_id)):
            review = await self.review_repository.find_by_id(review_id)
            if review is None:
                logfire.warn("Review not found", review_id=str(review_id))
                raise NotFoundError("Review", str(review_id))
            return review

    async def get_reviews_by_member(self, member_id: MemberId) -> list[Review]:
        """Get every review a member wrote, newest first."""
        with logfire.span(
            "review_service.get_reviews_by_member", member_id=str(member_id)
        ):
            reviews = await self.review_repository.find_by_member(member_id)
            logfire.info("Reviews retrieved", count=len(reviews))
            return reviews

    async def get_reviews_for_problem(self, problem_id: ProblemId) -> list[Review]:
        """Get the reviews of a problem, newest first."""
        with logfire.span(
            "review_service.get_reviews_for_problem", problem_id=str(problem_id)
        ):
            reviews = await self.review_repository.find_by_problem(problem_id)
            logfire.info("Reviews retrieved", count=len(reviews))
            return reviews
