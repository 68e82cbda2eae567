"""Domain layer DI providers."""

from dishka import Scope, provide

from algonote.config import TagSettings
from algonote.domain.repository import (
    MemberRepository,
    ProblemRepository,
    ProblemTagRepository,
    ReviewRepository,
    ReviewTagRepository,
    TagRepository,
)
from algonote.domain.service import (
    MemberService,
    OwnershipValidator,
    ProblemService,
    ReviewService,
    TagDiffUpdater,
    TagLinker,
    TagRegistry,
)
from algonote.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_member_service(self, member_repository: MemberRepository) -> MemberService:
        """Provide member domain service."""
        return MemberService(member_repository=member_repository)

    @provide
    def get_tag_registry(
        self, tag_repository: TagRepository, tag_settings: TagSettings
    ) -> TagRegistry:
        """Provide tag registry."""
        return TagRegistry(tag_repository=tag_repository, tag_settings=tag_settings)

    @provide
    def get_tag_linker(self) -> TagLinker:
        """Provide tag linker."""
        return TagLinker()

    @provide
    def get_ownership_validator(self) -> OwnershipValidator:
        """Provide ownership validator."""
        return OwnershipValidator()

    @provide
    def get_tag_diff_updater(
        self,
        tag_registry: TagRegistry,
        tag_linker: TagLinker,
        problem_tag_repository: ProblemTagRepository,
        review_tag_repository: ReviewTagRepository,
    ) -> TagDiffUpdater:
        """Provide tag diff updater."""
        return TagDiffUpdater(
            tag_registry=tag_registry,
            tag_linker=tag_linker,
            problem_tag_repository=problem_tag_repository,
            review_tag_repository=review_tag_repository,
        )

    @provide
    def get_problem_service(
        self,
        problem_repository: ProblemRepository,
        problem_tag_repository: ProblemTagRepository,
        member_service: MemberService,
        tag_registry: TagRegistry,
        tag_linker: TagLinker,
        ownership_validator: OwnershipValidator,
        tag_diff_updater: TagDiffUpdater,
    ) -> ProblemService:
        """Provide problem domain service."""
        return ProblemService(
            problem_repository=problem_repository,
            problem_tag_repository=problem_tag_repository,
            member_service=member_service,
            tag_registry=tag_registry,
            tag_linker=tag_linker,
            ownership_validator=ownership_validator,
            tag_diff_updater=tag_diff_updater,
        )

    @provide
    def get_review_service(
        self,
        review_repository: ReviewRepository,
        review_tag_repository: ReviewTagRepository,
        member_service: MemberService,
        problem_service: ProblemService,
        tag_registry: TagRegistry,
        tag_linker: TagLinker,
        ownership_validator: OwnershipValidator,
        tag_diff_updater: TagDiffUpdater,
    ) -> ReviewService:
        """Provide review domain service."""
        return ReviewService(
            review_repository=review_repository,
            review_tag_repository=review_tag_repository,
            member_service=member_service,
            problem_service=problem_service,
            tag_registry=tag_registry,
            tag_linker=tag_linker,
            ownership_validator=ownership_validator,
            tag_diff_updater=tag_diff_updater,
        )
