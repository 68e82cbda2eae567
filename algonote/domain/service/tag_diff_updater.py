"""Tag diff updater: replaces an aggregate's tag rows only when they change."""

from dataclasses import dataclass

import logfire

from algonote.domain.model.problem import Problem
from algonote.domain.model.review import Review
from algonote.domain.model.tag import TagLink
from algonote.domain.repository import (
    ProblemTagRepository,
    ReviewTagRepository,
    TagLinkRepository,
)
from algonote.domain.value import TaggableType

from .base import Service
from .tag_linker import TagLinker
from .tag_parser import TagNameParser
from .tag_registry import TagRegistry


@dataclass(frozen=True)
class TagReconciliation:
    """Outcome of reconciling an aggregate's tags with new tag text."""

    unchanged: bool
    tags: list[TagLink]


class TagDiffUpdater(Service):
    """Domain service syncing an aggregate's join rows with edited tag text.

    The comparison is on canonical text: the new input is parsed, trimmed
    and de-duplicated before it is compared with the current rendering.
    ``"dp, graph"`` against ``"dp,graph"`` is unchanged, ``"graph,dp"`` is a
    change.
    """

    def __init__(
        self,
        tag_registry: TagRegistry,
        tag_linker: TagLinker,
        problem_tag_repository: ProblemTagRepository,
        review_tag_repository: ReviewTagRepository,
    ) -> None:
        """Initialize tag diff updater.

        Args:
            tag_registry: Tag registry
            tag_linker: Tag linker
            problem_tag_repository: ProblemTag repository
            review_tag_repository: ReviewTag repository
        """
        self.tag_registry = tag_registry
        self.tag_linker = tag_linker
        self.link_repositories: dict[TaggableType, TagLinkRepository] = {
            TaggableType.PROBLEM: problem_tag_repository,
            TaggableType.REVIEW: review_tag_repository,
        }

    async def reconcile(
        self, aggregate: Problem | Review, new_tag_text: str | None
    ) -> TagReconciliation:
        """Replace the aggregate's join rows if the tag text changed.

        The new tag set is resolved before the old rows are deleted, so a
        failure while resolving leaves the current rows in place.

        Args:
            aggregate: Problem or review being edited
            new_tag_text: Raw tag text from the edit request

        Returns:
            Whether the tags were unchanged, and the join rows now attached
        """
        current_text = aggregate.tag_text
        new_text = TagNameParser.canonicalize(new_tag_text)

        with logfire.span(
            "tag_diff_updater.reconcile",
            owner_type=aggregate.taggable_type.value,
            owner_id=str(aggregate.id),
            current=current_text,
            new=new_text,
        ):
            if current_text == new_text:
                logfire.info("Tags unchanged", owner_id=str(aggregate.id))
                return TagReconciliation(unchanged=True, tags=list(aggregate.tags))

            tags = await self.tag_registry.resolve(TagNameParser.parse(new_tag_text))
            links = self.tag_linker.link(tags, aggregate.taggable_type, aggregate.id)

            repository = self.link_repositories[aggregate.taggable_type]
            deleted = await repository.delete_all_for_owner(aggregate.id)
            saved = await repository.save_all(links)

            logfire.info(
                "Tags replaced",
                owner_id=str(aggregate.id),
                deleted=deleted,
                inserted=len(saved),
            )
            return TagReconciliation(unchanged=False, tags=saved)
