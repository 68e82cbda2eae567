"""Tag repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from algonote.domain.model.tag import Tag
from algonote.domain.value import TagName


class TagRepository(ABC):
    """Global tag dictionary keyed by unique name.

    Tags are only ever inserted; a tag stays in the dictionary after the
    last problem or review referencing it drops it.
    """

    @abstractmethod
    async def save(self, tag: Tag) -> Tag:
        """Insert a new tag.

        Raises:
            TagConflictError: A tag with the same name already exists,
                typically because a concurrent request created it first.
        """
        pass

    @abstractmethod
    async def find_by_name(self, name: TagName) -> Optional[Tag]:
        pass

    @abstractmethod
    async def find_by_names(self, names: list[TagName]) -> list[Tag]:
        """Fetch existing tags for ``names`` in one round trip.

        Missing names are simply absent from the result; order is not
        guaranteed.
        """
        pass
