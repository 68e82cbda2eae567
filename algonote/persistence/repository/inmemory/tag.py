"""In-memory tag dictionary for tests."""

from copy import deepcopy
from typing import Optional

from algonote.domain.error import TagConflictError
from algonote.domain.model.tag import Tag
from algonote.domain.repository.tag import TagRepository
from algonote.domain.value import TagName


class InMemoryTagRepository(TagRepository):
    """Tags keyed by name, rejecting duplicates like the unique index does."""

    def __init__(self) -> None:
        self._by_name: dict[str, Tag] = {}

    async def save(self, tag: Tag) -> Tag:
        if tag.name.root in self._by_name:
            raise TagConflictError(tag.name.root)
        self._by_name[tag.name.root] = deepcopy(tag)
        return deepcopy(tag)

    async def find_by_name(self, name: TagName) -> Optional[Tag]:
        tag = self._by_name.get(name.root)
        return deepcopy(tag) if tag else None

    async def find_by_names(self, names: list[TagName]) -> list[Tag]:
        return [
            deepcopy(self._by_name[name.root])
            for name in names
            if name.root in self._by_name
        ]

    def count(self) -> int:
        return len(self._by_name)
