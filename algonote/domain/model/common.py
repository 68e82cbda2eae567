"""Shared base for aggregates and entities."""

from pydantic import BaseModel, ConfigDict


class DomainModel(BaseModel):
    """Frozen pydantic model.

    Problems, reviews and tags are never mutated in place: edits build a
    new instance with ``model_copy(update=...)`` and hand it back to the
    repository.
    """

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)
