"""Provider base carrying mock/prod metadata."""

from typing import ClassVar, Literal

from dishka import Provider

# Components with swappable implementations; only storage for now
Component = Literal["persistence"]


class ProviderBase(Provider):
    """Dishka provider that get_provider() can select by component.

    ``__mock_component__`` names the component an abstract provider stands
    for (None for providers with a single concrete implementation) and
    ``__is_mock__`` marks the in-memory test variant.
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False
