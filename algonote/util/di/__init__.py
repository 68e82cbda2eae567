"""Dependency injection wiring.

Every provider class is listed once in PROVIDERS. Providers whose
component has a prod and an in-memory variant are abstract bases; the
variant is picked by get_provider().
"""

from typing import Type

from algonote.util.di.application import ProdApplicationProvider
from algonote.util.di.base import Component, ProviderBase
from algonote.util.di.core import ProdConfigProvider
from algonote.util.di.domain import ProdDomainProvider
from algonote.util.di.infrastructure import (
    PersistenceProvider,
    ProdPersistenceProvider,
)
from algonote.util.error import DependencyInjectionError

PROVIDERS: list[Type[ProviderBase]] = [
    ProdConfigProvider,
    ProdDomainProvider,
    ProdApplicationProvider,
    # Storage: Postgres in prod, shared in-memory repos in tests
    PersistenceProvider,
]


def get_provider(
    base: Type[ProviderBase], use_mock: bool = False
) -> Type[ProviderBase]:
    """Resolve a PROVIDERS entry to the class to instantiate.

    A provider without subclasses is concrete and returned as is. Otherwise
    the subclass whose ``__is_mock__`` equals ``use_mock`` is chosen.

    Raises:
        DependencyInjectionError: The component has no variant of that kind,
            e.g. tests asked for a mock that was never imported.
    """
    variants = base.__subclasses__()
    if not variants:
        return base

    for variant in variants:
        if getattr(variant, "__is_mock__", False) == use_mock:
            return variant

    kind = "mock" if use_mock else "production"
    component = base.__mock_component__ or base.__name__
    raise DependencyInjectionError(f"No {kind} implementation for {component}")


__all__ = [
    "Component",
    "ProviderBase",
    "PROVIDERS",
    "get_provider",
    "ProdConfigProvider",
    "ProdDomainProvider",
    "ProdApplicationProvider",
    "PersistenceProvider",
    "ProdPersistenceProvider",
]
