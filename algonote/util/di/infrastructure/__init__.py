"""Infrastructure providers."""

# Importing the prod subclass registers it for get_provider()
from .persistence import PersistenceProvider, ProdPersistenceProvider

__all__ = ["PersistenceProvider", "ProdPersistenceProvider"]
