"""Infrastructure providers.

Importing this package registers the production persistence provider as a
subclass of ``PersistenceProvider``, which ``ProviderBase.select`` relies on.
"""

from .persistence import PersistenceProvider, ProdPersistenceProvider

__all__ = ["PersistenceProvider", "ProdPersistenceProvider"]
