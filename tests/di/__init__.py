"""Test container and the in-memory persistence provider it swaps in."""

from .container import ALL_COMPONENTS, build_test_container
from .persistence import MockPersistenceProvider

__all__ = ["ALL_COMPONENTS", "MockPersistenceProvider", "build_test_container"]
