"""Test container builder with selective unmocking."""

from typing import get_args

from dishka import AsyncContainer

from storefront.util.di import Component
from storefront.util.di.container import build_container

ALL_COMPONENTS: frozenset[Component] = frozenset(get_args(Component))


def build_test_container(unmock: set[Component] | None = None) -> AsyncContainer:
    """Build a container where every component is mocked unless unmocked.

    Examples:
        # Unit and e2e tests - in-memory repositories
        container = build_test_container()

        # Integration tests - real PostgreSQL
        container = build_test_container(unmock={"persistence"})

    Raises:
        ValueError: If ``unmock`` names an unknown component
    """
    unmock = set(unmock or ())
    unknown = unmock - ALL_COMPONENTS
    if unknown:
        raise ValueError(f"Unknown components: {unknown}")

    return build_container(mocked=ALL_COMPONENTS - unmock)
