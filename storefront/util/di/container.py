"""Container assembly."""

from collections.abc import Collection

from dishka import AsyncContainer, make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka
from fastapi import FastAPI

from storefront.util.di import PROVIDERS, Component


def build_container(mocked: Collection[Component] = ()) -> AsyncContainer:
    """Assemble a container, using mock implementations for ``mocked`` components."""
    providers = [
        base.select(mock=base.__mock_component__ in mocked)() for base in PROVIDERS
    ]
    return make_async_container(*providers, FastapiProvider())


def create_container() -> AsyncContainer:
    """Production container. Settings come from the environment."""
    return build_container()


def setup_di(app: FastAPI, container: AsyncContainer) -> None:
    setup_dishka(container, app)
