"""Base class for dependency injection providers."""

from typing import ClassVar, Literal

from dishka import Provider

# Components with swappable production and mock implementations
Component = Literal["persistence"]


class ProviderBase(Provider):
    """Provider that knows whether tests may swap it out.

    A provider class without subclasses is concrete and always used. One with
    subclasses stands for a component named by ``__mock_component__``; each
    subclass declares whether it is the mock through ``__is_mock__``.
    """

    __mock_component__: ClassVar[Component | None] = None
    __is_mock__: ClassVar[bool] = False

    @classmethod
    def select(cls, mock: bool) -> type["ProviderBase"]:
        """Pick the production or mock implementation of this component.

        Raises:
            ValueError: If no implementation of that kind has been imported
        """
        implementations = cls.__subclasses__()
        if not implementations:
            return cls

        for impl in implementations:
            if impl.__is_mock__ == mock:
                return impl

        kind = "mock" if mock else "production"
        raise ValueError(
            f"No {kind} implementation for {cls.__mock_component__ or cls.__name__}"
        )
