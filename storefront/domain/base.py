"""Base classes for domain entities and value objects.

Everything in the domain is an immutable pydantic model. Entities change
through ``model_copy(update=...)`` and are persisted by their repository;
value objects validate and normalise their input on construction.
"""

from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict, RootModel

T = TypeVar("T")


class DomainModel(BaseModel):
    """Immutable entity with identity (``id``)."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)


class ValueObject(BaseModel):
    """Immutable multi-field value, compared by value."""

    model_config = ConfigDict(frozen=True)


class RootValueObject(RootModel[T], Generic[T]):
    """Immutable wrapper around one primitive, read through ``.root``.

    ``model_dump()`` returns the bare primitive, so wrapped values serialise
    the same as the raw ones.
    """

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return str(self.root)
