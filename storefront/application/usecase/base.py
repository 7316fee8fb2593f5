"""Use case base class."""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from pydantic import BaseModel

RequestT = TypeVar("RequestT", bound=BaseModel)
ResponseT = TypeVar("ResponseT")


class BaseUseCase(ABC, Generic[RequestT, ResponseT]):
    """One application operation: a request model in, a response out.

    Use cases orchestrate domain services and translate value-object
    failures into ``ValidationError`` before anything touches the store.
    """

    @abstractmethod
    async def execute(self, request: RequestT) -> ResponseT: ...
