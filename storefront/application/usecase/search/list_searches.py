"""List searches use case."""

from pydantic import BaseModel

from storefront.domain.service import SearchService
from storefront.domain.value import Email

from ..base import BaseUseCase
from .view import SearchView


class ListSearchesRequest(BaseModel):
    email: str  # From authenticated user


class ListSearchesUseCase(BaseUseCase[ListSearchesRequest, list[SearchView]]):
    """Use case for reading the caller's search history, newest first."""

    def __init__(self, search_service: SearchService) -> None:
        self.search_service = search_service

    async def execute(self, request: ListSearchesRequest) -> list[SearchView]:
        searches = await self.search_service.history(Email(request.email))
        return [SearchView.from_search(s) for s in searches]
