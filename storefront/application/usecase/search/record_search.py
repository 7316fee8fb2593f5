"""Record search use case."""

from pydantic import BaseModel

from storefront.domain.error import ValidationError
from storefront.domain.service import SearchService
from storefront.domain.value import Email, SearchTerm

from ..base import BaseUseCase
from .view import SearchView


class RecordSearchRequest(BaseModel):
    email: str  # From authenticated user
    term: str


class RecordSearchUseCase(BaseUseCase[RecordSearchRequest, SearchView]):
    """Use case for adding a term to the caller's search history."""

    def __init__(self, search_service: SearchService) -> None:
        self.search_service = search_service

    async def execute(self, request: RecordSearchRequest) -> SearchView:
        """Record the search.

        Raises:
            ValidationError: If the term is empty or too long
        """
        try:
            term = SearchTerm(request.term)
        except ValueError:
            raise ValidationError("Please add a search term", field="data")

        search = await self.search_service.record(Email(request.email), term)
        return SearchView.from_search(search)
