"""Delete search use case."""

from uuid import UUID

from pydantic import BaseModel

from storefront.domain.service import SearchService
from storefront.domain.value import Email, SearchId

from ..base import BaseUseCase


class DeleteSearchRequest(BaseModel):
    email: str  # From authenticated user
    search_id: UUID


class DeleteSearchUseCase(BaseUseCase[DeleteSearchRequest, None]):
    """Use case for removing one entry from the caller's search history."""

    def __init__(self, search_service: SearchService) -> None:
        self.search_service = search_service

    async def execute(self, request: DeleteSearchRequest) -> None:
        """Delete the entry.

        Raises:
            NotFoundError: If the entry doesn't exist or belongs to someone else
        """
        await self.search_service.delete(
            SearchId(request.search_id), Email(request.email)
        )
