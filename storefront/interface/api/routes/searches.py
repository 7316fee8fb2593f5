"""Search history routes."""

from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header, status
from pydantic import BaseModel

from storefront.application.usecase.search import (
    DeleteSearchUseCase,
    ListSearchesUseCase,
    RecordSearchUseCase,
)
from storefront.application.usecase.search.delete_search import DeleteSearchRequest
from storefront.application.usecase.search.list_searches import ListSearchesRequest
from storefront.application.usecase.search.record_search import RecordSearchRequest
from storefront.application.usecase.search.view import SearchView
from storefront.domain.service import JWTService
from storefront.interface.api.security import authenticate

router = APIRouter(prefix="/searches", tags=["searches"], route_class=DishkaRoute)


class RecordSearchAPIRequest(BaseModel):
    """API request for recording a search term."""

    data: str = ""


class RecordSearchResponse(BaseModel):
    success: bool
    data: SearchView


class SearchHistoryResponse(BaseModel):
    success: bool
    count: int
    data: list[SearchView]


class DeleteSearchResponse(BaseModel):
    success: bool
    message: str


@router.post(
    "/search",
    response_model=RecordSearchResponse,
    status_code=status.HTTP_201_CREATED,
)
async def record_search(
    request: RecordSearchAPIRequest,
    jwt_service: FromDishka[JWTService],
    record_search_use_case: FromDishka[RecordSearchUseCase],
    authorization: str | None = Header(None),
) -> RecordSearchResponse:
    """Record a search term for the caller.

    Repeating a term refreshes its timestamp instead of adding a duplicate.
    """
    payload = authenticate(jwt_service, authorization)
    entry = await record_search_use_case.execute(
        RecordSearchRequest(email=payload.email, term=request.data)
    )
    return RecordSearchResponse(success=True, data=entry)


@router.get("/searched", response_model=SearchHistoryResponse)
async def list_searches(
    jwt_service: FromDishka[JWTService],
    list_searches_use_case: FromDishka[ListSearchesUseCase],
    authorization: str | None = Header(None),
) -> SearchHistoryResponse:
    """Return the caller's searches, most recently used first."""
    payload = authenticate(jwt_service, authorization)
    entries = await list_searches_use_case.execute(
        ListSearchesRequest(email=payload.email)
    )
    return SearchHistoryResponse(success=True, count=len(entries), data=entries)


@router.delete("/{search_id}", response_model=DeleteSearchResponse)
async def delete_search(
    search_id: UUID,
    jwt_service: FromDishka[JWTService],
    delete_search_use_case: FromDishka[DeleteSearchUseCase],
    authorization: str | None = Header(None),
) -> DeleteSearchResponse:
    payload = authenticate(jwt_service, authorization)
    await delete_search_use_case.execute(
        DeleteSearchRequest(email=payload.email, search_id=search_id)
    )
    return DeleteSearchResponse(success=True, message="Search deleted")
