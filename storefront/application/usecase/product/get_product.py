"""Get product use case."""

from uuid import UUID

from pydantic import BaseModel

from storefront.domain.service import ProductService
from storefront.domain.value import ProductId

from ..base import BaseUseCase
from .view import ProductView


class GetProductRequest(BaseModel):
    product_id: UUID


class GetProductUseCase(BaseUseCase[GetProductRequest, ProductView]):
    """Use case for fetching one product."""

    def __init__(self, product_service: ProductService) -> None:
        self.product_service = product_service

    async def execute(self, request: GetProductRequest) -> ProductView:
        product = await self.product_service.get_by_id(ProductId(request.product_id))
        return ProductView.from_product(product)
