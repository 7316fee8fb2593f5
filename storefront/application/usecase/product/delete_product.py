"""Delete product use case."""

from uuid import UUID

from pydantic import BaseModel

from storefront.domain.service import ProductService
from storefront.domain.value import ProductId

from ..base import BaseUseCase


class DeleteProductRequest(BaseModel):
    product_id: UUID


class DeleteProductUseCase(BaseUseCase[DeleteProductRequest, None]):
    """Use case for removing a product from the catalog."""

    def __init__(self, product_service: ProductService) -> None:
        self.product_service = product_service

    async def execute(self, request: DeleteProductRequest) -> None:
        await self.product_service.delete(ProductId(request.product_id))
