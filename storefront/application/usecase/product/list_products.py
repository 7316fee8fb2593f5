"""List products use case."""

from pydantic import BaseModel

from storefront.domain.error import NotFoundError
from storefront.domain.service import ProductService

from ..base import BaseUseCase
from .view import ProductView


class ListProductsRequest(BaseModel):
    """List products request (no filters yet)."""

    pass


class ListProductsUseCase(BaseUseCase[ListProductsRequest, list[ProductView]]):
    """Use case for listing the catalog."""

    def __init__(self, product_service: ProductService) -> None:
        self.product_service = product_service

    async def execute(self, request: ListProductsRequest) -> list[ProductView]:
        """List all products.

        Raises:
            NotFoundError: If the catalog is empty
        """
        products = await self.product_service.list_all()
        if not products:
            raise NotFoundError("Product", "*", message="No products found")
        return [ProductView.from_product(p) for p in products]
