"""Product catalog domain service."""

import logfire

from storefront.domain.error import NotFoundError
from storefront.domain.model import Product
from storefront.domain.repository import ProductRepository
from storefront.domain.value import ProductId


class ProductService:
    """Domain service for catalog operations."""

    def __init__(self, product_repository: ProductRepository) -> None:
        self.product_repository = product_repository

    async def create(self, product: Product) -> Product:
        with logfire.span("product_service.create", name=product.name):
            saved = await self.product_repository.save(product)
            logfire.info(
                "Product created", product_id=str(saved.id), size=len(saved.image)
            )
            return saved

    async def list_all(self) -> list[Product]:
        with logfire.span("product_service.list_all"):
            products = await self.product_repository.find_all()
            logfire.info("Products listed", count=len(products))
            return products

    async def get_by_id(self, product_id: ProductId) -> Product:
        """Get product by ID.

        Raises:
            NotFoundError: If product not found
        """
        product = await self.product_repository.find_by_id(product_id)
        if not product:
            raise NotFoundError("Product", str(product_id))
        return product

    async def delete(self, product_id: ProductId) -> None:
        """Delete product by ID.

        Raises:
            NotFoundError: If product not found
        """
        with logfire.span("product_service.delete", product_id=str(product_id)):
            if not await self.product_repository.delete(product_id):
                raise NotFoundError("Product", str(product_id))
            logfire.info("Product deleted", product_id=str(product_id))
