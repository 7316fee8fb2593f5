"""Product catalog use cases."""

from .create_product import CreateProductUseCase
from .delete_product import DeleteProductUseCase
from .get_product import GetProductUseCase
from .list_products import ListProductsUseCase

__all__ = [
    "CreateProductUseCase",
    "DeleteProductUseCase",
    "GetProductUseCase",
    "ListProductsUseCase",
]
