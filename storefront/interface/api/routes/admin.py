"""Product catalog routes."""

import logging
from uuid import UUID

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header, status
from pydantic import BaseModel

from storefront.application.usecase.product import (
    CreateProductUseCase,
    DeleteProductUseCase,
    GetProductUseCase,
    ListProductsUseCase,
)
from storefront.application.usecase.product.create_product import (
    CreateProductRequest,
)
from storefront.application.usecase.product.delete_product import (
    DeleteProductRequest,
)
from storefront.application.usecase.product.get_product import GetProductRequest
from storefront.application.usecase.product.list_products import (
    ListProductsRequest,
)
from storefront.application.usecase.product.view import ProductView
from storefront.domain.service import JWTService
from storefront.interface.api.security import authenticate, require_admin

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/admin", tags=["products"], route_class=DishkaRoute)


class CreateProductAPIRequest(BaseModel):
    """API request for adding a product. ``productImage`` is a data URL."""

    productCategory: str = ""
    productDescription: str = ""
    productName: str = ""
    productPrice: float | None = None
    productImage: str = ""


class CreateProductAPIResponse(BaseModel):
    message: str
    status: str
    productId: str


class ProductListResponse(BaseModel):
    result: list[ProductView]
    status: str


class ProductResponse(BaseModel):
    result: ProductView
    status: str


class DeleteProductResponse(BaseModel):
    message: str
    status: str


@router.post(
    "/dataentry",
    response_model=CreateProductAPIResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_product(
    request: CreateProductAPIRequest,
    jwt_service: FromDishka[JWTService],
    create_product_use_case: FromDishka[CreateProductUseCase],
    authorization: str | None = Header(None),
) -> CreateProductAPIResponse:
    """Add a product to the catalog (admin only).

    Example:
        POST /admin/dataentry
        Authorization: Bearer eyJ...
        {
            "productCategory": "shoes",
            "productDescription": "Trail runners",
            "productName": "Ridge 2",
            "productPrice": 89.5,
            "productImage": "data:image/png;base64,iVBORw0KGgo..."
        }
    """
    payload = require_admin(authenticate(jwt_service, authorization))
    result = await create_product_use_case.execute(
        CreateProductRequest(
            category=request.productCategory,
            description=request.productDescription,
            name=request.productName,
            price=request.productPrice,
            image=request.productImage,
        )
    )
    logger.info(f"Product {result.product_id} added by {payload.id}")
    return CreateProductAPIResponse(
        message="Product added successfully",
        status="success",
        productId=result.product_id,
    )


@router.get("/getProducts", response_model=ProductListResponse)
async def list_products(
    jwt_service: FromDishka[JWTService],
    list_products_use_case: FromDishka[ListProductsUseCase],
    authorization: str | None = Header(None),
) -> ProductListResponse:
    """List every product. 404 when the catalog is empty."""
    authenticate(jwt_service, authorization)
    products = await list_products_use_case.execute(ListProductsRequest())
    return ProductListResponse(result=products, status="success")


@router.get("/products/{product_id}", response_model=ProductResponse)
async def get_product(
    product_id: UUID,
    jwt_service: FromDishka[JWTService],
    get_product_use_case: FromDishka[GetProductUseCase],
    authorization: str | None = Header(None),
) -> ProductResponse:
    authenticate(jwt_service, authorization)
    product = await get_product_use_case.execute(
        GetProductRequest(product_id=product_id)
    )
    return ProductResponse(result=product, status="success")


@router.delete("/products/{product_id}", response_model=DeleteProductResponse)
async def delete_product(
    product_id: UUID,
    jwt_service: FromDishka[JWTService],
    delete_product_use_case: FromDishka[DeleteProductUseCase],
    authorization: str | None = Header(None),
) -> DeleteProductResponse:
    """Remove a product (admin only)."""
    require_admin(authenticate(jwt_service, authorization))
    await delete_product_use_case.execute(DeleteProductRequest(product_id=product_id))
    return DeleteProductResponse(message="Product deleted", status="success")
