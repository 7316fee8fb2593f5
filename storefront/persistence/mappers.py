"""Mappers for converting between database rows and domain models.

Domain models are immutable pydantic models, so rows are mapped by hand
instead of through the ORM.
"""

from typing import Any, Dict
from uuid import UUID

from storefront.domain.model import Product, Search, User
from storefront.domain.value import (
    Email,
    ProductId,
    Role,
    SearchId,
    SearchTerm,
    UserId,
    Username,
)


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict

    Returns:
        User domain model
    """
    return User(
        id=UserId(_uuid(row["id"])),
        username=Username(row["username"]),
        email=Email(row["email"]),
        password_hash=row["password_hash"],
        role=Role(row["role"]),
        profile_picture=row.get("profile_picture"),
        phone_number=row.get("phone_number"),
        last_login=row.get("last_login"),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def user_to_dict(user: User) -> Dict[str, Any]:
    """Convert User domain model to dict for database insertion.

    Args:
        user: User domain model

    Returns:
        Dict suitable for an insert or update
    """
    return {
        "id": user.id,
        "username": user.username.root,
        "email": user.email.root,
        "password_hash": user.password_hash,
        "role": user.role.value,
        "profile_picture": user.profile_picture,
        "phone_number": user.phone_number,
        "last_login": user.last_login,
        "created_at": user.created_at,
        "updated_at": user.updated_at,
    }


def row_to_product(row: Dict[str, Any]) -> Product:
    """Convert database row to Product domain model."""
    return Product(
        id=ProductId(_uuid(row["id"])),
        category=row["category"],
        description=row["description"],
        name=row["name"],
        price=row["price"],
        image=bytes(row["image"]),
        image_content_type=row["image_content_type"],
        created_at=row["created_at"],
    )


def product_to_dict(product: Product) -> Dict[str, Any]:
    """Convert Product domain model to dict for database insertion."""
    return {
        "id": product.id,
        "category": product.category,
        "description": product.description,
        "name": product.name,
        "price": product.price,
        "image": product.image,
        "image_content_type": product.image_content_type,
        "created_at": product.created_at,
    }


def row_to_search(row: Dict[str, Any]) -> Search:
    """Convert database row to Search domain model."""
    return Search(
        id=SearchId(_uuid(row["id"])),
        email=Email(row["email"]),
        term=SearchTerm(row["term"]),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )
