"""Domain value objects for the storefront."""

from storefront.domain.value.identifiers import ProductId, SearchId, UserId
from storefront.domain.value.types import (
    AuthProvider,
    Email,
    FederatedIdentity,
    PhoneNumber,
    Role,
    SearchTerm,
    Username,
)

__all__ = [
    # Identifiers
    "UserId",
    "ProductId",
    "SearchId",
    # Types
    "AuthProvider",
    "Email",
    "FederatedIdentity",
    "PhoneNumber",
    "Role",
    "SearchTerm",
    "Username",
]
