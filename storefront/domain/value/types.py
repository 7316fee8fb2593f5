"""Domain value objects for the storefront.

Value objects are immutable and defined by their values, not identity.
They normalise and validate input at construction.
"""

import re
from enum import Enum

from pydantic import field_validator

from storefront.domain.base import RootValueObject, ValueObject

# Same shape the old express validators accepted: local@domain.tld
EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[A-Za-z0-9-]{2,}$")
PHONE_PATTERN = re.compile(r"^\+?[0-9][0-9 \-]{5,18}[0-9]$")


class Role(str, Enum):
    """User role."""

    USER = "user"
    ADMIN = "admin"


class AuthProvider(str, Enum):
    """Supported federated identity providers."""

    GOOGLE = "google"


class Username(RootValueObject[str]):
    """Display username, unique across users."""

    @field_validator("root")
    @classmethod
    def validate_username(cls, v: str) -> str:
        v = v.strip()
        if len(v) < 1 or len(v) > 255:
            raise ValueError("Username must be 1-255 characters")
        return v


class Email(RootValueObject[str]):
    """Email address, trimmed and lower-cased."""

    @field_validator("root")
    @classmethod
    def validate_email(cls, v: str) -> str:
        v = v.strip().lower()
        if len(v) > 254 or not EMAIL_PATTERN.match(v):
            raise ValueError("Please include a valid email")
        return v


class PhoneNumber(RootValueObject[str]):
    """Phone number: 7-15 digits, optional leading '+', spaces and dashes allowed."""

    @field_validator("root")
    @classmethod
    def validate_phone(cls, v: str) -> str:
        v = v.strip()
        digits = re.sub(r"\D", "", v)
        if not PHONE_PATTERN.match(v) or not 7 <= len(digits) <= 15:
            raise ValueError("Please enter a valid phone number")
        return v


class SearchTerm(RootValueObject[str]):
    """A search string from the history."""

    @field_validator("root")
    @classmethod
    def validate_term(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("Please add a search term")
        if len(v) > 500:
            raise ValueError("Search term must be at most 500 characters")
        return v


class FederatedIdentity(ValueObject):
    """Identity assertion from a federated provider.

    ``provider_user_id`` is the provider's opaque id (Firebase uid for Google).
    """

    provider: AuthProvider = AuthProvider.GOOGLE
    provider_user_id: str
    display_name: Username
    email: Email
    photo_url: str | None = None

    @property
    def sentinel_hash(self) -> str:
        """Value stored in place of a password hash for federated-only users.

        The provider prefix keeps it from ever looking like a bcrypt hash,
        whatever the provider uid contains.
        """
        return f"{self.provider.value}:{self.provider_user_id}"
