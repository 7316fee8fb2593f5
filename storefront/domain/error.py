"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error.

    Carries the offending field so the interface can report field-level detail.
    """

    def __init__(self, message: str, field: str | None = None):
        self.message = message
        self.field = field
        super().__init__(message)


class ConflictError(DomainError):
    """Raised when a uniqueness constraint would be violated."""

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str, message: str | None = None):
        self.resource = resource
        self.identifier = identifier
        super().__init__(message or f"{resource} not found: {identifier}")


class UnauthorizedError(DomainError):
    """Raised when credentials don't check out."""

    pass


class FederatedAccountError(DomainError):
    """Raised on password login against an account that only has a federated identity."""

    def __init__(self, provider: str = "Google"):
        self.provider = provider
        super().__init__(f"Please use {provider} Login for this account.")


class ForbiddenError(DomainError):
    """Raised when an authenticated user lacks the role for an operation."""

    pass
