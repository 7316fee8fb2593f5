"""Map domain errors to HTTP responses."""

import logging

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from storefront.domain.error import (
    ConflictError,
    FederatedAccountError,
    ForbiddenError,
    NotFoundError,
    UnauthorizedError,
    ValidationError,
)
from storefront.util.jwt import JWTError

logger = logging.getLogger(__name__)


async def _validation_error(request: Request, exc: ValidationError) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "detail": exc.message,
            "errors": [{"field": exc.field, "msg": exc.message}],
        },
    )


async def _request_validation_error(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    errors = [
        {
            "field": ".".join(str(part) for part in err["loc"] if part != "body"),
            "msg": err["msg"],
        }
        for err in exc.errors()
    ]
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": errors[0]["msg"] if errors else "Invalid request", "errors": errors},
    )


def _status_handler(status_code: int, detail: str | None = None):
    async def handler(request: Request, exc: Exception) -> JSONResponse:
        return JSONResponse(
            status_code=status_code, content={"detail": detail or str(exc)}
        )

    return handler


async def _unhandled_error(request: Request, exc: Exception) -> JSONResponse:
    """Log the fault with its traceback; the client only sees the fault class."""
    logger.exception(f"Unhandled error on {request.method} {request.url.path}: {exc}")
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal Server Error", "error": type(exc).__name__},
    )


def register_error_handlers(app: FastAPI) -> None:
    """Install exception handlers for domain and token errors."""
    app.add_exception_handler(ValidationError, _validation_error)
    app.add_exception_handler(RequestValidationError, _request_validation_error)
    app.add_exception_handler(
        NotFoundError, _status_handler(status.HTTP_404_NOT_FOUND)
    )
    app.add_exception_handler(ConflictError, _status_handler(status.HTTP_409_CONFLICT))
    app.add_exception_handler(
        UnauthorizedError, _status_handler(status.HTTP_401_UNAUTHORIZED)
    )
    app.add_exception_handler(
        FederatedAccountError, _status_handler(status.HTTP_400_BAD_REQUEST)
    )
    app.add_exception_handler(ForbiddenError, _status_handler(status.HTTP_403_FORBIDDEN))
    app.add_exception_handler(JWTError, _status_handler(status.HTTP_401_UNAUTHORIZED))
    app.add_exception_handler(Exception, _unhandled_error)
