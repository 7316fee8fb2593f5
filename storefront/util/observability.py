"""Observability with Logfire.

Services and use cases emit spans and events directly:

    with logfire.span("signup", email=email.root):
        logfire.info("User created", user_id=str(user.id))

This module configures the SDK once per process and instruments the
frameworks.
"""

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from storefront.config import ObservabilitySettings, Settings

SERVICE_NAME = "storefront-api"


def should_send(observability: ObservabilitySettings) -> bool:
    """Send to Logfire when forced on, otherwise only when a token is set."""
    if observability.send_to_logfire is not None:
        return observability.send_to_logfire
    return bool(observability.logfire_token)


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire for the process.

    Without a token (OBSERVABILITY__LOGFIRE_TOKEN) spans only reach the
    console.
    """
    send = should_send(settings.observability)

    logfire.configure(
        service_name=SERVICE_NAME,
        service_version="0.1.0",
        environment=settings.environment,
        send_to_logfire=send,
        token=settings.observability.logfire_token,
        console=logfire.ConsoleOptions(
            colors="auto",
            span_style="show-parents",
            include_timestamps=True,
            verbose=settings.debug,
        ),
    )
    logfire.info(
        "Observability configured",
        environment=settings.environment,
        send_to_logfire=send,
    )


def instrument_fastapi(app: FastAPI) -> None:
    """Trace every HTTP request.

    Headers are not captured: Authorization carries bearer tokens.
    """
    logfire.instrument_fastapi(app, capture_headers=False)


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace SQL statements, tagging them with the current span context."""
    logfire.instrument_sqlalchemy(engine=engine.sync_engine, enable_commenter=True)
