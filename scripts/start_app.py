#!/usr/bin/env python3
"""Serve the API with uvicorn, reporting startup failures to Logfire."""

import sys

import logfire
import uvicorn

from storefront.config import Settings
from storefront.util.observability import configure_logfire

APP = "storefront.interface.api.app:app"


def main() -> int:
    settings = Settings()
    # Before the app import so its instrumentation has somewhere to report
    configure_logfire(settings)

    try:
        logfire.info("Starting storefront API", port=settings.api.port)
        uvicorn.run(
            APP,
            host=settings.api.host,
            port=settings.api.port,
            log_level="debug" if settings.debug else "info",
        )
    except Exception as e:
        logfire.error(
            "Application startup failed",
            error=str(e),
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise

    return 0


if __name__ == "__main__":
    sys.exit(main())
