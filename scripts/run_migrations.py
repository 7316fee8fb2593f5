#!/usr/bin/env python3
"""Apply Alembic migrations, reporting failures to Logfire.

Usage:
    python scripts/run_migrations.py [revision]   # default: head
"""

import sys

import logfire
from alembic import command
from alembic.config import Config

from storefront.config import Settings
from storefront.util.observability import configure_logfire


def upgrade(revision: str) -> None:
    with logfire.span("Running database migrations", revision=revision):
        command.upgrade(Config("alembic.ini"), revision)


def main(argv: list[str]) -> int:
    configure_logfire(Settings())
    revision = argv[0] if argv else "head"

    try:
        upgrade(revision)
    except Exception as e:
        logfire.error(
            "Database migration failed",
            revision=revision,
            error=str(e),
            _exc_info=sys.exc_info(),
        )
        # Non-zero exit stops the deploy before the app starts on a stale schema
        raise

    logfire.info("Database migrations completed", revision=revision)
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
