#!/usr/bin/env python3
"""Upgrade the database schema, reporting failures to Logfire.

Usage:
    python scripts/run_migrations.py            # upgrade to head
    python scripts/run_migrations.py 3c1f9a7d2e40
"""

import argparse
import sys

import logfire
from alembic import command
from alembic.config import Config

from showcase.config import Settings
from showcase.util.observability import configure_logfire


def main() -> int:
    parser = argparse.ArgumentParser(description="Run Alembic migrations")
    parser.add_argument("revision", nargs="?", default="head")
    args = parser.parse_args()

    settings = Settings()
    configure_logfire(settings)

    with logfire.span("run_migrations", revision=args.revision):
        try:
            command.upgrade(Config("alembic.ini"), args.revision)
        except Exception as e:
            logfire.error(
                "Database migration failed",
                revision=args.revision,
                error_type=type(e).__name__,
                _exc_info=sys.exc_info(),
            )
            # The app must not start against a half-migrated schema
            raise

    logfire.info("Database migrations completed", revision=args.revision)
    return 0


if __name__ == "__main__":
    sys.exit(main())
