#!/usr/bin/env python3
"""Serve the API with uvicorn.

Logfire is configured before the app factory runs so startup failures
(bad settings, unreachable database) are reported too.
"""

import sys

import logfire
import uvicorn

from showcase.config import Settings
from showcase.util.logging import setup_logging
from showcase.util.observability import configure_logfire

APP_FACTORY = "showcase.interface.api.app:create_app"


def main() -> int:
    settings = Settings()
    configure_logfire(settings)
    setup_logging(settings)

    logfire.info("Starting API", port=settings.port, environment=settings.environment)
    try:
        uvicorn.run(
            APP_FACTORY,
            factory=True,
            host="0.0.0.0",
            port=settings.port,
            log_level="debug" if settings.debug else "info",
        )
    except Exception as e:
        logfire.error(
            "API startup failed",
            error_type=type(e).__name__,
            _exc_info=sys.exc_info(),
        )
        raise

    return 0


if __name__ == "__main__":
    sys.exit(main())
