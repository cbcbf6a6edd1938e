"""FastAPI application."""

import logfire
from dishka import AsyncContainer
from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from showcase.config import Settings
from showcase.interface.api.routes import (
    cron,
    daily_winners,
    health,
    projects,
    votes,
)
from showcase.util.di.container import create_container, setup_di
from showcase.util.observability import instrument_fastapi


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Log unexpected errors and hide their details from the client."""
    logfire.exception(
        "Unhandled error", method=request.method, path=request.url.path
    )
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal server error"},
    )


def create_app(container: AsyncContainer | None = None) -> FastAPI:
    """Create FastAPI application.

    Note: Logfire should be configured before calling this function.
    In production, start_app.py handles this.

    Args:
        container: DI container to use instead of the production one

    Returns:
        Configured application
    """
    settings = Settings()

    app_instance = FastAPI(
        title="Project Showcase API",
        description="Project showcase API: daily voting and daily winners",
        version="0.1.0",
    )

    # Instrument FastAPI for automatic tracing of HTTP requests
    instrument_fastapi(app_instance)

    app_instance.add_middleware(
        CORSMiddleware,
        allow_origins=[
            settings.api.frontend_url,
            "http://localhost:3000",  # Local development
        ],
        allow_credentials=True,
        allow_methods=["GET", "POST", "DELETE", "OPTIONS"],
        allow_headers=[
            "Authorization",
            "Content-Type",
            "Accept",
            "Origin",
        ],
        expose_headers=["Content-Length", "Content-Type"],
        max_age=600,  # Cache preflight requests for 10 minutes
    )

    app_instance.add_exception_handler(Exception, unhandled_exception_handler)

    # Setup dependency injection
    # Settings are loaded from environment automatically
    setup_di(app_instance, container or create_container())

    # Register routes
    app_instance.include_router(health.router)
    app_instance.include_router(projects.router)
    app_instance.include_router(votes.router)
    app_instance.include_router(daily_winners.router)
    app_instance.include_router(cron.router)

    return app_instance
