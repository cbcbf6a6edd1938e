"""Logfire setup and instrumentation.

Services log through ``logfire`` directly:

    logfire.info("Vote cast", project_id=project_id, user_id=user_id)

    with logfire.span("daily_winner_service.select_winners", win_date=day):
        ...
"""

import logfire
from fastapi import FastAPI
from sqlalchemy.ext.asyncio import AsyncEngine

from showcase.config import Settings

# Liveness probes would otherwise dominate the request traces
EXCLUDED_URLS = "/health"


def _should_send(settings: Settings) -> bool:
    if settings.observability.send_to_logfire is not None:
        return settings.observability.send_to_logfire
    return bool(settings.observability.logfire_token)


def configure_logfire(settings: Settings) -> None:
    """Configure Logfire once per process.

    Telemetry goes to the Logfire cloud only when a token is configured
    (``OBSERVABILITY__LOGFIRE_TOKEN``) or ``OBSERVABILITY__SEND_TO_LOGFIRE``
    forces it; otherwise spans and events are printed to the console.

    Args:
        settings: Application settings
    """
    send_to_logfire = _should_send(settings)

    logfire.configure(
        service_name=settings.observability.service_name,
        service_version=settings.git_sha,
        environment=settings.environment,
        send_to_logfire=send_to_logfire,
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
        git_sha=settings.git_sha,
        send_to_logfire=send_to_logfire,
    )


def _request_attributes(request, attributes):
    """Attach the route's project ID, if any, to the request span."""
    result = {**attributes}

    project_id = request.path_params.get("project_id")
    if project_id is not None:
        result["project_id"] = project_id

    if request.client:
        result["client_host"] = request.client.host

    return result


def instrument_fastapi(app: FastAPI) -> None:
    """Trace every API request except health checks.

    Headers are not captured: the cron route carries the scheduler secret
    and vote routes carry the auth cookie.

    Args:
        app: FastAPI application instance
    """
    logfire.instrument_fastapi(
        app,
        capture_headers=False,
        request_attributes_mapper=_request_attributes,
        excluded_urls=EXCLUDED_URLS,
    )


def instrument_sqlalchemy(engine: AsyncEngine) -> None:
    """Trace SQL statements issued through the engine.

    Args:
        engine: SQLAlchemy async engine
    """
    logfire.instrument_sqlalchemy(
        engine=engine.sync_engine,
        enable_commenter=True,  # SQL comments carry the span context
    )
