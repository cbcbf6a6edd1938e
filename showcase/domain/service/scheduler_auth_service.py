"""Scheduler trust check."""

import hmac

import logfire

from showcase.config import SchedulerSettings

from .base import Service

BEARER_PREFIX = "Bearer "


class SchedulerAuthService(Service):
    """Decides whether a scheduled-job invocation comes from the scheduler."""

    def __init__(self, scheduler_settings: SchedulerSettings) -> None:
        """Initialize scheduler auth service.

        Args:
            scheduler_settings: Scheduler settings holding the shared secret
        """
        self.scheduler_settings = scheduler_settings

    def is_trusted(self, authorization: str | None) -> bool:
        """Check an ``Authorization: Bearer <secret>`` header value.

        Args:
            authorization: Raw Authorization header value, if any

        Returns:
            True only if a secret is configured and the header carries it
        """
        secret = self.scheduler_settings.cron_secret
        if not secret:
            logfire.error("Scheduler secret is not configured, rejecting invocation")
            return False

        if not authorization or not authorization.startswith(BEARER_PREFIX):
            logfire.warn("Scheduler invocation without bearer token")
            return False

        presented = authorization[len(BEARER_PREFIX) :]
        trusted = hmac.compare_digest(presented.encode(), secret.encode())
        if not trusted:
            logfire.warn("Scheduler invocation with wrong token")
        return trusted
