"""Unit tests for SchedulerAuthService."""

from showcase.config import SchedulerSettings
from showcase.domain.service import SchedulerAuthService


class TestSchedulerAuthService:
    """Tests for scheduler trust checks."""

    def test_matching_bearer_token_is_trusted(self):
        service = SchedulerAuthService(SchedulerSettings(cron_secret="s3cret"))

        assert service.is_trusted("Bearer s3cret") is True

    def test_wrong_token_is_rejected(self):
        service = SchedulerAuthService(SchedulerSettings(cron_secret="s3cret"))

        assert service.is_trusted("Bearer nope") is False

    def test_missing_or_malformed_header_is_rejected(self):
        service = SchedulerAuthService(SchedulerSettings(cron_secret="s3cret"))

        assert service.is_trusted(None) is False
        assert service.is_trusted("") is False
        assert service.is_trusted("s3cret") is False
        assert service.is_trusted("Basic s3cret") is False

    def test_unset_secret_rejects_everything(self):
        """Without a configured secret no invocation is trusted."""
        service = SchedulerAuthService(SchedulerSettings(cron_secret=None))

        assert service.is_trusted("Bearer ") is False
        assert service.is_trusted("Bearer None") is False
