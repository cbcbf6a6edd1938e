"""Unit tests for VoteService."""

from datetime import datetime, timedelta, timezone
from uuid import UUID

import pytest

from showcase.domain.error import (
    AlreadyVotedError,
    NoExistingVoteError,
    NotFoundError,
    UnauthenticatedError,
)
from showcase.domain.model import Vote
from showcase.domain.repository import ProjectRepository, VoteRepository
from showcase.domain.service import VoteService
from showcase.domain.value import ProjectId, UserId, VoteAction, VoteId
from tests.conftest import NOW, seed_projects
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no docker needed
unit_env = create_env_fixture()

PROJECT_ID = ProjectId(1)
VOTER = UserId("user_voter")


class TestVoteAggregation:
    """Tests for daily and total vote counts."""

    @pytest.mark.asyncio
    async def test_daily_votes_only_count_the_current_utc_day(self, unit_env):
        """Votes from earlier days count toward total but not daily."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        vote_repo = await unit_env.get(VoteRepository)
        await seed_projects(await unit_env.get(ProjectRepository), 1)

        yesterday = NOW - timedelta(days=1)
        await vote_repo.save(
            Vote(
                id=VoteId(UUID(int=1)),
                user_id=VOTER,
                project_id=PROJECT_ID,
                created_at=yesterday,
            )
        )
        await vote_repo.save(
            Vote(
                id=VoteId(UUID(int=2)),
                user_id=VOTER,
                project_id=PROJECT_ID,
                created_at=NOW,
            )
        )

        # Act
        daily = await vote_service.get_daily_votes(PROJECT_ID, NOW)
        total = await vote_service.get_total_votes(PROJECT_ID)

        # Assert
        assert daily == 1
        assert total == 2

    @pytest.mark.asyncio
    async def test_distinct_voters_make_daily_equal_total(self, unit_env):
        """N distinct users casting on a fresh project gives daily == total == N."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        await seed_projects(await unit_env.get(ProjectRepository), 1)

        # Act
        for i in range(5):
            await vote_service.cast_vote(UserId(f"user_{i}"), PROJECT_ID, NOW)

        # Assert
        stats = await vote_service.get_vote_stats(PROJECT_ID, None, NOW)
        assert stats.daily_votes == 5
        assert stats.total_votes == 5

    @pytest.mark.asyncio
    async def test_vote_at_midnight_counts_for_the_new_day(self, unit_env):
        """A vote cast exactly at midnight T counts toward the day starting at T."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        await seed_projects(await unit_env.get(ProjectRepository), 1)
        midnight = datetime(2026, 10, 19, tzinfo=timezone.utc)

        # Act
        await vote_service.cast_vote(VOTER, PROJECT_ID, midnight)

        # Assert
        assert await vote_service.get_daily_votes(PROJECT_ID, midnight) == 1
        assert await vote_service.get_daily_votes(
            PROJECT_ID, midnight - timedelta(microseconds=1)
        ) == 0
        assert await vote_service.has_voted_today(
            VOTER, PROJECT_ID, midnight + timedelta(hours=23)
        )

    @pytest.mark.asyncio
    async def test_vote_stats_for_anonymous_caller(self, unit_env):
        """Anonymous callers never have a vote."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        await seed_projects(await unit_env.get(ProjectRepository), 1)
        await vote_service.cast_vote(VOTER, PROJECT_ID, NOW)

        # Act
        stats = await vote_service.get_vote_stats(PROJECT_ID, None, NOW)

        # Assert
        assert stats.daily_votes == 1
        assert stats.has_voted is False
        assert stats.is_authenticated is False

    @pytest.mark.asyncio
    async def test_vote_stats_for_missing_project_raises_not_found(self, unit_env):
        """Stats for an unknown project raise NotFoundError."""
        vote_service = await unit_env.get(VoteService)

        with pytest.raises(NotFoundError):
            await vote_service.get_vote_stats(ProjectId(404), VOTER, NOW)


class TestToggleVote:
    """Tests for toggle_vote."""

    @pytest.mark.asyncio
    async def test_toggle_alternates_starting_from_not_voted(self, unit_env):
        """Toggling alternates voted/unvoted and counts never go negative."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        project_repo = await unit_env.get(ProjectRepository)
        await seed_projects(project_repo, 1)

        # Act
        outcomes = [
            await vote_service.toggle_vote(VOTER, PROJECT_ID, NOW) for _ in range(4)
        ]

        # Assert
        assert [o.has_voted for o in outcomes] == [True, False, True, False]
        assert [o.action for o in outcomes] == [
            VoteAction.VOTED,
            VoteAction.UNVOTED,
            VoteAction.VOTED,
            VoteAction.UNVOTED,
        ]
        assert [o.daily_votes for o in outcomes] == [1, 0, 1, 0]
        assert all(o.total_votes >= 0 for o in outcomes)

        project = await project_repo.find_by_id(PROJECT_ID)
        assert project.votes == 0

    @pytest.mark.asyncio
    async def test_toggle_updates_counter_with_the_ledger(self, unit_env):
        """Voting increments the denormalized counter."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        project_repo = await unit_env.get(ProjectRepository)
        await seed_projects(project_repo, 1)

        # Act
        outcome = await vote_service.toggle_vote(VOTER, PROJECT_ID, NOW)

        # Assert
        project = await project_repo.find_by_id(PROJECT_ID)
        assert outcome.total_votes == 1
        assert project.votes == 1

    @pytest.mark.asyncio
    async def test_toggle_on_a_new_day_adds_a_vote(self, unit_env):
        """Yesterday's vote does not block voting again today."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        await seed_projects(await unit_env.get(ProjectRepository), 1)
        await vote_service.toggle_vote(VOTER, PROJECT_ID, NOW - timedelta(days=1))

        # Act
        outcome = await vote_service.toggle_vote(VOTER, PROJECT_ID, NOW)

        # Assert
        assert outcome.action == VoteAction.VOTED
        assert outcome.daily_votes == 1
        assert outcome.total_votes == 2

    @pytest.mark.asyncio
    async def test_toggle_requires_identity(self, unit_env):
        """Anonymous toggles are rejected."""
        vote_service = await unit_env.get(VoteService)
        await seed_projects(await unit_env.get(ProjectRepository), 1)

        with pytest.raises(UnauthenticatedError):
            await vote_service.toggle_vote(None, PROJECT_ID, NOW)

    @pytest.mark.asyncio
    async def test_toggle_missing_project_raises_not_found(self, unit_env):
        """Toggling an unknown project raises NotFoundError and writes nothing."""
        vote_service = await unit_env.get(VoteService)
        vote_repo = await unit_env.get(VoteRepository)

        with pytest.raises(NotFoundError):
            await vote_service.toggle_vote(VOTER, ProjectId(404), NOW)

        assert await vote_repo.count_all(ProjectId(404)) == 0


class TestCastAndRetract:
    """Tests for cast_vote and retract_vote."""

    @pytest.mark.asyncio
    async def test_cast_twice_same_day_raises_already_voted(self, unit_env):
        """A second vote on the same UTC day is rejected."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        project_repo = await unit_env.get(ProjectRepository)
        await seed_projects(project_repo, 1)
        await vote_service.cast_vote(VOTER, PROJECT_ID, NOW)

        # Act & Assert
        with pytest.raises(AlreadyVotedError, match="Already voted"):
            await vote_service.cast_vote(VOTER, PROJECT_ID, NOW + timedelta(hours=1))

        project = await project_repo.find_by_id(PROJECT_ID)
        assert project.votes == 1

    @pytest.mark.asyncio
    async def test_racing_duplicate_is_translated_to_already_voted(self, unit_env):
        """A duplicate that slips past the check is rejected by storage."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        vote_repo = await unit_env.get(VoteRepository)
        project_repo = await unit_env.get(ProjectRepository)
        await seed_projects(project_repo, 1)

        # Another request recorded the vote between our check and insert
        await vote_repo.save(
            Vote(
                id=VoteId(UUID(int=9)),
                user_id=VOTER,
                project_id=PROJECT_ID,
                created_at=NOW,
            )
        )

        # Act & Assert
        with pytest.raises(AlreadyVotedError):
            await vote_service._cast(VOTER, PROJECT_ID, NOW)

        project = await project_repo.find_by_id(PROJECT_ID)
        assert project.votes == 0

    @pytest.mark.asyncio
    async def test_cast_then_retract_restores_counts(self, unit_env):
        """Cast followed by retract returns to the original numbers."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        project_repo = await unit_env.get(ProjectRepository)
        await seed_projects(project_repo, 1)
        before = await vote_service.get_vote_stats(PROJECT_ID, VOTER, NOW)

        # Act
        await vote_service.cast_vote(VOTER, PROJECT_ID, NOW)
        outcome = await vote_service.retract_vote(VOTER, PROJECT_ID, NOW)

        # Assert
        assert outcome.action == VoteAction.UNVOTED
        assert outcome.has_voted is False
        assert outcome.daily_votes == before.daily_votes
        assert outcome.total_votes == before.total_votes
        assert (await project_repo.find_by_id(PROJECT_ID)).votes == 0

    @pytest.mark.asyncio
    async def test_retract_without_vote_raises(self, unit_env):
        """Retracting when no vote exists today is rejected."""
        vote_service = await unit_env.get(VoteService)
        await seed_projects(await unit_env.get(ProjectRepository), 1)

        with pytest.raises(NoExistingVoteError):
            await vote_service.retract_vote(VOTER, PROJECT_ID, NOW)

    @pytest.mark.asyncio
    async def test_retract_does_not_touch_previous_days(self, unit_env):
        """Only today's vote is removed; history stays."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        await seed_projects(await unit_env.get(ProjectRepository), 1)
        await vote_service.cast_vote(VOTER, PROJECT_ID, NOW - timedelta(days=1))
        await vote_service.cast_vote(VOTER, PROJECT_ID, NOW)

        # Act
        outcome = await vote_service.retract_vote(VOTER, PROJECT_ID, NOW)

        # Assert
        assert outcome.daily_votes == 0
        assert outcome.total_votes == 1


