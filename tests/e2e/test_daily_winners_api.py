"""End-to-end tests for daily winner selection and history."""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

import pytest
import pytest_asyncio

from showcase.domain.model import Vote
from showcase.domain.repository import (
    DailyWinnerRepository,
    ProjectRepository,
    VoteRepository,
)
from showcase.domain.value import DayWindow, ProjectId, UserId, VoteId
from tests.conftest import seed_projects

CRON_SECRET = "test-cron-secret"


@pytest.fixture(autouse=True)
def cron_secret(monkeypatch):
    """Configure the scheduler secret before settings are loaded."""
    monkeypatch.setenv("SCHEDULER__CRON_SECRET", CRON_SECRET)


@pytest_asyncio.fixture
async def yesterday_votes(container):
    """Projects 1-3, with project 2 ahead on yesterday's votes."""
    await seed_projects(await container.get(ProjectRepository), 1, 2, 3)

    vote_repo = await container.get(VoteRepository)
    yesterday = DayWindow.previous(datetime.now(timezone.utc))
    for project_id, voters in ((1, 1), (2, 2)):
        for i in range(voters):
            await vote_repo.save(
                Vote(
                    id=VoteId(uuid4()),
                    user_id=UserId(f"user_{i}"),
                    project_id=ProjectId(project_id),
                    created_at=yesterday.start + timedelta(hours=12),
                )
            )
    return yesterday


def _bearer(secret: str) -> dict[str, str]:
    return {"Authorization": f"Bearer {secret}"}


class TestCronDailyWinner:
    """GET /api/cron/daily-winner"""

    @pytest.mark.asyncio
    async def test_records_yesterdays_winner(self, client, container, yesterday_votes):
        # Act
        response = await client.get(
            "/api/cron/daily-winner", headers=_bearer(CRON_SECRET)
        )

        # Assert
        assert response.status_code == 200
        data = response.json()
        assert data["success"] is True
        assert data["winners"] == [{"projectId": 2, "voteCount": 2}]
        assert data["inserted"] == 1

        winner_repo = await container.get(DailyWinnerRepository)
        recorded = await winner_repo.find_by_win_date(yesterday_votes.start)
        assert [w.project_id for w in recorded] == [2]

    @pytest.mark.asyncio
    async def test_second_run_inserts_nothing(self, client, yesterday_votes):
        await client.get("/api/cron/daily-winner", headers=_bearer(CRON_SECRET))

        response = await client.get(
            "/api/cron/daily-winner", headers=_bearer(CRON_SECRET)
        )

        assert response.status_code == 200
        assert response.json()["inserted"] == 0

    @pytest.mark.asyncio
    async def test_wrong_secret_is_unauthorized(
        self, client, container, yesterday_votes
    ):
        # Act
        response = await client.get("/api/cron/daily-winner", headers=_bearer("nope"))

        # Assert
        assert response.status_code == 401
        assert response.json()["detail"] == "Unauthorized"
        winner_repo = await container.get(DailyWinnerRepository)
        assert await winner_repo.find_by_win_date(yesterday_votes.start) == []

    @pytest.mark.asyncio
    async def test_missing_header_is_unauthorized(self, client):
        response = await client.get("/api/cron/daily-winner")

        assert response.status_code == 401

    @pytest.mark.asyncio
    async def test_no_projects_is_not_found(self, client):
        response = await client.get(
            "/api/cron/daily-winner", headers=_bearer(CRON_SECRET)
        )

        assert response.status_code == 404
        assert response.json()["detail"] == "No projects found"


class TestListDailyWinners:
    """GET /api/daily-winners"""

    @pytest.mark.asyncio
    async def test_empty_history(self, client):
        response = await client.get("/api/daily-winners")

        assert response.status_code == 200
        assert response.json() == {"success": True, "data": []}

    @pytest.mark.asyncio
    async def test_lists_recorded_winners_with_projects(self, client, yesterday_votes):
        # Arrange
        await client.get("/api/cron/daily-winner", headers=_bearer(CRON_SECRET))

        # Act
        response = await client.get("/api/daily-winners")

        # Assert
        assert response.status_code == 200
        data = response.json()["data"]
        assert len(data) == 1
        assert data[0]["projectId"] == 2
        assert data[0]["voteCount"] == 2
        assert data[0]["project"]["title"] == "Project 2"
        assert data[0]["project"]["author"]["id"] == "user_author"
        assert datetime.fromisoformat(data[0]["winDate"]) == yesterday_votes.start
