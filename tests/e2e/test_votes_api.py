"""End-to-end tests for the vote endpoints."""

import pytest

from showcase.domain.repository import ProjectRepository
from tests.conftest import auth_headers, seed_projects


@pytest.fixture
def alice():
    return auth_headers("user_alice")


class TestToggleVote:
    """POST /api/projects/{id}/vote/toggle"""

    @pytest.mark.asyncio
    async def test_toggle_votes_then_unvotes(self, client, container, alice):
        # Arrange
        await seed_projects(await container.get(ProjectRepository), 1)

        # Act
        first = await client.post("/api/projects/1/vote/toggle", headers=alice)
        second = await client.post("/api/projects/1/vote/toggle", headers=alice)

        # Assert
        assert first.status_code == 200
        assert first.json() == {
            "success": True,
            "action": "voted",
            "dailyVotes": 1,
            "totalVotes": 1,
            "hasVoted": True,
        }
        assert second.status_code == 200
        assert second.json()["action"] == "unvoted"
        assert second.json()["dailyVotes"] == 0
        assert second.json()["hasVoted"] is False

    @pytest.mark.asyncio
    async def test_anonymous_toggle_is_rejected(self, client, container):
        await seed_projects(await container.get(ProjectRepository), 1)

        response = await client.post("/api/projects/1/vote/toggle")

        assert response.status_code == 401
        assert response.json()["detail"] == "Authentication required"

    @pytest.mark.asyncio
    async def test_invalid_token_is_treated_as_anonymous(self, client, container):
        await seed_projects(await container.get(ProjectRepository), 1)

        response = await client.post(
            "/api/projects/1/vote/toggle", headers={"Cookie": "auth_token=not-a-jwt"}
        )

        assert response.status_code == 401

    @pytest.mark.asyncio
    async def test_non_numeric_project_id_is_rejected(self, client, alice):
        response = await client.post("/api/projects/abc/vote/toggle", headers=alice)

        assert response.status_code == 400
        assert response.json()["detail"] == "Invalid project ID"

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "raw_id",
        ["%C2%B2", "%D9%A3", "2147483648", "99999999999", "9" * 5000],
    )
    async def test_out_of_range_or_non_ascii_project_id_is_rejected(
        self, client, alice, raw_id
    ):
        """Unicode digits and ids beyond the integer key range are 400s."""
        response = await client.post(f"/api/projects/{raw_id}/vote", headers=alice)

        assert response.status_code == 400
        assert response.json()["detail"] == "Invalid project ID"

    @pytest.mark.asyncio
    async def test_largest_integer_id_is_parsed(self, client, alice):
        response = await client.post("/api/projects/2147483647/vote", headers=alice)

        assert response.status_code == 404

    @pytest.mark.asyncio
    async def test_unknown_project_is_not_found(self, client, alice):
        response = await client.post("/api/projects/999/vote/toggle", headers=alice)

        assert response.status_code == 404
        assert response.json()["detail"] == "Project not found"


class TestCastAndRetract:
    """POST and DELETE /api/projects/{id}/vote"""

    @pytest.mark.asyncio
    async def test_second_cast_same_day_is_rejected(self, client, container, alice):
        # Arrange
        await seed_projects(await container.get(ProjectRepository), 1)
        await client.post("/api/projects/1/vote", headers=alice)

        # Act
        response = await client.post("/api/projects/1/vote", headers=alice)

        # Assert
        assert response.status_code == 400
        assert response.json()["detail"] == "Already voted for this project today"

    @pytest.mark.asyncio
    async def test_retract_without_vote_is_rejected(self, client, container, alice):
        await seed_projects(await container.get(ProjectRepository), 1)

        response = await client.delete("/api/projects/1/vote", headers=alice)

        assert response.status_code == 400
        assert response.json()["detail"] == "No vote for this project today"

    @pytest.mark.asyncio
    async def test_cast_then_retract_restores_counts(self, client, container, alice):
        # Arrange
        project_repo = await container.get(ProjectRepository)
        await seed_projects(project_repo, 1)

        # Act
        cast = await client.post("/api/projects/1/vote", headers=alice)
        retract = await client.delete("/api/projects/1/vote", headers=alice)

        # Assert
        assert cast.json()["totalVotes"] == 1
        assert retract.status_code == 200
        assert retract.json()["dailyVotes"] == 0
        assert retract.json()["totalVotes"] == 0
        assert (await project_repo.find_by_id(1)).votes == 0


class TestVoteStats:
    """GET /api/projects/{id}/votes"""

    @pytest.mark.asyncio
    async def test_anonymous_stats(self, client, container):
        # Arrange
        await seed_projects(await container.get(ProjectRepository), 1)
        for user in ("user_a", "user_b", "user_c"):
            await client.post("/api/projects/1/vote", headers=auth_headers(user))

        # Act
        response = await client.get("/api/projects/1/votes")

        # Assert
        assert response.status_code == 200
        assert response.json() == {
            "success": True,
            "dailyVotes": 3,
            "totalVotes": 3,
            "hasVoted": False,
            "isAuthenticated": False,
        }

    @pytest.mark.asyncio
    async def test_authenticated_stats_reflect_own_vote(self, client, container, alice):
        # Arrange
        await seed_projects(await container.get(ProjectRepository), 1)
        await client.post("/api/projects/1/vote", headers=alice)

        # Act
        response = await client.get("/api/projects/1/votes", headers=alice)

        # Assert
        data = response.json()
        assert data["hasVoted"] is True
        assert data["isAuthenticated"] is True

    @pytest.mark.asyncio
    async def test_stats_for_unknown_project(self, client):
        response = await client.get("/api/projects/42/votes")

        assert response.status_code == 404

    @pytest.mark.asyncio
    @pytest.mark.parametrize("raw_id", ["%C2%B2", "2147483648"])
    async def test_stats_for_invalid_project_id(self, client, raw_id):
        response = await client.get(f"/api/projects/{raw_id}/votes")

        assert response.status_code == 400
        assert response.json()["detail"] == "Invalid project ID"


class TestTodayProjects:
    """GET /api/projects/today"""

    @pytest.mark.asyncio
    async def test_lists_projects_by_todays_votes(self, client, container, alice):
        # Arrange
        await seed_projects(await container.get(ProjectRepository), 1, 2, 3)
        await client.post("/api/projects/1/vote", headers=alice)

        # Act
        response = await client.get("/api/projects/today", params={"limit": 2})

        # Assert
        assert response.status_code == 200
        data = response.json()
        assert data["total"] == 3
        assert data["limit"] == 2
        assert data["offset"] == 0
        assert [p["id"] for p in data["data"]] == [1, 3]
        assert data["data"][0]["todayVotes"] == 1
        assert data["data"][0]["author"]["name"] == "Ada Author"
        assert data["data"][0]["authorId"] == "user_author"

    @pytest.mark.asyncio
    async def test_rejects_out_of_range_limit(self, client):
        response = await client.get("/api/projects/today", params={"limit": 0})

        assert response.status_code == 422
