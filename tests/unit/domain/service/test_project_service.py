"""Unit tests for ProjectService."""

from datetime import datetime, timedelta, timezone

import pytest

from showcase.domain.error import NotFoundError
from showcase.domain.repository import ProjectRepository
from showcase.domain.service import ProjectService, VoteService
from showcase.domain.value import ProjectId, UserId
from tests.conftest import NOW, make_category, make_project, seed_projects
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestListTodayRanked:
    """Tests for the daily leaderboard."""

    @pytest.mark.asyncio
    async def test_ranks_by_todays_votes_then_newest(self, unit_env):
        """Projects are ordered by today's votes, ties broken by newest first."""
        # Arrange
        project_service = await unit_env.get(ProjectService)
        vote_service = await unit_env.get(VoteService)
        await seed_projects(await unit_env.get(ProjectRepository), 1, 2, 3, 4)

        # Project 1 has the most votes overall, but all of them are old
        for i in range(5):
            await vote_service.cast_vote(
                UserId(f"user_{i}"), ProjectId(1), NOW - timedelta(days=2)
            )
        await vote_service.cast_vote(UserId("user_a"), ProjectId(3), NOW)
        await vote_service.cast_vote(UserId("user_b"), ProjectId(3), NOW)
        await vote_service.cast_vote(UserId("user_a"), ProjectId(2), NOW)

        # Act
        ranked, total = await project_service.list_today_ranked(NOW)

        # Assert
        assert total == 4
        assert [(r.view.project.id, r.daily_votes) for r in ranked] == [
            (3, 2),
            (2, 1),
            (4, 0),
            (1, 0),
        ]
        # The all-time counter still reflects history
        assert ranked[3].view.project.votes == 5

    @pytest.mark.asyncio
    async def test_paginates_with_limit_and_offset(self, unit_env):
        """limit and offset slice the ranked list; total counts every project."""
        # Arrange
        project_service = await unit_env.get(ProjectService)
        await seed_projects(await unit_env.get(ProjectRepository), 1, 2, 3, 4, 5)

        # Act
        ranked, total = await project_service.list_today_ranked(NOW, limit=2, offset=1)

        # Assert
        assert total == 5
        assert [r.view.project.id for r in ranked] == [4, 3]

    @pytest.mark.asyncio
    async def test_includes_category_when_present(self, unit_env):
        """Projects with a category carry it in the joined view."""
        # Arrange
        project_service = await unit_env.get(ProjectService)
        project_repo = await unit_env.get(ProjectRepository)
        await seed_projects(project_repo, 1)
        project_repo.add_category(make_category(2, "bolt"))
        await project_repo.save(make_project(2, category_id=2))

        # Act
        ranked, _ = await project_service.list_today_ranked(NOW)

        # Assert
        by_id = {r.view.project.id: r.view for r in ranked}
        assert by_id[2].category.slug == "bolt"
        assert by_id[1].category is None


class TestRequireProject:
    """Tests for require_project."""

    @pytest.mark.asyncio
    async def test_missing_project_raises_not_found(self, unit_env):
        project_service = await unit_env.get(ProjectService)

        with pytest.raises(NotFoundError, match="Project not found"):
            await project_service.require_project(ProjectId(99))

    @pytest.mark.asyncio
    async def test_decrement_never_goes_below_zero(self, unit_env):
        """The vote counter is floored at zero."""
        # Arrange
        project_service = await unit_env.get(ProjectService)
        await seed_projects(await unit_env.get(ProjectRepository), 1)

        # Act
        await project_service.decrement_votes(ProjectId(1))

        # Assert
        project = await project_service.require_project(ProjectId(1))
        assert project.votes == 0
        assert project.created_at == datetime(2026, 1, 1, tzinfo=timezone.utc)
