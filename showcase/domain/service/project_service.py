"""Project domain service."""

from datetime import datetime

import logfire

from showcase.domain.error import NotFoundError
from showcase.domain.model.project import Project, RankedProject
from showcase.domain.repository import ProjectRepository
from showcase.domain.value import DayWindow, ProjectId

from .base import Service


class ProjectService(Service):
    """Domain service for project operations."""

    def __init__(self, project_repository: ProjectRepository) -> None:
        """Initialize project service.

        Args:
            project_repository: Project repository
        """
        self.project_repository = project_repository

    async def get_project_by_id(self, project_id: ProjectId) -> Project | None:
        """Get a project by ID.

        Args:
            project_id: Project ID

        Returns:
            Project if found, None otherwise
        """
        with logfire.span(
            "project_service.get_project_by_id", project_id=project_id
        ):
            project = await self.project_repository.find_by_id(project_id)

            if project:
                logfire.info("Project found", project_id=project_id)
            else:
                logfire.warn("Project not found", project_id=project_id)

            return project

    async def require_project(self, project_id: ProjectId) -> Project:
        """Get a project by ID or fail.

        Args:
            project_id: Project ID

        Returns:
            The project

        Raises:
            NotFoundError: If the project does not exist
        """
        project = await self.get_project_by_id(project_id)
        if project is None:
            raise NotFoundError("Project", str(project_id))
        return project

    async def get_all_project_ids(self) -> list[ProjectId]:
        """Get the IDs of every project.

        Returns:
            Project IDs in ascending order
        """
        with logfire.span("project_service.get_all_project_ids"):
            project_ids = await self.project_repository.find_all_ids()
            logfire.info("Project IDs loaded", count=len(project_ids))
            return project_ids

    async def increment_votes(self, project_id: ProjectId) -> None:
        """Atomically increment the project's vote counter.

        Args:
            project_id: Project ID
        """
        with logfire.span("project_service.increment_votes", project_id=project_id):
            await self.project_repository.increment_votes(project_id)
            logfire.info("Project votes incremented", project_id=project_id)

    async def decrement_votes(self, project_id: ProjectId) -> None:
        """Atomically decrement the project's vote counter (minimum 0).

        Args:
            project_id: Project ID
        """
        with logfire.span("project_service.decrement_votes", project_id=project_id):
            await self.project_repository.decrement_votes(project_id)
            logfire.info("Project votes decremented", project_id=project_id)

    async def list_today_ranked(
        self, as_of: datetime, limit: int = 10, offset: int = 0
    ) -> tuple[list[RankedProject], int]:
        """List projects ranked by the votes they received in the current UTC day.

        Args:
            as_of: Instant that defines "today"
            limit: Maximum number of projects to return
            offset: Number of projects to skip

        Returns:
            Tuple of (ranked projects page, total number of projects)
        """
        window = DayWindow.containing(as_of)
        with logfire.span(
            "project_service.list_today_ranked",
            day=window.day.isoformat(),
            limit=limit,
            offset=offset,
        ):
            total = await self.project_repository.count()
            ranked = await self.project_repository.find_ranked_in_window(
                window.start, window.end, limit=limit, offset=offset
            )
            logfire.info("Today's projects ranked", count=len(ranked), total=total)
            return ranked, total
