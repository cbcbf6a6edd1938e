"""Project repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional

from showcase.domain.model.project import Project, ProjectView, RankedProject
from showcase.domain.value import ProjectId


class ProjectRepository(ABC):
    """Repository for Project aggregate.

    Defines the contract for the project reads and counter updates the
    voting subsystem needs. Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, project_id: ProjectId) -> Optional[Project]:
        """Find a project by ID.

        Args:
            project_id: The project's unique identifier

        Returns:
            The project if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_view_by_id(self, project_id: ProjectId) -> Optional[ProjectView]:
        """Find a project joined with its author and category.

        Args:
            project_id: The project's unique identifier

        Returns:
            The project view if the project and its author exist, None otherwise
        """
        pass

    @abstractmethod
    async def find_all_ids(self) -> List[ProjectId]:
        """List the IDs of every project.

        Returns:
            Project IDs in ascending order
        """
        pass

    @abstractmethod
    async def find_ranked_in_window(
        self,
        start: datetime,
        end: datetime,
        limit: int = 10,
        offset: int = 0,
    ) -> List[RankedProject]:
        """List projects ranked by the votes they received inside a window.

        Projects without votes in the window are included with zero.
        Ties are broken by newest project first.

        Args:
            start: Window start (inclusive)
            end: Window end (exclusive)
            limit: Maximum number of projects to return
            offset: Number of projects to skip

        Returns:
            Ranked projects
        """
        pass

    @abstractmethod
    async def count(self) -> int:
        """Count all projects.

        Returns:
            Total number of projects
        """
        pass

    @abstractmethod
    async def save(self, project: Project) -> Project:
        """Save a project (create or update).

        Args:
            project: The project to save

        Returns:
            The saved project
        """
        pass

    @abstractmethod
    async def increment_votes(self, project_id: ProjectId) -> None:
        """Atomically increment the vote counter by 1.

        Uses SQL-level increment to avoid race conditions.

        Args:
            project_id: The project ID
        """
        pass

    @abstractmethod
    async def decrement_votes(self, project_id: ProjectId) -> None:
        """Atomically decrement the vote counter by 1 (minimum 0).

        Uses SQL-level decrement to avoid race conditions.

        Args:
            project_id: The project ID
        """
        pass
