"""In-memory project repository for testing."""

from datetime import datetime
from typing import Optional

from showcase.domain.model import Category, Project, ProjectView, RankedProject, User
from showcase.domain.repository.project import ProjectRepository
from showcase.domain.repository.vote import VoteRepository
from showcase.domain.value import ProjectId


class InMemoryProjectRepository(ProjectRepository):
    """In-memory implementation of ProjectRepository for testing.

    Authors and categories have no repository of their own here; tests
    register them with ``add_author`` and ``add_category``. Ranking reads
    the vote ledger from the given vote repository.
    """

    def __init__(self, vote_repository: VoteRepository) -> None:
        self.vote_repository = vote_repository
        self._projects: dict[ProjectId, Project] = {}
        self._authors: dict[str, User] = {}
        self._categories: dict[int, Category] = {}

    def add_author(self, user: User) -> User:
        """Register a project author."""
        self._authors[user.id] = user
        return user

    def add_category(self, category: Category) -> Category:
        """Register a category."""
        self._categories[category.id] = category
        return category

    async def find_by_id(self, project_id: ProjectId) -> Optional[Project]:
        """Find a project by ID."""
        return self._projects.get(project_id)

    async def find_view_by_id(self, project_id: ProjectId) -> Optional[ProjectView]:
        """Find a project joined with its author and category."""
        project = self._projects.get(project_id)
        if not project:
            return None

        author = self._authors.get(project.author_id)
        if not author:
            return None

        category = (
            self._categories.get(project.category_id) if project.category_id else None
        )
        return ProjectView(project=project, author=author, category=category)

    async def find_all_ids(self) -> list[ProjectId]:
        """List the IDs of every project."""
        return sorted(self._projects)

    async def find_ranked_in_window(
        self,
        start: datetime,
        end: datetime,
        limit: int = 10,
        offset: int = 0,
    ) -> list[RankedProject]:
        """List projects ranked by their votes inside the window."""
        counts = {
            c.project_id: c.vote_count
            for c in await self.vote_repository.count_grouped_by_project(start, end)
        }

        ranked = []
        for project_id in self._projects:
            view = await self.find_view_by_id(project_id)
            if view:
                ranked.append(
                    RankedProject(view=view, daily_votes=counts.get(project_id, 0))
                )

        ranked.sort(
            key=lambda r: (
                r.daily_votes,
                r.view.project.created_at,
                r.view.project.id,
            ),
            reverse=True,
        )
        return ranked[offset : offset + limit]

    async def count(self) -> int:
        """Count all projects."""
        return len(self._projects)

    async def save(self, project: Project) -> Project:
        """Save a project (create or update)."""
        self._projects[project.id] = project
        return project

    async def increment_votes(self, project_id: ProjectId) -> None:
        """Increment the vote counter by 1."""
        project = self._projects.get(project_id)
        if project:
            self._projects[project_id] = project.model_copy(
                update={"votes": project.votes + 1}
            )

    async def decrement_votes(self, project_id: ProjectId) -> None:
        """Decrement the vote counter by 1 (minimum 0)."""
        project = self._projects.get(project_id)
        if project:
            self._projects[project_id] = project.model_copy(
                update={"votes": max(project.votes - 1, 0)}
            )
