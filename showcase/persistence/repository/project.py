"""PostgreSQL implementation of Project repository."""

from datetime import datetime
from typing import List, Optional

import logfire
from sqlalchemy import desc, func, select, update
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.ext.asyncio import AsyncSession

from showcase.domain.model import Project, ProjectView, RankedProject
from showcase.domain.repository import ProjectRepository
from showcase.domain.value import ProjectId
from showcase.persistence.mappers import (
    AUTHOR_PREFIX,
    CATEGORY_PREFIX,
    project_to_dict,
    row_to_project,
    row_to_project_view,
)
from showcase.persistence.tables import (
    categories_table,
    projects_table,
    users_table,
    votes_table,
)


def project_view_columns() -> list:
    """Project columns plus prefixed author and category columns."""
    return [
        *projects_table.c,
        *(c.label(f"{AUTHOR_PREFIX}{c.name}") for c in users_table.c),
        *(c.label(f"{CATEGORY_PREFIX}{c.name}") for c in categories_table.c),
    ]


def project_view_from():
    """Projects inner-joined to their author and outer-joined to the category."""
    return projects_table.join(
        users_table, projects_table.c.author_id == users_table.c.id
    ).outerjoin(categories_table, projects_table.c.category_id == categories_table.c.id)


class PostgresProjectRepository(ProjectRepository):
    """PostgreSQL implementation of ProjectRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, project_id: ProjectId) -> Optional[Project]:
        """Find a project by ID."""
        stmt = select(projects_table).where(projects_table.c.id == project_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_project(row._asdict()) if row else None

    async def find_view_by_id(self, project_id: ProjectId) -> Optional[ProjectView]:
        """Find a project joined with its author and category."""
        stmt = (
            select(*project_view_columns())
            .select_from(project_view_from())
            .where(projects_table.c.id == project_id)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_project_view(row._asdict()) if row else None

    async def find_all_ids(self) -> List[ProjectId]:
        """List the IDs of every project."""
        stmt = select(projects_table.c.id).order_by(projects_table.c.id)
        result = await self.session.execute(stmt)
        return [ProjectId(project_id) for project_id in result.scalars().all()]

    async def find_ranked_in_window(
        self,
        start: datetime,
        end: datetime,
        limit: int = 10,
        offset: int = 0,
    ) -> List[RankedProject]:
        """List projects ranked by their votes inside the window."""
        with logfire.span(
            "project_repository.find_ranked_in_window",
            start=start.isoformat(),
            limit=limit,
            offset=offset,
        ):
            window_votes = (
                select(votes_table.c.project_id, func.count().label("vote_count"))
                .where(
                    votes_table.c.created_at >= start,
                    votes_table.c.created_at < end,
                )
                .group_by(votes_table.c.project_id)
                .subquery("window_votes")
            )
            daily_votes = func.coalesce(window_votes.c.vote_count, 0).label(
                "daily_votes"
            )

            stmt = (
                select(*project_view_columns(), daily_votes)
                .select_from(
                    project_view_from().outerjoin(
                        window_votes,
                        window_votes.c.project_id == projects_table.c.id,
                    )
                )
                .order_by(
                    desc(daily_votes),
                    desc(projects_table.c.created_at),
                    desc(projects_table.c.id),
                )
                .limit(limit)
                .offset(offset)
            )
            result = await self.session.execute(stmt)

            return [
                RankedProject(
                    view=row_to_project_view(row._asdict()),
                    daily_votes=row.daily_votes,
                )
                for row in result.fetchall()
            ]

    async def count(self) -> int:
        """Count all projects."""
        stmt = select(func.count()).select_from(projects_table)
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def save(self, project: Project) -> Project:
        """Save a project (create or update).

        The vote counter is left out of updates; only the relative
        increment and decrement statements change it.
        """
        project_dict = project_to_dict(project)
        stmt = pg_insert(projects_table).values(**project_dict)
        stmt = stmt.on_conflict_do_update(
            index_elements=[projects_table.c.id],
            set_={
                key: stmt.excluded[key]
                for key in project_dict
                if key not in ("id", "votes", "created_at")
            },
        )
        await self.session.execute(stmt)
        await self.session.flush()
        return project

    async def increment_votes(self, project_id: ProjectId) -> None:
        """Atomically increment the vote counter by 1."""
        stmt = (
            update(projects_table)
            .where(projects_table.c.id == project_id)
            .values(votes=projects_table.c.votes + 1)
        )
        await self.session.execute(stmt)
        await self.session.flush()

    async def decrement_votes(self, project_id: ProjectId) -> None:
        """Atomically decrement the vote counter by 1 (minimum 0)."""
        stmt = (
            update(projects_table)
            .where(projects_table.c.id == project_id)
            .values(votes=func.greatest(projects_table.c.votes - 1, 0))
        )
        await self.session.execute(stmt)
        await self.session.flush()
