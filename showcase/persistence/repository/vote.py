"""PostgreSQL implementation of Vote repository."""

from datetime import datetime
from typing import List

from sqlalchemy import and_, delete, func, insert, select
from sqlalchemy.ext.asyncio import AsyncSession

from showcase.domain.model import Vote
from showcase.domain.repository import VoteRepository
from showcase.domain.value import ProjectId, ProjectVoteCount, UserId
from showcase.persistence.mappers import vote_to_dict
from showcase.persistence.tables import votes_table


def _in_window(start: datetime, end: datetime):
    return and_(votes_table.c.created_at >= start, votes_table.c.created_at < end)


class PostgresVoteRepository(VoteRepository):
    """PostgreSQL implementation of VoteRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def save(self, vote: Vote) -> Vote:
        """Record a vote; the unique constraint rejects a same-day duplicate."""
        stmt = insert(votes_table).values(**vote_to_dict(vote))
        await self.session.execute(stmt)
        await self.session.flush()
        return vote

    async def delete_in_window(
        self,
        user_id: UserId,
        project_id: ProjectId,
        start: datetime,
        end: datetime,
    ) -> int:
        """Delete a user's votes for a project inside the window."""
        stmt = delete(votes_table).where(
            votes_table.c.user_id == user_id,
            votes_table.c.project_id == project_id,
            _in_window(start, end),
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount  # type: ignore[attr-defined]

    async def count_in_window(
        self, project_id: ProjectId, start: datetime, end: datetime
    ) -> int:
        """Count votes for a project inside the window."""
        stmt = (
            select(func.count())
            .select_from(votes_table)
            .where(votes_table.c.project_id == project_id, _in_window(start, end))
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def count_all(self, project_id: ProjectId) -> int:
        """Count every vote for a project."""
        stmt = (
            select(func.count())
            .select_from(votes_table)
            .where(votes_table.c.project_id == project_id)
        )
        result = await self.session.execute(stmt)
        return result.scalar() or 0

    async def exists_in_window(
        self,
        user_id: UserId,
        project_id: ProjectId,
        start: datetime,
        end: datetime,
    ) -> bool:
        """Check whether a user voted for a project inside the window."""
        stmt = select(
            select(votes_table.c.id)
            .where(
                votes_table.c.user_id == user_id,
                votes_table.c.project_id == project_id,
                _in_window(start, end),
            )
            .exists()
        )
        result = await self.session.execute(stmt)
        return bool(result.scalar())

    async def count_grouped_by_project(
        self, start: datetime, end: datetime
    ) -> List[ProjectVoteCount]:
        """Count votes per project inside the window."""
        stmt = (
            select(votes_table.c.project_id, func.count().label("vote_count"))
            .where(_in_window(start, end))
            .group_by(votes_table.c.project_id)
            .order_by(votes_table.c.project_id)
        )
        result = await self.session.execute(stmt)
        return [
            ProjectVoteCount(
                project_id=ProjectId(row.project_id), vote_count=row.vote_count
            )
            for row in result.fetchall()
        ]
