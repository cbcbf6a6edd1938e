"""PostgreSQL implementation of DailyWinner repository."""

from datetime import datetime
from typing import List

import logfire
from sqlalchemy import desc, select
from sqlalchemy.dialects.postgresql import insert as pg_insert
from sqlalchemy.ext.asyncio import AsyncSession

from showcase.domain.model import DailyWinner, DailyWinnerEntry
from showcase.domain.repository import DailyWinnerRepository
from showcase.persistence.mappers import (
    WINNER_PREFIX,
    daily_winner_to_dict,
    row_to_daily_winner,
    row_to_daily_winner_entry,
)
from showcase.persistence.repository.project import (
    project_view_columns,
    project_view_from,
)
from showcase.persistence.tables import daily_winners_table, projects_table


class PostgresDailyWinnerRepository(DailyWinnerRepository):
    """PostgreSQL implementation of DailyWinnerRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def insert_if_absent(self, winner: DailyWinner) -> bool:
        """Insert a winner record, ignoring a conflict on (project_id, win_date)."""
        stmt = (
            pg_insert(daily_winners_table)
            .values(**daily_winner_to_dict(winner))
            .on_conflict_do_nothing(constraint="uq_daily_winners_project_win_date")
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount > 0  # type: ignore[attr-defined]

    async def find_by_win_date(self, win_date: datetime) -> List[DailyWinner]:
        """Find the winner records for one judged day."""
        stmt = (
            select(daily_winners_table)
            .where(daily_winners_table.c.win_date == win_date)
            .order_by(daily_winners_table.c.project_id)
        )
        result = await self.session.execute(stmt)
        return [row_to_daily_winner(row._asdict()) for row in result.fetchall()]

    async def find_all_entries(self) -> List[DailyWinnerEntry]:
        """Find every winner joined with project, author and category."""
        with logfire.span("daily_winner_repository.find_all_entries"):
            stmt = (
                select(
                    *(
                        c.label(f"{WINNER_PREFIX}{c.name}")
                        for c in daily_winners_table.c
                    ),
                    *project_view_columns(),
                )
                .select_from(
                    daily_winners_table.join(
                        project_view_from(),
                        daily_winners_table.c.project_id == projects_table.c.id,
                    )
                )
                .order_by(
                    desc(daily_winners_table.c.win_date),
                    daily_winners_table.c.project_id,
                )
            )
            result = await self.session.execute(stmt)
            return [
                row_to_daily_winner_entry(row._asdict()) for row in result.fetchall()
            ]
