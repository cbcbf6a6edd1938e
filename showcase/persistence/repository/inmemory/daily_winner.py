"""In-memory daily winner repository for testing."""

from datetime import datetime

from showcase.domain.model import DailyWinner, DailyWinnerEntry
from showcase.domain.repository.daily_winner import DailyWinnerRepository
from showcase.domain.repository.project import ProjectRepository
from showcase.domain.value import as_utc


class InMemoryDailyWinnerRepository(DailyWinnerRepository):
    """In-memory implementation of DailyWinnerRepository for testing."""

    def __init__(self, project_repository: ProjectRepository) -> None:
        self.project_repository = project_repository
        self._winners: list[DailyWinner] = []

    async def insert_if_absent(self, winner: DailyWinner) -> bool:
        """Insert a winner record unless one exists for its project and day."""
        for existing in self._winners:
            if (
                existing.project_id == winner.project_id
                and existing.win_date == winner.win_date
            ):
                return False

        self._winners.append(winner)
        return True

    async def find_by_win_date(self, win_date: datetime) -> list[DailyWinner]:
        """Find the winner records for one judged day."""
        win_date = as_utc(win_date)
        return sorted(
            (w for w in self._winners if w.win_date == win_date),
            key=lambda w: w.project_id,
        )

    async def find_all_entries(self) -> list[DailyWinnerEntry]:
        """Find every winner joined with project, author and category."""
        ordered = sorted(
            self._winners, key=lambda w: (-w.win_date.timestamp(), w.project_id)
        )

        entries = []
        for winner in ordered:
            view = await self.project_repository.find_view_by_id(winner.project_id)
            # Inner join: winners whose project or author is gone are skipped
            if view:
                entries.append(DailyWinnerEntry(winner=winner, project=view))
        return entries
