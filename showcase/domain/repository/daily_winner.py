"""Daily winner repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import List

from showcase.domain.model.daily_winner import DailyWinner, DailyWinnerEntry


class DailyWinnerRepository(ABC):
    """Repository for daily winner records.

    Records are insert-only. Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def insert_if_absent(self, winner: DailyWinner) -> bool:
        """Insert a winner record unless one exists for its project and day.

        The existence check and the insert are a single atomic statement,
        so concurrent runs for the same day cannot create duplicates.
        An existing record is left untouched.

        Args:
            winner: The winner record to insert

        Returns:
            True if the record was inserted, False if it already existed
        """
        pass

    @abstractmethod
    async def find_by_win_date(self, win_date: datetime) -> List[DailyWinner]:
        """Find the winner records for one judged day.

        Args:
            win_date: UTC midnight starting the judged day

        Returns:
            Winner records ordered by project ID
        """
        pass

    @abstractmethod
    async def find_all_entries(self) -> List[DailyWinnerEntry]:
        """Find every winner record joined with project, author and category.

        Returns:
            Entries ordered by win date, newest first
        """
        pass
