"""Select daily winners use case."""

from datetime import datetime, timezone

import logfire
from pydantic import BaseModel

from showcase.application.usecase.base import BaseUseCase, CamelModel
from showcase.domain.error import UntrustedSchedulerError
from showcase.domain.service import DailyWinnerService


class SelectDailyWinnersRequest(BaseModel):
    """Select daily winners request."""

    trusted: bool  # Whether the invocation came from the scheduler
    now: datetime | None = None


class WinnerItem(CamelModel):
    """One recorded winner."""

    project_id: int
    vote_count: int


class SelectDailyWinnersResponse(CamelModel):
    """Select daily winners response."""

    success: bool = True
    win_date: datetime
    winners: list[WinnerItem]
    inserted: int


class SelectDailyWinnersUseCase(BaseUseCase):
    """Use case run once a day by the scheduler to record yesterday's winners."""

    def __init__(self, daily_winner_service: DailyWinnerService) -> None:
        """Initialize select daily winners use case.

        Args:
            daily_winner_service: Daily winner domain service
        """
        self.daily_winner_service = daily_winner_service

    async def execute(
        self, request: SelectDailyWinnersRequest
    ) -> SelectDailyWinnersResponse:
        """Execute daily winner selection.

        Args:
            request: Trust flag and the instant the run happens at

        Returns:
            Judged day, its winners and how many records were inserted

        Raises:
            UntrustedSchedulerError: If the invocation is not trusted
            NoProjectsAvailableError: If there were no votes and no projects
        """
        if not request.trusted:
            logfire.warn("Untrusted daily winner selection rejected")
            raise UntrustedSchedulerError()

        selection = await self.daily_winner_service.select_winners(
            now=request.now or datetime.now(timezone.utc)
        )

        return SelectDailyWinnersResponse(
            win_date=selection.win_date,
            winners=[
                WinnerItem(project_id=w.project_id, vote_count=w.vote_count)
                for w in selection.winners
            ],
            inserted=selection.inserted,
        )
