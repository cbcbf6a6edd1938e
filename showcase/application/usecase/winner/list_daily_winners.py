"""List daily winners use case."""

from datetime import datetime

from showcase.application.usecase.base import BaseUseCase, CamelModel
from showcase.application.usecase.project.views import ProjectItem
from showcase.domain.service import DailyWinnerService


class DailyWinnerItem(CamelModel):
    """Winner record with the winning project."""

    id: str
    project_id: int
    win_date: datetime
    vote_count: int
    created_at: datetime
    project: ProjectItem


class ListDailyWinnersResponse(CamelModel):
    """List daily winners response."""

    success: bool = True
    data: list[DailyWinnerItem]


class ListDailyWinnersUseCase(BaseUseCase):
    """Use case for the daily winners history page."""

    def __init__(self, daily_winner_service: DailyWinnerService) -> None:
        """Initialize list daily winners use case.

        Args:
            daily_winner_service: Daily winner domain service
        """
        self.daily_winner_service = daily_winner_service

    async def execute(self, request: None = None) -> ListDailyWinnersResponse:
        """Execute list daily winners flow.

        Returns:
            Every winner record, newest win date first
        """
        entries = await self.daily_winner_service.list_winners()

        return ListDailyWinnersResponse(
            data=[
                DailyWinnerItem(
                    id=str(entry.winner.id),
                    project_id=entry.winner.project_id,
                    win_date=entry.winner.win_date,
                    vote_count=entry.winner.vote_count,
                    created_at=entry.winner.created_at,
                    project=ProjectItem.from_view(entry.project),
                )
                for entry in entries
            ]
        )
