"""List today's projects use case."""

from datetime import datetime, timezone

import logfire
from pydantic import BaseModel, Field

from showcase.application.usecase.base import BaseUseCase, CamelModel
from showcase.domain.service import ProjectService

from .views import ProjectItem


class TodayProjectItem(ProjectItem):
    """Project with the votes it received today."""

    today_votes: int


class ListTodayProjectsRequest(BaseModel):
    """List today's projects request."""

    limit: int = Field(default=10, ge=1, le=100)
    offset: int = Field(default=0, ge=0)
    now: datetime | None = None


class ListTodayProjectsResponse(CamelModel):
    """Today's leaderboard page."""

    success: bool = True
    data: list[TodayProjectItem]
    total: int
    limit: int
    offset: int


class ListTodayProjectsUseCase(BaseUseCase):
    """Use case for the leaderboard of votes cast in the current UTC day."""

    def __init__(self, project_service: ProjectService) -> None:
        """Initialize list today's projects use case.

        Args:
            project_service: Project domain service
        """
        self.project_service = project_service

    async def execute(
        self, request: ListTodayProjectsRequest
    ) -> ListTodayProjectsResponse:
        """Execute list today's projects flow.

        Args:
            request: Pagination and the instant defining "today"

        Returns:
            Projects ordered by today's votes, newest first on ties
        """
        with logfire.span(
            "list_today_projects.execute",
            limit=request.limit,
            offset=request.offset,
        ):
            ranked, total = await self.project_service.list_today_ranked(
                as_of=request.now or datetime.now(timezone.utc),
                limit=request.limit,
                offset=request.offset,
            )

            return ListTodayProjectsResponse(
                data=[
                    TodayProjectItem.from_view(item.view, today_votes=item.daily_votes)
                    for item in ranked
                ],
                total=total,
                limit=request.limit,
                offset=request.offset,
            )
