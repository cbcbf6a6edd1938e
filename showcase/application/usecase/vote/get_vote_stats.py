"""Get vote stats use case."""

from datetime import datetime, timezone

from pydantic import BaseModel

from showcase.application.usecase.base import BaseUseCase, CamelModel
from showcase.domain.service import VoteService
from showcase.domain.value import ProjectId, UserId


class GetVoteStatsRequest(BaseModel):
    """Get vote stats request."""

    project_id: int
    user_id: str | None = None  # Current user ID (if authenticated)
    now: datetime | None = None


class GetVoteStatsResponse(CamelModel):
    """Vote numbers shown next to a project."""

    success: bool = True
    daily_votes: int
    total_votes: int
    has_voted: bool
    is_authenticated: bool


class GetVoteStatsUseCase(BaseUseCase):
    """Use case for reading a project's daily and total votes."""

    def __init__(self, vote_service: VoteService) -> None:
        """Initialize get vote stats use case.

        Args:
            vote_service: Vote domain service
        """
        self.vote_service = vote_service

    async def execute(self, request: GetVoteStatsRequest) -> GetVoteStatsResponse:
        """Execute get vote stats flow.

        Args:
            request: Get vote stats request

        Returns:
            Daily votes, total votes and the caller's vote state

        Raises:
            NotFoundError: If the project does not exist
        """
        stats = await self.vote_service.get_vote_stats(
            project_id=ProjectId(request.project_id),
            user_id=UserId(request.user_id) if request.user_id else None,
            as_of=request.now or datetime.now(timezone.utc),
        )
        return GetVoteStatsResponse(
            daily_votes=stats.daily_votes,
            total_votes=stats.total_votes,
            has_voted=stats.has_voted,
            is_authenticated=stats.is_authenticated,
        )
