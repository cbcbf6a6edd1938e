"""Retract vote use case."""

from datetime import datetime, timezone

from pydantic import BaseModel

from showcase.application.usecase.base import BaseUseCase
from showcase.domain.service import VoteService
from showcase.domain.value import ProjectId, UserId

from .response import VoteResponse


class RetractVoteRequest(BaseModel):
    """Retract vote request."""

    project_id: int
    user_id: str | None = None  # User ID from the auth token, None if anonymous
    now: datetime | None = None


class RetractVoteUseCase(BaseUseCase):
    """Use case for retracting today's vote for a project."""

    def __init__(self, vote_service: VoteService) -> None:
        """Initialize retract vote use case.

        Args:
            vote_service: Vote domain service
        """
        self.vote_service = vote_service

    async def execute(self, request: RetractVoteRequest) -> VoteResponse:
        """Execute retract vote flow.

        Args:
            request: Retract vote request

        Returns:
            Vote numbers after the vote was removed

        Raises:
            UnauthenticatedError: If the caller is anonymous
            NotFoundError: If the project does not exist
            NoExistingVoteError: If the caller has not voted today
        """
        outcome = await self.vote_service.retract_vote(
            user_id=UserId(request.user_id) if request.user_id else None,
            project_id=ProjectId(request.project_id),
            now=request.now or datetime.now(timezone.utc),
        )
        return VoteResponse.from_outcome(outcome)
