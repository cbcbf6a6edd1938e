"""Toggle vote use case."""

from datetime import datetime, timezone

import logfire
from pydantic import BaseModel

from showcase.application.usecase.base import BaseUseCase
from showcase.domain.service import VoteService
from showcase.domain.value import ProjectId, UserId

from .response import VoteResponse


class ToggleVoteRequest(BaseModel):
    """Toggle vote request."""

    project_id: int
    user_id: str | None = None  # User ID from the auth token, None if anonymous
    now: datetime | None = None


class ToggleVoteUseCase(BaseUseCase):
    """Use case for the single vote button: vote if not yet voted today, else unvote."""

    def __init__(self, vote_service: VoteService) -> None:
        """Initialize toggle vote use case.

        Args:
            vote_service: Vote domain service
        """
        self.vote_service = vote_service

    async def execute(self, request: ToggleVoteRequest) -> VoteResponse:
        """Execute toggle vote flow.

        Args:
            request: Toggle vote request

        Returns:
            The action taken and the recomputed vote numbers

        Raises:
            UnauthenticatedError: If the caller is anonymous
            NotFoundError: If the project does not exist
            AlreadyVotedError: If a concurrent request cast the same vote first
        """
        outcome = await self.vote_service.toggle_vote(
            user_id=UserId(request.user_id) if request.user_id else None,
            project_id=ProjectId(request.project_id),
            now=request.now or datetime.now(timezone.utc),
        )
        logfire.info(
            "Vote toggled",
            project_id=request.project_id,
            action=outcome.action.value,
        )
        return VoteResponse.from_outcome(outcome)
