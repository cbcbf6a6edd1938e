"""Vote domain service.

Aggregates the vote ledger into daily and total counts and owns the only
mutating vote operations: cast, retract and toggle today's vote. Every
"today" is the UTC day containing the supplied instant.
"""

from datetime import datetime
from uuid import uuid4

import logfire
from sqlalchemy.exc import IntegrityError

from showcase.domain.error import (
    AlreadyVotedError,
    NoExistingVoteError,
    UnauthenticatedError,
)
from showcase.domain.model.vote import Vote
from showcase.domain.repository import VoteRepository
from showcase.domain.value import (
    DayWindow,
    ProjectId,
    UserId,
    VoteAction,
    VoteId,
    VoteOutcome,
    VoteStats,
)

from .base import Service
from .project_service import ProjectService


class VoteService(Service):
    """Domain service for vote operations."""

    def __init__(
        self,
        vote_repository: VoteRepository,
        project_service: ProjectService,
    ) -> None:
        """Initialize vote service.

        Args:
            vote_repository: Vote repository
            project_service: Project domain service
        """
        self.vote_repository = vote_repository
        self.project_service = project_service

    async def get_daily_votes(self, project_id: ProjectId, as_of: datetime) -> int:
        """Count a project's votes in the UTC day containing ``as_of``.

        Args:
            project_id: Project ID
            as_of: Instant that defines the day

        Returns:
            Number of votes that day
        """
        window = DayWindow.containing(as_of)
        return await self.vote_repository.count_in_window(
            project_id, window.start, window.end
        )

    async def get_total_votes(self, project_id: ProjectId) -> int:
        """Count every vote a project has received.

        Args:
            project_id: Project ID

        Returns:
            All-time number of votes
        """
        return await self.vote_repository.count_all(project_id)

    async def has_voted_today(
        self, user_id: UserId, project_id: ProjectId, as_of: datetime
    ) -> bool:
        """Check whether a user voted for a project in the UTC day containing ``as_of``.

        Args:
            user_id: User ID
            project_id: Project ID
            as_of: Instant that defines the day

        Returns:
            True if the user already voted that day
        """
        window = DayWindow.containing(as_of)
        return await self.vote_repository.exists_in_window(
            user_id, project_id, window.start, window.end
        )

    async def get_vote_stats(
        self, project_id: ProjectId, user_id: UserId | None, as_of: datetime
    ) -> VoteStats:
        """Get the vote numbers shown next to a project.

        Args:
            project_id: Project ID
            user_id: Caller's user ID, None when anonymous
            as_of: Instant that defines "today"

        Returns:
            Daily and total votes plus the caller's vote state

        Raises:
            NotFoundError: If the project does not exist
        """
        with logfire.span(
            "vote_service.get_vote_stats",
            project_id=project_id,
            authenticated=bool(user_id),
        ):
            await self.project_service.require_project(project_id)

            has_voted = False
            if user_id:
                has_voted = await self.has_voted_today(user_id, project_id, as_of)

            return VoteStats(
                daily_votes=await self.get_daily_votes(project_id, as_of),
                total_votes=await self.get_total_votes(project_id),
                has_voted=has_voted,
                is_authenticated=bool(user_id),
            )

    async def toggle_vote(
        self, user_id: UserId | None, project_id: ProjectId, now: datetime
    ) -> VoteOutcome:
        """Cast today's vote if the user has none, otherwise retract it.

        Args:
            user_id: Caller's user ID
            project_id: Project ID
            now: Current instant

        Returns:
            What happened plus the recomputed vote numbers

        Raises:
            UnauthenticatedError: If there is no caller identity
            NotFoundError: If the project does not exist
            AlreadyVotedError: If a concurrent request cast the vote first
        """
        user_id = self._require_user(user_id)
        with logfire.span(
            "vote_service.toggle_vote", project_id=project_id, user_id=user_id
        ):
            await self.project_service.require_project(project_id)

            if await self.has_voted_today(user_id, project_id, now):
                await self._retract(user_id, project_id, now)
                return await self._outcome(VoteAction.UNVOTED, project_id, now)

            await self._cast(user_id, project_id, now)
            return await self._outcome(VoteAction.VOTED, project_id, now)

    async def cast_vote(
        self, user_id: UserId | None, project_id: ProjectId, now: datetime
    ) -> VoteOutcome:
        """Cast today's vote for a project.

        Args:
            user_id: Caller's user ID
            project_id: Project ID
            now: Current instant

        Returns:
            The recomputed vote numbers

        Raises:
            UnauthenticatedError: If there is no caller identity
            NotFoundError: If the project does not exist
            AlreadyVotedError: If the user already voted today
        """
        user_id = self._require_user(user_id)
        with logfire.span(
            "vote_service.cast_vote", project_id=project_id, user_id=user_id
        ):
            await self.project_service.require_project(project_id)

            if await self.has_voted_today(user_id, project_id, now):
                logfire.warn(
                    "Duplicate vote attempt", user_id=user_id, project_id=project_id
                )
                raise AlreadyVotedError(project_id)

            await self._cast(user_id, project_id, now)
            return await self._outcome(VoteAction.VOTED, project_id, now)

    async def retract_vote(
        self, user_id: UserId | None, project_id: ProjectId, now: datetime
    ) -> VoteOutcome:
        """Retract today's vote for a project.

        Args:
            user_id: Caller's user ID
            project_id: Project ID
            now: Current instant

        Returns:
            The recomputed vote numbers

        Raises:
            UnauthenticatedError: If there is no caller identity
            NotFoundError: If the project does not exist
            NoExistingVoteError: If the user has not voted today
        """
        user_id = self._require_user(user_id)
        with logfire.span(
            "vote_service.retract_vote", project_id=project_id, user_id=user_id
        ):
            await self.project_service.require_project(project_id)

            if not await self._retract(user_id, project_id, now):
                logfire.warn(
                    "No vote to retract", user_id=user_id, project_id=project_id
                )
                raise NoExistingVoteError(project_id)

            return await self._outcome(VoteAction.UNVOTED, project_id, now)

    @staticmethod
    def _require_user(user_id: UserId | None) -> UserId:
        if not user_id:
            raise UnauthenticatedError()
        return user_id

    async def _cast(
        self, user_id: UserId, project_id: ProjectId, now: datetime
    ) -> Vote:
        """Record the vote and bump the counter in the caller's transaction."""
        vote = Vote(
            id=VoteId(uuid4()),
            user_id=user_id,
            project_id=project_id,
            created_at=now,
        )

        # The unique (user, project, day) constraint rejects a racing duplicate
        try:
            saved_vote = await self.vote_repository.save(vote)
        except IntegrityError:
            logfire.warn(
                "Concurrent duplicate vote rejected",
                user_id=user_id,
                project_id=project_id,
            )
            raise AlreadyVotedError(project_id)

        await self.project_service.increment_votes(project_id)

        logfire.info(
            "Vote cast",
            user_id=user_id,
            project_id=project_id,
            vote_day=saved_vote.vote_day.isoformat(),
        )
        return saved_vote

    async def _retract(
        self, user_id: UserId, project_id: ProjectId, now: datetime
    ) -> bool:
        """Delete today's vote and lower the counter. Returns False if none existed."""
        window = DayWindow.containing(now)
        deleted = await self.vote_repository.delete_in_window(
            user_id, project_id, window.start, window.end
        )
        if not deleted:
            return False

        await self.project_service.decrement_votes(project_id)

        logfire.info(
            "Vote retracted",
            user_id=user_id,
            project_id=project_id,
            vote_day=window.day.isoformat(),
        )
        return True

    async def _outcome(
        self, action: VoteAction, project_id: ProjectId, now: datetime
    ) -> VoteOutcome:
        return VoteOutcome(
            action=action,
            daily_votes=await self.get_daily_votes(project_id, now),
            total_votes=await self.get_total_votes(project_id),
            has_voted=action == VoteAction.VOTED,
        )
