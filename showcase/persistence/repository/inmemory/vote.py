"""In-memory vote repository for testing."""

from collections import Counter
from datetime import datetime

from sqlalchemy.exc import IntegrityError

from showcase.domain.model.vote import Vote
from showcase.domain.repository.vote import VoteRepository
from showcase.domain.value import ProjectId, ProjectVoteCount, UserId, as_utc


class InMemoryVoteRepository(VoteRepository):
    """In-memory implementation of VoteRepository for testing."""

    def __init__(self) -> None:
        self._votes: list[Vote] = []

    def _in_window(self, vote: Vote, start: datetime, end: datetime) -> bool:
        return as_utc(start) <= vote.created_at < as_utc(end)

    async def save(self, vote: Vote) -> Vote:
        """Save a vote.

        Raises:
            IntegrityError: If the user already voted for the project that day
        """
        for existing in self._votes:
            if (
                existing.user_id == vote.user_id
                and existing.project_id == vote.project_id
                and existing.vote_day == vote.vote_day
            ):
                raise IntegrityError("Duplicate vote", None, Exception())

        self._votes.append(vote)
        return vote

    async def delete_in_window(
        self,
        user_id: UserId,
        project_id: ProjectId,
        start: datetime,
        end: datetime,
    ) -> int:
        """Delete a user's votes for a project inside the window."""
        kept = [
            v
            for v in self._votes
            if not (
                v.user_id == user_id
                and v.project_id == project_id
                and self._in_window(v, start, end)
            )
        ]
        deleted = len(self._votes) - len(kept)
        self._votes = kept
        return deleted

    async def count_in_window(
        self, project_id: ProjectId, start: datetime, end: datetime
    ) -> int:
        """Count votes for a project inside the window."""
        return sum(
            1
            for v in self._votes
            if v.project_id == project_id and self._in_window(v, start, end)
        )

    async def count_all(self, project_id: ProjectId) -> int:
        """Count every vote for a project."""
        return sum(1 for v in self._votes if v.project_id == project_id)

    async def exists_in_window(
        self,
        user_id: UserId,
        project_id: ProjectId,
        start: datetime,
        end: datetime,
    ) -> bool:
        """Check whether a user voted for a project inside the window."""
        return any(
            v.user_id == user_id
            and v.project_id == project_id
            and self._in_window(v, start, end)
            for v in self._votes
        )

    async def count_grouped_by_project(
        self, start: datetime, end: datetime
    ) -> list[ProjectVoteCount]:
        """Count votes per project inside the window."""
        counts = Counter(
            v.project_id for v in self._votes if self._in_window(v, start, end)
        )
        return [
            ProjectVoteCount(project_id=project_id, vote_count=count)
            for project_id, count in sorted(counts.items())
        ]
