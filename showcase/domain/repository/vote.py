"""Vote repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import List

from showcase.domain.model.vote import Vote
from showcase.domain.value import ProjectId, ProjectVoteCount, UserId


class VoteRepository(ABC):
    """Repository for the vote ledger.

    Storage only: no business rules beyond what the schema enforces.
    All windows are half-open, ``[start, end)``.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def save(self, vote: Vote) -> Vote:
        """Record a vote.

        No existence check is done here. The storage layer rejects a
        second vote by the same user for the same project on the same
        UTC day.

        Args:
            vote: The vote to record

        Returns:
            The saved vote

        Raises:
            IntegrityError: If the user already voted for the project that day
        """
        pass

    @abstractmethod
    async def delete_in_window(
        self,
        user_id: UserId,
        project_id: ProjectId,
        start: datetime,
        end: datetime,
    ) -> int:
        """Delete a user's votes for a project cast inside the window.

        Args:
            user_id: The user's ID
            project_id: The project's ID
            start: Window start (inclusive)
            end: Window end (exclusive)

        Returns:
            Number of votes deleted
        """
        pass

    @abstractmethod
    async def count_in_window(
        self, project_id: ProjectId, start: datetime, end: datetime
    ) -> int:
        """Count votes for a project cast inside the window.

        Args:
            project_id: The project's ID
            start: Window start (inclusive)
            end: Window end (exclusive)

        Returns:
            Number of votes
        """
        pass

    @abstractmethod
    async def count_all(self, project_id: ProjectId) -> int:
        """Count every vote a project has ever received.

        Args:
            project_id: The project's ID

        Returns:
            Number of votes
        """
        pass

    @abstractmethod
    async def exists_in_window(
        self,
        user_id: UserId,
        project_id: ProjectId,
        start: datetime,
        end: datetime,
    ) -> bool:
        """Check whether a user voted for a project inside the window.

        Args:
            user_id: The user's ID
            project_id: The project's ID
            start: Window start (inclusive)
            end: Window end (exclusive)

        Returns:
            True if at least one vote exists
        """
        pass

    @abstractmethod
    async def count_grouped_by_project(
        self, start: datetime, end: datetime
    ) -> List[ProjectVoteCount]:
        """Count votes per project inside the window.

        Projects without votes in the window are not returned.

        Args:
            start: Window start (inclusive)
            end: Window end (exclusive)

        Returns:
            Vote counts ordered by project ID
        """
        pass
