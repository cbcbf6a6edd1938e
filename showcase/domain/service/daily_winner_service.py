"""Daily winner domain service."""

import random
from datetime import datetime
from uuid import uuid4

import logfire

from showcase.domain.error import NoProjectsAvailableError
from showcase.domain.model.daily_winner import DailyWinner, DailyWinnerEntry
from showcase.domain.repository import DailyWinnerRepository, VoteRepository
from showcase.domain.value import (
    DailyWinnerId,
    DayWindow,
    ProjectVoteCount,
    WinnerSelection,
)

from .base import Service
from .project_service import ProjectService


class DailyWinnerService(Service):
    """Domain service for selecting and reading daily winners."""

    def __init__(
        self,
        daily_winner_repository: DailyWinnerRepository,
        vote_repository: VoteRepository,
        project_service: ProjectService,
        rng: random.Random | None = None,
    ) -> None:
        """Initialize daily winner service.

        Args:
            daily_winner_repository: Daily winner repository
            vote_repository: Vote repository
            project_service: Project domain service
            rng: Random source for the zero-vote fallback pick
        """
        self.daily_winner_repository = daily_winner_repository
        self.vote_repository = vote_repository
        self.project_service = project_service
        self.rng = rng or random.Random()

    async def select_winners(self, now: datetime) -> WinnerSelection:
        """Record the winner(s) of the UTC day before ``now``.

        - Every project sharing the highest vote count wins (ties included)
        - With no votes at all, one project is picked uniformly at random
          and recorded with zero votes; a rerun reuses that pick
        - Records are inserted with "ignore on conflict", so re-running for
          the same day never duplicates or overwrites anything

        Args:
            now: Current instant; the judged day is the one before it

        Returns:
            The judged day, its winners (written now or already present)
            and how many records this run inserted

        Raises:
            NoProjectsAvailableError: If there were no votes and no projects
        """
        window = DayWindow.previous(now)
        with logfire.span(
            "daily_winner_service.select_winners", win_date=window.day.isoformat()
        ):
            counts = await self.vote_repository.count_grouped_by_project(
                window.start, window.end
            )

            if counts:
                winners = self._top_voted(counts)
                logfire.info(
                    "Top voted projects found",
                    win_date=window.day.isoformat(),
                    max_votes=winners[0].vote_count,
                    winner_count=len(winners),
                    candidates=len(counts),
                )
            else:
                # A rerun keeps the earlier random pick instead of drawing again
                winners = await self._recorded(window) or [await self._random_pick()]
                logfire.info(
                    "No votes yesterday, using a random project",
                    win_date=window.day.isoformat(),
                    project_id=winners[0].project_id,
                )

            inserted = 0
            for winner in winners:
                record = DailyWinner(
                    id=DailyWinnerId(uuid4()),
                    project_id=winner.project_id,
                    win_date=window.start,
                    vote_count=winner.vote_count,
                )
                if await self.daily_winner_repository.insert_if_absent(record):
                    inserted += 1
                else:
                    logfire.info(
                        "Winner already recorded",
                        project_id=winner.project_id,
                        win_date=window.day.isoformat(),
                    )

            recorded = await self._recorded(window)
            if recorded != winners:
                logfire.warn(
                    "Recorded winners differ from this run's selection",
                    win_date=window.day.isoformat(),
                    selected=[w.project_id for w in winners],
                    recorded=[w.project_id for w in recorded],
                )

            logfire.info(
                "Daily winners recorded",
                win_date=window.day.isoformat(),
                winners=[w.project_id for w in recorded],
                inserted=inserted,
            )

            return WinnerSelection(
                win_date=window.start, winners=recorded, inserted=inserted
            )

    async def list_winners(self) -> list[DailyWinnerEntry]:
        """Get every winner record with its project, author and category.

        Returns:
            Winner entries, newest win date first
        """
        with logfire.span("daily_winner_service.list_winners"):
            entries = await self.daily_winner_repository.find_all_entries()
            logfire.info("Daily winners loaded", count=len(entries))
            return entries

    @staticmethod
    def _top_voted(counts: list[ProjectVoteCount]) -> list[ProjectVoteCount]:
        max_votes = max(count.vote_count for count in counts)
        return sorted(
            (count for count in counts if count.vote_count == max_votes),
            key=lambda count: count.project_id,
        )

    async def _recorded(self, window: DayWindow) -> list[ProjectVoteCount]:
        records = await self.daily_winner_repository.find_by_win_date(window.start)
        return [
            ProjectVoteCount(project_id=r.project_id, vote_count=r.vote_count)
            for r in records
        ]

    async def _random_pick(self) -> ProjectVoteCount:
        project_ids = await self.project_service.get_all_project_ids()
        if not project_ids:
            logfire.error("No projects available for daily winner selection")
            raise NoProjectsAvailableError()

        return ProjectVoteCount(project_id=self.rng.choice(project_ids), vote_count=0)
