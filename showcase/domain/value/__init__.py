"""Domain value objects for showcase."""

from showcase.domain.value.day import DayWindow, as_utc, utc_date, utc_midnight
from showcase.domain.value.identifiers import (
    CategoryId,
    DailyWinnerId,
    ProjectId,
    UserId,
    VoteId,
)
from showcase.domain.value.types import (
    ProjectVoteCount,
    VoteAction,
    VoteOutcome,
    VoteStats,
    WinnerSelection,
)

__all__ = [
    # Identifiers
    "UserId",
    "ProjectId",
    "CategoryId",
    "VoteId",
    "DailyWinnerId",
    # Day windows
    "DayWindow",
    "as_utc",
    "utc_date",
    "utc_midnight",
    # Types
    "ProjectVoteCount",
    "VoteAction",
    "VoteOutcome",
    "VoteStats",
    "WinnerSelection",
]
