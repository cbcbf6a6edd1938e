"""In-memory repository implementations for testing."""

from .daily_winner import InMemoryDailyWinnerRepository
from .project import InMemoryProjectRepository
from .vote import InMemoryVoteRepository

__all__ = [
    "InMemoryDailyWinnerRepository",
    "InMemoryProjectRepository",
    "InMemoryVoteRepository",
]
