"""PostgreSQL repository implementations."""

from showcase.persistence.repository.daily_winner import PostgresDailyWinnerRepository
from showcase.persistence.repository.project import PostgresProjectRepository
from showcase.persistence.repository.vote import PostgresVoteRepository

__all__ = [
    "PostgresDailyWinnerRepository",
    "PostgresProjectRepository",
    "PostgresVoteRepository",
]
