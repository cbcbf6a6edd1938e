"""Repository interfaces for the showcase domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from showcase.domain.repository.daily_winner import DailyWinnerRepository
from showcase.domain.repository.project import ProjectRepository
from showcase.domain.repository.vote import VoteRepository

__all__ = [
    "DailyWinnerRepository",
    "ProjectRepository",
    "VoteRepository",
]
