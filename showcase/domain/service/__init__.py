"""Domain services."""

from .base import Service
from .daily_winner_service import DailyWinnerService
from .jwt_service import JWTService
from .project_service import ProjectService
from .scheduler_auth_service import SchedulerAuthService
from .vote_service import VoteService

__all__ = [
    "DailyWinnerService",
    "JWTService",
    "ProjectService",
    "SchedulerAuthService",
    "Service",
    "VoteService",
]
