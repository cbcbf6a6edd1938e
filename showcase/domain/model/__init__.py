"""Domain model entities for showcase."""

from showcase.domain.model.category import Category
from showcase.domain.model.daily_winner import DailyWinner, DailyWinnerEntry
from showcase.domain.model.project import Project, ProjectView, RankedProject
from showcase.domain.model.user import User
from showcase.domain.model.vote import Vote

__all__ = [
    "User",
    "Category",
    "Project",
    "ProjectView",
    "RankedProject",
    "Vote",
    "DailyWinner",
    "DailyWinnerEntry",
]
