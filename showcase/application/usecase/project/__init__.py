"""Project use cases."""

from .list_today_projects import (
    ListTodayProjectsRequest,
    ListTodayProjectsResponse,
    ListTodayProjectsUseCase,
    TodayProjectItem,
)
from .views import AuthorItem, CategoryItem, ProjectItem

__all__ = [
    "AuthorItem",
    "CategoryItem",
    "ListTodayProjectsRequest",
    "ListTodayProjectsResponse",
    "ListTodayProjectsUseCase",
    "ProjectItem",
    "TodayProjectItem",
]
