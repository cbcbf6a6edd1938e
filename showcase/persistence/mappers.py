"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.

Joined queries label the author, category and winner columns with the
``author__``, ``category__`` and ``winner__`` prefixes; project columns keep
their own names.
"""

from typing import Any, Dict
from uuid import UUID

from showcase.domain.model import (
    Category,
    DailyWinner,
    DailyWinnerEntry,
    Project,
    ProjectView,
    User,
    Vote,
)
from showcase.domain.value import (
    CategoryId,
    DailyWinnerId,
    ProjectId,
    UserId,
    VoteId,
)

AUTHOR_PREFIX = "author__"
CATEGORY_PREFIX = "category__"
WINNER_PREFIX = "winner__"


def unprefix(row: Dict[str, Any], prefix: str) -> Dict[str, Any]:
    """Select the prefixed columns of a joined row and strip the prefix.

    Args:
        row: Database row as dict
        prefix: Column label prefix

    Returns:
        Dict keyed by the original column names
    """
    return {
        key[len(prefix) :]: value
        for key, value in row.items()
        if key.startswith(prefix)
    }


def row_to_user(row: Dict[str, Any]) -> User:
    """Convert database row to User domain model.

    Args:
        row: Database row as dict

    Returns:
        User domain model
    """
    return User(
        id=UserId(row["id"]),
        name=row["name"],
        avatar=row.get("avatar"),
        bio=row.get("bio"),
        location=row.get("location"),
        website=row.get("website"),
        github=row.get("github"),
        twitter=row.get("twitter"),
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def row_to_category(row: Dict[str, Any]) -> Category:
    """Convert database row to Category domain model.

    Args:
        row: Database row as dict

    Returns:
        Category domain model
    """
    return Category(
        id=CategoryId(row["id"]),
        name=row["name"],
        slug=row["slug"],
        description=row.get("description"),
        created_at=row["created_at"],
    )


def row_to_project(row: Dict[str, Any]) -> Project:
    """Convert database row to Project domain model.

    Args:
        row: Database row as dict

    Returns:
        Project domain model
    """
    return Project(
        id=ProjectId(row["id"]),
        title=row["title"],
        description=row["description"],
        image=row.get("image"),
        author_id=UserId(row["author_id"]),
        technologies=list(row.get("technologies") or []),
        category_id=(
            CategoryId(row["category_id"]) if row.get("category_id") else None
        ),
        live_url=row.get("live_url"),
        github_url=row.get("github_url"),
        votes=row["votes"],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
    )


def project_to_dict(project: Project) -> Dict[str, Any]:
    """Convert Project domain model to database dict.

    Args:
        project: Project domain model

    Returns:
        Dict suitable for database insertion/update
    """
    return project.model_dump()


def row_to_project_view(row: Dict[str, Any]) -> ProjectView:
    """Convert a joined project/author/category row to a ProjectView.

    Args:
        row: Database row as dict, author and category columns prefixed

    Returns:
        ProjectView with the category omitted when the project has none
    """
    category_row = unprefix(row, CATEGORY_PREFIX)
    return ProjectView(
        project=row_to_project(row),
        author=row_to_user(unprefix(row, AUTHOR_PREFIX)),
        category=row_to_category(category_row) if category_row.get("id") else None,
    )


def row_to_vote(row: Dict[str, Any]) -> Vote:
    """Convert database row to Vote domain model.

    Args:
        row: Database row as dict

    Returns:
        Vote domain model
    """
    return Vote(
        id=VoteId(UUID(row["id"]) if isinstance(row["id"], str) else row["id"]),
        user_id=UserId(row["user_id"]),
        project_id=ProjectId(row["project_id"]),
        created_at=row["created_at"],
    )


def vote_to_dict(vote: Vote) -> Dict[str, Any]:
    """Convert Vote domain model to database dict.

    Includes the derived ``vote_day`` the unique constraint is defined over.

    Args:
        vote: Vote domain model

    Returns:
        Dict suitable for database insertion
    """
    return vote.model_dump()


def row_to_daily_winner(row: Dict[str, Any]) -> DailyWinner:
    """Convert database row to DailyWinner domain model.

    Args:
        row: Database row as dict

    Returns:
        DailyWinner domain model
    """
    return DailyWinner(
        id=DailyWinnerId(
            UUID(row["id"]) if isinstance(row["id"], str) else row["id"]
        ),
        project_id=ProjectId(row["project_id"]),
        win_date=row["win_date"],
        vote_count=row["vote_count"],
        created_at=row["created_at"],
    )


def daily_winner_to_dict(winner: DailyWinner) -> Dict[str, Any]:
    """Convert DailyWinner domain model to database dict."""
    return winner.model_dump()


def row_to_daily_winner_entry(row: Dict[str, Any]) -> DailyWinnerEntry:
    """Convert a joined winner/project/author/category row.

    Args:
        row: Database row as dict, winner columns prefixed

    Returns:
        DailyWinnerEntry domain model
    """
    return DailyWinnerEntry(
        winner=row_to_daily_winner(unprefix(row, WINNER_PREFIX)),
        project=row_to_project_view(row),
    )
