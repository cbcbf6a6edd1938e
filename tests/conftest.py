"""Test configuration and fixtures."""

from datetime import datetime, timezone

import logfire

from showcase.config import Settings
from showcase.domain.model import Category, Project, User
from showcase.domain.value import CategoryId, ProjectId, UserId
from showcase.persistence.repository.inmemory import InMemoryProjectRepository
from showcase.util.jwt import create_token

# Keep telemetry local during tests
logfire.configure(send_to_logfire=False, console=False)

# A fixed instant well inside a UTC day
NOW = datetime(2026, 10, 19, 15, 30, tzinfo=timezone.utc)


def make_author(user_id: str = "user_author", name: str = "Ada Author") -> User:
    """Build a project author."""
    return User(
        id=UserId(user_id),
        name=name,
        avatar="https://example.com/avatar.png",
        github="ada",
        created_at=datetime(2026, 1, 1, tzinfo=timezone.utc),
        updated_at=datetime(2026, 1, 1, tzinfo=timezone.utc),
    )


def make_category(category_id: int = 1, slug: str = "cursor") -> Category:
    """Build a category."""
    return Category(
        id=CategoryId(category_id),
        name=slug.capitalize(),
        slug=slug,
        created_at=datetime(2026, 1, 1, tzinfo=timezone.utc),
    )


def make_project(
    project_id: int,
    author_id: str = "user_author",
    created_at: datetime | None = None,
    category_id: int | None = None,
    votes: int = 0,
) -> Project:
    """Build a project. Later IDs are newer by default."""
    created_at = created_at or datetime(2026, 1, 1, tzinfo=timezone.utc).replace(
        day=min(project_id, 28)
    )
    return Project(
        id=ProjectId(project_id),
        title=f"Project {project_id}",
        description=f"Description of project {project_id}",
        author_id=UserId(author_id),
        technologies=["python", "fastapi"],
        category_id=CategoryId(category_id) if category_id else None,
        votes=votes,
        created_at=created_at,
        updated_at=created_at,
    )


async def seed_projects(
    project_repo: InMemoryProjectRepository, *project_ids: int
) -> list[Project]:
    """Register the default author and save projects with the given IDs."""
    project_repo.add_author(make_author())
    return [await project_repo.save(make_project(pid)) for pid in project_ids]


def auth_headers(user_id: str) -> dict[str, str]:
    """Request headers carrying a valid ``auth_token`` cookie for the user."""
    token = create_token(user_id, Settings().auth)
    return {"Cookie": f"auth_token={token}"}
