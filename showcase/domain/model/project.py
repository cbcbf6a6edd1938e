"""Project aggregate root and its read projections."""

from datetime import datetime, timezone
from typing import Optional

from pydantic import Field

from showcase.domain.model.category import Category
from showcase.domain.model.common import DomainModel
from showcase.domain.model.user import User
from showcase.domain.value import CategoryId, ProjectId, UserId


class Project(DomainModel):
    """Showcased software project.

    ``votes`` is a denormalized all-time counter maintained by atomic
    relative updates alongside the vote ledger. It never goes below zero.
    """

    id: ProjectId
    title: str = Field(min_length=1)
    description: str
    image: Optional[str] = None
    author_id: UserId
    technologies: list[str] = Field(default_factory=list)
    category_id: Optional[CategoryId] = None
    live_url: Optional[str] = None
    github_url: Optional[str] = None
    votes: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


class ProjectView(DomainModel):
    """Project joined with its author and (optional) category."""

    project: Project
    author: User
    category: Optional[Category] = None


class RankedProject(DomainModel):
    """Project paired with the number of votes it got in one UTC day."""

    view: ProjectView
    daily_votes: int = Field(ge=0)
