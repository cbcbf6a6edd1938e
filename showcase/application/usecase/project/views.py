"""Project read models shared by the project and winner use cases."""

from datetime import datetime

from showcase.application.usecase.base import CamelModel
from showcase.domain.model import Category, ProjectView, User


class AuthorItem(CamelModel):
    """Project author in responses."""

    id: str
    name: str
    avatar: str | None
    bio: str | None
    location: str | None
    website: str | None
    github: str | None
    twitter: str | None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_user(cls, user: User) -> "AuthorItem":
        return cls(
            id=str(user.id),
            name=user.name,
            avatar=user.avatar,
            bio=user.bio,
            location=user.location,
            website=user.website,
            github=user.github,
            twitter=user.twitter,
            created_at=user.created_at,
            updated_at=user.updated_at,
        )


class CategoryItem(CamelModel):
    """Project category in responses."""

    id: int
    name: str
    slug: str

    @classmethod
    def from_category(cls, category: Category) -> "CategoryItem":
        return cls(id=category.id, name=category.name, slug=category.slug)


class ProjectItem(CamelModel):
    """Project with its author and category."""

    id: int
    title: str
    description: str
    image: str | None
    author_id: str
    technologies: list[str]
    live_url: str | None
    github_url: str | None
    votes: int
    created_at: datetime
    updated_at: datetime
    author: AuthorItem
    category: CategoryItem | None

    @classmethod
    def from_view(cls, view: ProjectView, **extra) -> "ProjectItem":
        """Build the response item from a joined project view.

        Args:
            view: Project joined with author and category
            **extra: Additional fields for subclasses

        Returns:
            Response item
        """
        project = view.project
        return cls(
            id=project.id,
            title=project.title,
            description=project.description,
            image=project.image,
            author_id=str(project.author_id),
            technologies=list(project.technologies),
            live_url=project.live_url,
            github_url=project.github_url,
            votes=project.votes,
            created_at=project.created_at,
            updated_at=project.updated_at,
            author=AuthorItem.from_user(view.author),
            category=(
                CategoryItem.from_category(view.category) if view.category else None
            ),
            **extra,
        )
