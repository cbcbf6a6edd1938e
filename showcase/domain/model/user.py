"""User entity.

Users are created by the identity provider integration. The voting
subsystem only reads them as project authors.
"""

from datetime import datetime, timezone
from typing import Optional

from pydantic import Field

from showcase.domain.model.common import DomainModel
from showcase.domain.value import UserId


class User(DomainModel):
    """Project author as shown next to showcased projects."""

    id: UserId
    name: str = Field(min_length=1)
    avatar: Optional[str] = None
    bio: Optional[str] = None
    location: Optional[str] = None
    website: Optional[str] = None
    github: Optional[str] = None
    twitter: Optional[str] = None
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    updated_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
