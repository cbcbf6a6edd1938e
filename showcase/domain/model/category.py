"""Category entity."""

from datetime import datetime, timezone
from typing import Optional

from pydantic import Field

from showcase.domain.model.common import DomainModel
from showcase.domain.value import CategoryId


class Category(DomainModel):
    """Category a project is filed under."""

    id: CategoryId
    name: str = Field(min_length=1)
    slug: str = Field(min_length=1)
    description: Optional[str] = None
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
