"""Vote entity.

A vote is one user's support for one project on one UTC day. The ledger
keeps every day's vote, so a user who votes daily accumulates one row per
day for the same project.
"""

from datetime import date, datetime, timezone

from pydantic import Field, computed_field, field_validator

from showcase.domain.model.common import DomainModel
from showcase.domain.value import ProjectId, UserId, VoteId, as_utc, utc_date


class Vote(DomainModel):
    """Vote entity.

    Business rules:
    - At most one vote per user per project per UTC day (enforced by the
      unique constraint over user_id, project_id and vote_day)
    - Immutable once cast; retraction deletes the row
    """

    id: VoteId
    user_id: UserId
    project_id: ProjectId
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    @field_validator("created_at")
    @classmethod
    def normalize_created_at(cls, v: datetime) -> datetime:
        """Store timestamps as aware UTC datetimes."""
        return as_utc(v)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def vote_day(self) -> date:
        """UTC calendar day the vote counts toward."""
        return utc_date(self.created_at)
