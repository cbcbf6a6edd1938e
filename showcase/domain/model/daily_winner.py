"""Daily winner entity.

A daily winner is a frozen snapshot of a project that held the highest
vote count on a past UTC day. Ties produce one record per tied project.
"""

from datetime import datetime, timezone

from pydantic import Field, field_validator

from showcase.domain.model.common import DomainModel
from showcase.domain.model.project import ProjectView
from showcase.domain.value import DailyWinnerId, ProjectId, as_utc, utc_midnight


class DailyWinner(DomainModel):
    """Winner record.

    Business rules:
    - ``win_date`` is the UTC midnight that starts the judged day, not the
      day the record was written
    - At most one record per (project_id, win_date), inserted with
      "ignore on conflict" semantics
    - Never updated or deleted
    """

    id: DailyWinnerId
    project_id: ProjectId
    win_date: datetime
    vote_count: int = Field(ge=0)
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    @field_validator("win_date")
    @classmethod
    def validate_win_date(cls, v: datetime) -> datetime:
        """Win dates are UTC midnights."""
        v = as_utc(v)
        if v != utc_midnight(v):
            raise ValueError("win_date must be a UTC midnight")
        return v

    @field_validator("created_at")
    @classmethod
    def normalize_created_at(cls, v: datetime) -> datetime:
        """Store timestamps as aware UTC datetimes."""
        return as_utc(v)


class DailyWinnerEntry(DomainModel):
    """Winner record joined with the project, author and category."""

    winner: DailyWinner
    project: ProjectView
