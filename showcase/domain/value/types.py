"""Domain value objects for the voting subsystem.

Value objects are immutable and defined by their values, not identity.
"""

from datetime import datetime
from enum import Enum

from pydantic import Field

from showcase.domain.value.common import ValueObject
from showcase.domain.value.identifiers import ProjectId


class VoteAction(str, Enum):
    """What a vote mutation did to the caller's vote for today."""

    VOTED = "voted"
    UNVOTED = "unvoted"


class ProjectVoteCount(ValueObject):
    """Number of votes one project received inside a window."""

    project_id: ProjectId
    vote_count: int = Field(ge=0)


class VoteStats(ValueObject):
    """Vote numbers shown next to a project."""

    daily_votes: int = Field(ge=0)
    total_votes: int = Field(ge=0)
    has_voted: bool
    is_authenticated: bool


class VoteOutcome(ValueObject):
    """Result of casting, retracting or toggling today's vote."""

    action: VoteAction
    daily_votes: int = Field(ge=0)
    total_votes: int = Field(ge=0)
    has_voted: bool


class WinnerSelection(ValueObject):
    """Outcome of one daily winner selection run."""

    win_date: datetime
    winners: list[ProjectVoteCount]
    inserted: int = Field(ge=0)
