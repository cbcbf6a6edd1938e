"""Shared vote mutation response."""

from showcase.application.usecase.base import CamelModel
from showcase.domain.value import VoteAction, VoteOutcome


class VoteResponse(CamelModel):
    """Vote numbers after casting, retracting or toggling a vote."""

    success: bool = True
    action: VoteAction
    daily_votes: int
    total_votes: int
    has_voted: bool

    @classmethod
    def from_outcome(cls, outcome: VoteOutcome) -> "VoteResponse":
        return cls(
            action=outcome.action,
            daily_votes=outcome.daily_votes,
            total_votes=outcome.total_votes,
            has_voted=outcome.has_voted,
        )
