"""Vote use cases."""

from .cast_vote import CastVoteRequest, CastVoteUseCase
from .get_vote_stats import (
    GetVoteStatsRequest,
    GetVoteStatsResponse,
    GetVoteStatsUseCase,
)
from .response import VoteResponse
from .retract_vote import RetractVoteRequest, RetractVoteUseCase
from .toggle_vote import ToggleVoteRequest, ToggleVoteUseCase

__all__ = [
    "CastVoteRequest",
    "CastVoteUseCase",
    "GetVoteStatsRequest",
    "GetVoteStatsResponse",
    "GetVoteStatsUseCase",
    "RetractVoteRequest",
    "RetractVoteUseCase",
    "ToggleVoteRequest",
    "ToggleVoteUseCase",
    "VoteResponse",
]
