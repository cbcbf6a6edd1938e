"""Daily winner use cases."""

from .list_daily_winners import (
    DailyWinnerItem,
    ListDailyWinnersResponse,
    ListDailyWinnersUseCase,
)
from .select_daily_winners import (
    SelectDailyWinnersRequest,
    SelectDailyWinnersResponse,
    SelectDailyWinnersUseCase,
    WinnerItem,
)

__all__ = [
    "DailyWinnerItem",
    "ListDailyWinnersResponse",
    "ListDailyWinnersUseCase",
    "SelectDailyWinnersRequest",
    "SelectDailyWinnersResponse",
    "SelectDailyWinnersUseCase",
    "WinnerItem",
]
