"""Daily winner routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter

from showcase.application.usecase.winner import (
    ListDailyWinnersResponse,
    ListDailyWinnersUseCase,
)

router = APIRouter(prefix="/api", tags=["daily-winners"], route_class=DishkaRoute)


@router.get("/daily-winners", response_model=ListDailyWinnersResponse)
async def list_daily_winners(
    list_daily_winners_use_case: FromDishka[ListDailyWinnersUseCase],
) -> ListDailyWinnersResponse:
    """List every recorded daily winner, newest first.

    Args:
        list_daily_winners_use_case: List daily winners use case from DI

    Returns:
        Winner records with project, author and category
    """
    return await list_daily_winners_use_case.execute()
