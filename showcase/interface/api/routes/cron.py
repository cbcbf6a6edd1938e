"""Scheduled job routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Header, HTTPException, status

from showcase.application.usecase.winner import (
    SelectDailyWinnersRequest,
    SelectDailyWinnersResponse,
    SelectDailyWinnersUseCase,
)
from showcase.domain.error import NoProjectsAvailableError, UntrustedSchedulerError
from showcase.domain.service import SchedulerAuthService

router = APIRouter(prefix="/api/cron", tags=["cron"], route_class=DishkaRoute)


@router.get("/daily-winner", response_model=SelectDailyWinnersResponse)
async def select_daily_winner(
    select_daily_winners_use_case: FromDishka[SelectDailyWinnersUseCase],
    scheduler_auth_service: FromDishka[SchedulerAuthService],
    authorization: str | None = Header(default=None),
) -> SelectDailyWinnersResponse:
    """Record yesterday's winner(s).

    Called once a day by the scheduler with
    ``Authorization: Bearer <cron secret>``. Safe to call more than once.

    Args:
        select_daily_winners_use_case: Select daily winners use case from DI
        scheduler_auth_service: Scheduler trust check (injected)
        authorization: Authorization header

    Returns:
        Judged day, winners and number of inserted records

    Raises:
        HTTPException: If the caller is not the scheduler or there are no projects
    """
    try:
        request = SelectDailyWinnersRequest(
            trusted=scheduler_auth_service.is_trusted(authorization)
        )
        return await select_daily_winners_use_case.execute(request)
    except UntrustedSchedulerError as e:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=str(e))
    except NoProjectsAvailableError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
