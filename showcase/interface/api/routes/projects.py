"""Project routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Query

from showcase.application.usecase.project import (
    ListTodayProjectsRequest,
    ListTodayProjectsResponse,
    ListTodayProjectsUseCase,
)

router = APIRouter(prefix="/api/projects", tags=["projects"], route_class=DishkaRoute)


@router.get("/today", response_model=ListTodayProjectsResponse)
async def list_today_projects(
    list_today_projects_use_case: FromDishka[ListTodayProjectsUseCase],
    limit: int = Query(default=10, ge=1, le=100),
    offset: int = Query(default=0, ge=0),
) -> ListTodayProjectsResponse:
    """List projects ranked by the votes they received today (UTC).

    Args:
        list_today_projects_use_case: List today's projects use case from DI
        limit: Maximum number of projects (1-100)
        offset: Number of projects to skip

    Returns:
        Page of projects with their vote counts for today
    """
    request = ListTodayProjectsRequest(limit=limit, offset=offset)
    return await list_today_projects_use_case.execute(request)
