"""Vote routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Cookie, HTTPException, status

from showcase.application.usecase.vote import (
    CastVoteRequest,
    CastVoteUseCase,
    GetVoteStatsRequest,
    GetVoteStatsResponse,
    GetVoteStatsUseCase,
    RetractVoteRequest,
    RetractVoteUseCase,
    ToggleVoteRequest,
    ToggleVoteUseCase,
    VoteResponse,
)
from showcase.domain.error import (
    BusinessRuleViolationError,
    NotFoundError,
    UnauthenticatedError,
)
from showcase.domain.service import JWTService
from showcase.domain.value import UserId

MAX_PROJECT_ID = 2**31 - 1

router = APIRouter(prefix="/api/projects", tags=["votes"], route_class=DishkaRoute)


def _require_user(jwt_service: JWTService, auth_token: str | None) -> UserId:
    user_id = jwt_service.get_user_id_from_token(auth_token)
    if not user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required",
        )
    return user_id


def _parse_project_id(raw: str) -> int:
    # ASCII digits only, within the range of the integer primary key
    valid = raw.isascii() and raw.isdigit() and len(raw) <= len(str(MAX_PROJECT_ID))
    if not valid or int(raw) > MAX_PROJECT_ID:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Invalid project ID",
        )
    return int(raw)


def _to_http_error(e: Exception) -> HTTPException:
    """Translate a vote domain error into its HTTP status."""
    if isinstance(e, UnauthenticatedError):
        return HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=str(e))
    if isinstance(e, NotFoundError):
        return HTTPException(
            status_code=status.HTTP_404_NOT_FOUND, detail="Project not found"
        )
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))


@router.post("/{project_id}/vote", response_model=VoteResponse)
async def cast_vote(
    project_id: str,
    cast_vote_use_case: FromDishka[CastVoteUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> VoteResponse:
    """Cast today's vote for a project.

    Requires authentication.

    Args:
        project_id: Project ID
        cast_vote_use_case: Cast vote use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie

    Returns:
        Vote numbers after the vote

    Raises:
        HTTPException: If not authenticated, invalid ID, project not found,
            or already voted today
    """
    user_id = _require_user(jwt_service, auth_token)

    try:
        request = CastVoteRequest(
            project_id=_parse_project_id(project_id), user_id=user_id
        )
        return await cast_vote_use_case.execute(request)
    except (
        UnauthenticatedError,
        NotFoundError,
        BusinessRuleViolationError,
    ) as e:
        raise _to_http_error(e)


@router.delete("/{project_id}/vote", response_model=VoteResponse)
async def retract_vote(
    project_id: str,
    retract_vote_use_case: FromDishka[RetractVoteUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> VoteResponse:
    """Retract today's vote for a project.

    Requires authentication.

    Args:
        project_id: Project ID
        retract_vote_use_case: Retract vote use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie

    Returns:
        Vote numbers after the retraction

    Raises:
        HTTPException: If not authenticated, invalid ID, project not found,
            or no vote today
    """
    user_id = _require_user(jwt_service, auth_token)

    try:
        request = RetractVoteRequest(
            project_id=_parse_project_id(project_id), user_id=user_id
        )
        return await retract_vote_use_case.execute(request)
    except (
        UnauthenticatedError,
        NotFoundError,
        BusinessRuleViolationError,
    ) as e:
        raise _to_http_error(e)


@router.post("/{project_id}/vote/toggle", response_model=VoteResponse)
async def toggle_vote(
    project_id: str,
    toggle_vote_use_case: FromDishka[ToggleVoteUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> VoteResponse:
    """Vote for a project, or remove today's vote if it already exists.

    Requires authentication.

    Args:
        project_id: Project ID
        toggle_vote_use_case: Toggle vote use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie

    Returns:
        The action taken and the vote numbers after it

    Raises:
        HTTPException: If not authenticated, invalid ID, or project not found
    """
    user_id = _require_user(jwt_service, auth_token)

    try:
        request = ToggleVoteRequest(
            project_id=_parse_project_id(project_id), user_id=user_id
        )
        return await toggle_vote_use_case.execute(request)
    except (
        UnauthenticatedError,
        NotFoundError,
        BusinessRuleViolationError,
    ) as e:
        raise _to_http_error(e)


@router.get("/{project_id}/votes", response_model=GetVoteStatsResponse)
async def get_vote_stats(
    project_id: str,
    get_vote_stats_use_case: FromDishka[GetVoteStatsUseCase],
    jwt_service: FromDishka[JWTService],
    auth_token: str | None = Cookie(default=None),
) -> GetVoteStatsResponse:
    """Get a project's daily and total votes.

    Works with or without authentication; ``hasVoted`` is only true for
    an authenticated caller who voted today.

    Args:
        project_id: Project ID
        get_vote_stats_use_case: Get vote stats use case from DI
        jwt_service: JWT service for token verification (injected)
        auth_token: JWT token from cookie (optional)

    Returns:
        Vote numbers and the caller's vote state

    Raises:
        HTTPException: If invalid ID or project not found
    """
    user_id = jwt_service.get_user_id_from_token(auth_token)

    try:
        request = GetVoteStatsRequest(
            project_id=_parse_project_id(project_id), user_id=user_id
        )
        return await get_vote_stats_use_case.execute(request)
    except NotFoundError as e:
        raise _to_http_error(e)
