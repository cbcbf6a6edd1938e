"""Domain layer DI providers."""

from dishka import Scope, provide

from showcase.config import AuthSettings, SchedulerSettings
from showcase.domain.repository import (
    DailyWinnerRepository,
    ProjectRepository,
    VoteRepository,
)
from showcase.domain.service import (
    DailyWinnerService,
    JWTService,
    ProjectService,
    SchedulerAuthService,
    VoteService,
)
from showcase.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_jwt_service(self, auth_settings: AuthSettings) -> JWTService:
        """Provide JWT token domain service."""
        return JWTService(auth_settings=auth_settings)

    @provide
    def get_scheduler_auth_service(
        self, scheduler_settings: SchedulerSettings
    ) -> SchedulerAuthService:
        """Provide scheduler trust check."""
        return SchedulerAuthService(scheduler_settings=scheduler_settings)

    @provide
    def get_project_service(
        self, project_repository: ProjectRepository
    ) -> ProjectService:
        """Provide project domain service."""
        return ProjectService(project_repository=project_repository)

    @provide
    def get_vote_service(
        self,
        vote_repository: VoteRepository,
        project_service: ProjectService,
    ) -> VoteService:
        """Provide vote domain service."""
        return VoteService(
            vote_repository=vote_repository,
            project_service=project_service,
        )

    @provide
    def get_daily_winner_service(
        self,
        daily_winner_repository: DailyWinnerRepository,
        vote_repository: VoteRepository,
        project_service: ProjectService,
    ) -> DailyWinnerService:
        """Provide daily winner domain service."""
        return DailyWinnerService(
            daily_winner_repository=daily_winner_repository,
            vote_repository=vote_repository,
            project_service=project_service,
        )
