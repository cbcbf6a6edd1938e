"""Application layer DI providers."""

from dishka import Scope, provide

from showcase.application.usecase.project import ListTodayProjectsUseCase
from showcase.application.usecase.vote import (
    CastVoteUseCase,
    GetVoteStatsUseCase,
    RetractVoteUseCase,
    ToggleVoteUseCase,
)
from showcase.application.usecase.winner import (
    ListDailyWinnersUseCase,
    SelectDailyWinnersUseCase,
)
from showcase.domain.service import DailyWinnerService, ProjectService, VoteService
from showcase.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Vote use cases
    @provide(scope=Scope.REQUEST)
    def get_cast_vote_use_case(self, vote_service: VoteService) -> CastVoteUseCase:
        """Provide cast vote use case."""
        return CastVoteUseCase(vote_service=vote_service)

    @provide(scope=Scope.REQUEST)
    def get_retract_vote_use_case(
        self, vote_service: VoteService
    ) -> RetractVoteUseCase:
        """Provide retract vote use case."""
        return RetractVoteUseCase(vote_service=vote_service)

    @provide(scope=Scope.REQUEST)
    def get_toggle_vote_use_case(self, vote_service: VoteService) -> ToggleVoteUseCase:
        """Provide toggle vote use case."""
        return ToggleVoteUseCase(vote_service=vote_service)

    @provide(scope=Scope.REQUEST)
    def get_vote_stats_use_case(
        self, vote_service: VoteService
    ) -> GetVoteStatsUseCase:
        """Provide get vote stats use case."""
        return GetVoteStatsUseCase(vote_service=vote_service)

    # Project use cases
    @provide(scope=Scope.REQUEST)
    def get_list_today_projects_use_case(
        self, project_service: ProjectService
    ) -> ListTodayProjectsUseCase:
        """Provide list today's projects use case."""
        return ListTodayProjectsUseCase(project_service=project_service)

    # Daily winner use cases
    @provide(scope=Scope.REQUEST)
    def get_select_daily_winners_use_case(
        self, daily_winner_service: DailyWinnerService
    ) -> SelectDailyWinnersUseCase:
        """Provide select daily winners use case."""
        return SelectDailyWinnersUseCase(daily_winner_service=daily_winner_service)

    @provide(scope=Scope.REQUEST)
    def get_list_daily_winners_use_case(
        self, daily_winner_service: DailyWinnerService
    ) -> ListDailyWinnersUseCase:
        """Provide list daily winners use case."""
        return ListDailyWinnersUseCase(daily_winner_service=daily_winner_service)
