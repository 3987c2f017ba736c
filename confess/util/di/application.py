"""Application layer DI providers."""

from dishka import Scope, provide

from confess.application.usecase.confession import (
    CreateConfessionUseCase,
    ListConfessionsByTagUseCase,
    ListRandomConfessionsUseCase,
)
from confess.application.usecase.reaction import ReactToConfessionUseCase
from confess.config import Settings
from confess.domain.service import ConfessionService, ReactionService
from confess.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed."""

    # Confession use cases
    @provide(scope=Scope.REQUEST)
    def get_create_confession_use_case(
        self, confession_service: ConfessionService
    ) -> CreateConfessionUseCase:
        """Provide create confession use case."""
        return CreateConfessionUseCase(confession_service=confession_service)

    @provide(scope=Scope.REQUEST)
    def get_list_random_confessions_use_case(
        self, confession_service: ConfessionService, settings: Settings
    ) -> ListRandomConfessionsUseCase:
        """Provide list random confessions use case."""
        return ListRandomConfessionsUseCase(
            confession_service=confession_service,
            sample_size=settings.random_sample_size,
        )

    @provide(scope=Scope.REQUEST)
    def get_list_confessions_by_tag_use_case(
        self, confession_service: ConfessionService
    ) -> ListConfessionsByTagUseCase:
        """Provide list confessions by tag use case."""
        return ListConfessionsByTagUseCase(confession_service=confession_service)

    # Reaction use cases
    @provide(scope=Scope.REQUEST)
    def get_react_to_confession_use_case(
        self, reaction_service: ReactionService
    ) -> ReactToConfessionUseCase:
        """Provide react to confession use case."""
        return ReactToConfessionUseCase(reaction_service=reaction_service)
