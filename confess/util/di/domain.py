"""Domain layer DI providers."""

from dishka import Scope, provide

from confess.domain.repository import ConfessionRepository
from confess.domain.service import ConfessionService, ReactionService
from confess.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    Each HTTP request gets fresh service instances with their own transaction.
    """

    scope = Scope.REQUEST

    @provide
    def get_confession_service(
        self, confession_repository: ConfessionRepository
    ) -> ConfessionService:
        """Provide confession domain service."""
        return ConfessionService(confession_repository=confession_repository)

    @provide
    def get_reaction_service(
        self, confession_repository: ConfessionRepository
    ) -> ReactionService:
        """Provide reaction domain service."""
        return ReactionService(confession_repository=confession_repository)
