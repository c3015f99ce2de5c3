"""Persistence DI providers."""

from dishka import Scope, provide

from bedmanagement.domain.repository import BedTagRepository
from bedmanagement.persistence.repository.inmemory import InMemoryBedTagRepository
from bedmanagement.util.di.base import ProviderBase


class PersistenceProvider(ProviderBase):
    """In-memory persistence provider.

    Repositories are APP-scoped so stored tags live as long as the container.
    """

    @provide(scope=Scope.APP)
    def get_bed_tag_repository(self) -> BedTagRepository:
        """Provide in-memory bed tag repository."""
        return InMemoryBedTagRepository()
