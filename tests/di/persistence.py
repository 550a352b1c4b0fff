"""Mock persistence providers for testing."""

from dishka import Scope, provide

from discuss.domain.repository import (
    CommentRepository,
    NotificationRepository,
    UnitOfWork,
    UserRepository,
)
from discuss.persistence.repository.inmemory import (
    InMemoryCommentRepository,
    InMemoryNotificationRepository,
    InMemoryStore,
    InMemoryUnitOfWork,
    InMemoryUserRepository,
)
from discuss.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    The store lives for the container, so requests made through one test
    client see each other's writes; each test builds its own container.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_store(self) -> InMemoryStore:
        """Provide the shared in-memory tables."""
        return InMemoryStore()

    @provide(scope=Scope.REQUEST)
    def get_user_repository(self, store: InMemoryStore) -> UserRepository:
        """Provide in-memory user repository."""
        return InMemoryUserRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_comment_repository(self, store: InMemoryStore) -> CommentRepository:
        """Provide in-memory comment repository."""
        return InMemoryCommentRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_notification_repository(
        self, store: InMemoryStore
    ) -> NotificationRepository:
        """Provide in-memory notification repository."""
        return InMemoryNotificationRepository(store)

    @provide(scope=Scope.REQUEST)
    def get_unit_of_work(self) -> UnitOfWork:
        """Provide a commit-counting unit of work."""
        return InMemoryUnitOfWork()
