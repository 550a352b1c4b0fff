"""In-memory user repository for testing."""

from typing import Iterable, Optional

from discuss.domain.model.user import User
from discuss.domain.repository.user import UserRepository
from discuss.domain.value import Email, UserId, Username

from .store import InMemoryStore


class InMemoryUserRepository(UserRepository):
    """In-memory implementation of UserRepository for testing."""

    def __init__(self, store: InMemoryStore | None = None) -> None:
        self._store = store or InMemoryStore()

    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID."""
        return self._store.users.get(user_id)

    async def find_by_email(self, email: Email) -> Optional[User]:
        """Find a user by email."""
        for user in self._store.users.values():
            if user.email == email:
                return user
        return None

    async def find_usernames(self, user_ids: Iterable[UserId]) -> dict[UserId, Username]:
        """Usernames of the known users among ``user_ids``."""
        return {
            user_id: self._store.users[user_id].username
            for user_id in set(user_ids)
            if user_id in self._store.users
        }

    async def save(self, user: User) -> User:
        """Save a user."""
        self._store.users[user.id] = user
        return user
