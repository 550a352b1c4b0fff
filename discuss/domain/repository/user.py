"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Iterable, Optional

from discuss.domain.model.user import User
from discuss.domain.value import Email, UserId, Username


class UserRepository(ABC):
    """Repository for User aggregate.

    Defines the contract for user persistence operations.
    Implementations live in the persistence layer.
    """

    @abstractmethod
    async def find_by_id(self, user_id: UserId) -> Optional[User]:
        """Find a user by ID.

        Args:
            user_id: The user's unique identifier

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_email(self, email: Email) -> Optional[User]:
        """Find a user by their (normalised) email.

        Args:
            email: The user's email address

        Returns:
            The user if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_usernames(self, user_ids: Iterable[UserId]) -> dict[UserId, Username]:
        """Look up usernames for a batch of users.

        Unknown ids are left out of the result.

        Args:
            user_ids: User IDs to resolve

        Returns:
            Mapping of user ID to username
        """
        pass

    @abstractmethod
    async def save(self, user: User) -> User:
        """Save a user (create or update).

        Args:
            user: The user to save

        Returns:
            The saved user
        """
        pass
