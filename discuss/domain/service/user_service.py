"""User domain service."""

from uuid import uuid4

import logfire

from discuss.domain.error import AuthenticationError, ConflictError, NotFoundError
from discuss.domain.model import User
from discuss.domain.repository import UserRepository
from discuss.domain.value import Email, UserId, Username
from discuss.util.clock import Clock
from discuss.util.password import hash_password, verify_password


class UserService:
    """Domain service for registration, credential checks and lookups."""

    def __init__(self, user_repository: UserRepository, clock: Clock) -> None:
        """Initialize user service.

        Args:
            user_repository: User repository
            clock: Source of the current time
        """
        self.user_repository = user_repository
        self.clock = clock

    async def get_by_id(self, user_id: UserId) -> User:
        """Get user by ID.

        Args:
            user_id: User ID

        Returns:
            User entity

        Raises:
            NotFoundError: If user not found
        """
        with logfire.span("user_service.get_by_id", user_id=str(user_id)):
            user = await self.user_repository.find_by_id(user_id)
            if not user:
                logfire.warn("User not found", user_id=str(user_id))
                raise NotFoundError("User", str(user_id))
            return user

    async def register(self, email: Email, username: Username, password: str) -> User:
        """Register a new user.

        Args:
            email: Email address (unique)
            username: Display name
            password: Plain-text password, hashed before storage

        Returns:
            The created user

        Raises:
            ConflictError: If the email is already registered
        """
        with logfire.span("user_service.register", email=email.root):
            existing = await self.user_repository.find_by_email(email)
            if existing:
                logfire.warn("Registration with existing email", email=email.root)
                raise ConflictError("Email is already registered")

            now = self.clock.now()
            user = User(
                id=UserId(uuid4()),
                email=email,
                username=username,
                password_hash=hash_password(password),
                created_at=now,
                updated_at=now,
            )
            saved = await self.user_repository.save(user)
            logfire.info(
                "User registered", user_id=str(saved.id), username=saved.username.root
            )
            return saved

    async def authenticate(self, email: Email, password: str) -> User:
        """Verify credentials.

        Args:
            email: Email address
            password: Plain-text password

        Returns:
            The matching user

        Raises:
            AuthenticationError: If the email is unknown or the password is wrong
        """
        with logfire.span("user_service.authenticate", email=email.root):
            user = await self.user_repository.find_by_email(email)
            if not user or not verify_password(password, user.password_hash):
                logfire.warn("Invalid credentials", email=email.root)
                raise AuthenticationError("Invalid email or password")
            logfire.info("User authenticated", user_id=str(user.id))
            return user
