"""Login use case."""

import logfire
from pydantic import BaseModel

from discuss.domain.model import User
from discuss.domain.service import JWTService, UserService
from discuss.domain.value import Email


class UserInfo(BaseModel):
    """Public user fields returned by the auth endpoints."""

    id: str
    email: str
    username: str

    @classmethod
    def from_user(cls, user: User) -> "UserInfo":
        return cls(id=str(user.id), email=user.email.root, username=user.username.root)


class AuthResponse(BaseModel):
    """Token issued on login or registration."""

    access_token: str
    token_type: str = "bearer"
    user: UserInfo


class LoginRequest(BaseModel):
    """Login request."""

    email: str
    password: str


class LoginUseCase:
    """Use case for email/password login."""

    def __init__(self, user_service: UserService, jwt_service: JWTService) -> None:
        """Initialize login use case.

        Args:
            user_service: User domain service
            jwt_service: JWT token domain service
        """
        self.user_service = user_service
        self.jwt_service = jwt_service

    async def execute(self, request: LoginRequest) -> AuthResponse:
        """Execute login flow.

        Steps:
        1. Normalise the email
        2. Verify credentials via user service
        3. Issue a JWT for the user

        Args:
            request: Login request

        Returns:
            Access token and user info

        Raises:
            AuthenticationError: If the email is unknown or the password is wrong
            ValueError: If the email is malformed
        """
        user = await self.user_service.authenticate(
            Email(request.email), request.password
        )

        token = self.jwt_service.issue_for(user)
        logfire.info("User logged in", user_id=str(user.id))

        return AuthResponse(access_token=token, user=UserInfo.from_user(user))
