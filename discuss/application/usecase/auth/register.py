"""Register use case."""

from pydantic import BaseModel

from discuss.config import AuthSettings
from discuss.domain.error import ValidationError
from discuss.domain.service import JWTService, UserService
from discuss.domain.value import Email, Username

from .login import AuthResponse, UserInfo


class RegisterRequest(BaseModel):
    """Registration request."""

    email: str
    username: str
    password: str


class RegisterUseCase:
    """Use case for creating an account and logging it in."""

    def __init__(
        self,
        user_service: UserService,
        jwt_service: JWTService,
        auth_settings: AuthSettings,
    ) -> None:
        """Initialize register use case.

        Args:
            user_service: User domain service
            jwt_service: JWT token domain service
            auth_settings: Authentication settings (password policy)
        """
        self.user_service = user_service
        self.jwt_service = jwt_service
        self.auth_settings = auth_settings

    async def execute(self, request: RegisterRequest) -> AuthResponse:
        """Execute registration flow.

        Args:
            request: Registration request

        Returns:
            Access token and the new user's info

        Raises:
            ValidationError: If the password is too short
            ValueError: If the email or username is malformed
            ConflictError: If the email is already registered
        """
        email = Email(request.email)
        username = Username(request.username)
        if len(request.password) < self.auth_settings.min_password_length:
            raise ValidationError(
                f"Password must be at least "
                f"{self.auth_settings.min_password_length} characters"
            )

        user = await self.user_service.register(email, username, request.password)

        token = self.jwt_service.issue_for(user)
        return AuthResponse(access_token=token, user=UserInfo.from_user(user))
