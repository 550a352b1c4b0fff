"""Access token domain service."""

import logfire

from discuss.config import AuthSettings
from discuss.domain.model import User
from discuss.domain.value import UserId
from discuss.util.jwt import JWTError, TokenPayload, create_token, verify_token


class JWTService:
    """Issues and checks the bearer tokens used by HTTP and WebSocket clients."""

    def __init__(self, auth_settings: AuthSettings) -> None:
        self.auth_settings = auth_settings

    def issue_for(self, user: User) -> str:
        """Create an access token for a user."""
        token = create_token(user.id, user.username.root, self.auth_settings)
        logfire.info("Access token issued", user_id=str(user.id))
        return token

    def verify_token(self, token: str) -> TokenPayload:
        """Decode a token.

        Raises:
            JWTError: If the token is invalid or expired
        """
        with logfire.span("jwt_service.verify_token"):
            try:
                return verify_token(token, self.auth_settings)
            except JWTError as e:
                logfire.warn("Token rejected", error=str(e))
                raise

    def get_user_id(self, token: str | None) -> UserId | None:
        """The token's user, or None when the token is missing or invalid."""
        if not token:
            return None
        try:
            return UserId(self.verify_token(token).sub)
        except JWTError:
            return None
