"""Access token encoding.

Tokens are HS256 JWTs carrying the user id in the standard ``sub`` claim
and the username for display. There is no refresh flow; clients log in
again once ``exp`` passes.
"""

from datetime import datetime, timedelta, timezone
from uuid import UUID

import jwt
from pydantic import BaseModel, ValidationError

from discuss.config import AuthSettings
from discuss.util.error import JWTError

__all__ = ["JWTError", "TokenPayload", "create_token", "verify_token"]


class TokenPayload(BaseModel):
    """Decoded access token claims."""

    sub: UUID
    username: str
    iat: datetime
    exp: datetime


def create_token(
    user_id: UUID, username: str, settings: AuthSettings, now: datetime | None = None
) -> str:
    """Issue an access token.

    Args:
        user_id: Subject of the token
        username: Display name embedded for clients
        settings: Secret, algorithm and lifetime
        now: Issue time (defaults to the current UTC time)
    """
    issued_at = now or datetime.now(timezone.utc)
    claims = {
        "sub": str(user_id),
        "username": username,
        "iat": issued_at,
        "exp": issued_at + timedelta(days=settings.jwt_expiry_days),
    }
    return jwt.encode(claims, settings.jwt_secret, algorithm=settings.jwt_algorithm)


def verify_token(token: str, settings: AuthSettings) -> TokenPayload:
    """Check signature and expiry, then decode the claims.

    Raises:
        JWTError: If the token is expired, badly signed or missing claims
    """
    try:
        claims = jwt.decode(
            token,
            settings.jwt_secret,
            algorithms=[settings.jwt_algorithm],
            options={"require": ["sub", "exp"]},
        )
        return TokenPayload.model_validate(claims)
    except jwt.ExpiredSignatureError as e:
        raise JWTError("Token has expired") from e
    except (jwt.InvalidTokenError, ValidationError) as e:
        raise JWTError("Invalid token") from e
