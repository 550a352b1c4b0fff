"""Bearer token handling for routes."""

from fastapi import Header, HTTPException, status

from discuss.domain.service import JWTService
from discuss.domain.value import UserId


def bearer_token(authorization: str | None = Header(default=None)) -> str | None:
    """Extract the token from an ``Authorization: Bearer <token>`` header."""
    if not authorization:
        return None
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token:
        return None
    return token.strip()


def require_user_id(
    jwt_service: JWTService, token: str | None, action: str
) -> UserId:
    """Return the caller's user ID or raise 401.

    Args:
        jwt_service: JWT service for token verification
        token: Bearer token, if any
        action: Shown in the error detail ("Authentication required to ...")

    Raises:
        HTTPException: 401 if the token is missing, invalid or expired
    """
    user_id = jwt_service.get_user_id(token)
    if user_id is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=f"Authentication required to {action}",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return user_id
