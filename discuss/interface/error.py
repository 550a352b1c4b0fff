"""Interface layer error translation."""

import logfire
from fastapi import HTTPException, status

from discuss.domain.error import (
    AuthenticationError,
    ConflictError,
    ForbiddenError,
    InvalidStateError,
    NotFoundError,
    ValidationError,
)
from discuss.util.jwt import JWTError


def to_http_exception(error: Exception, action: str) -> HTTPException:
    """Translate an error raised by a use case into an HTTP error.

    Args:
        error: The raised error
        action: What the route was doing, for logs and the 500 detail

    Returns:
        HTTPException to raise
    """
    if isinstance(error, NotFoundError):
        code = status.HTTP_404_NOT_FOUND
    elif isinstance(error, ForbiddenError):
        code = status.HTTP_403_FORBIDDEN
    elif isinstance(error, (InvalidStateError, ConflictError)):
        code = status.HTTP_409_CONFLICT
    elif isinstance(error, (AuthenticationError, JWTError)):
        code = status.HTTP_401_UNAUTHORIZED
    elif isinstance(error, (ValidationError, ValueError)):
        code = status.HTTP_400_BAD_REQUEST
    else:
        logfire.error(
            f"Unexpected error: {action}",
            error=str(error),
            error_type=type(error).__name__,
        )
        return HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Failed to {action}",
        )

    logfire.warn(f"Request rejected: {action}", error=str(error), status_code=code)
    return HTTPException(status_code=code, detail=str(error))
