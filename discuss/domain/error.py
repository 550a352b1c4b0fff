"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error (malformed input)."""

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class ForbiddenError(DomainError):
    """Raised when a user attempts to change content they don't own."""

    def __init__(self, action: str, resource: str, resource_id: str, user_id: str):
        self.action = action
        self.resource = resource
        self.resource_id = resource_id
        self.user_id = user_id
        super().__init__(
            f"User {user_id} is not allowed to {action} {resource} {resource_id}"
        )


class InvalidStateError(DomainError):
    """Raised when an operation is attempted outside its time window."""

    def __init__(self, message: str):
        super().__init__(message)


class ConflictError(DomainError):
    """Raised when an operation conflicts with existing data."""

    def __init__(self, message: str):
        super().__init__(message)


class AuthenticationError(DomainError):
    """Raised when credentials cannot be verified."""

    pass
