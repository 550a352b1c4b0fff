"""PostgreSQL repository implementations."""

from discuss.persistence.repository.comment import PostgresCommentRepository
from discuss.persistence.repository.notification import (
    PostgresNotificationRepository,
)
from discuss.persistence.repository.user import PostgresUserRepository
from discuss.persistence.repository.unit_of_work import PostgresUnitOfWork

__all__ = [
    "PostgresUserRepository",
    "PostgresCommentRepository",
    "PostgresNotificationRepository",
    "PostgresUnitOfWork",
]
