"""User aggregate root."""

from datetime import datetime

from pydantic import Field

from discuss.domain.model.common import DomainModel
from discuss.domain.value import Email, UserId, Username
from discuss.util.clock import utc_now


class User(DomainModel):
    """A registered user.

    Users own the comments they post and the notifications they receive.
    Immutable after registration.
    """

    id: UserId
    email: Email
    username: Username
    password_hash: str = Field(min_length=1, repr=False)
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)
