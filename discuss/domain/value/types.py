"""Domain value objects.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules.
"""

import re
from enum import Enum

from pydantic import field_validator

from discuss.domain.value.common import RootValueObject


class NotificationType(str, Enum):
    """Kind of notification.

    Only replies produce notifications today; mentions are reserved.
    """

    REPLY = "reply"
    MENTION = "mention"


class RealtimeEvent(str, Enum):
    """Event names pushed over the real-time channel."""

    NEW_COMMENT = "comment:new"
    NOTIFICATION = "notification"


class Email(RootValueObject[str]):
    """Email address, normalised to lower case."""

    @field_validator("root")
    @classmethod
    def validate_email(cls, v: str) -> str:
        """Validate a plausible address shape and normalise case."""
        v = v.strip().lower()
        if len(v) > 255 or not re.match(r"^[^@\s]+@[^@\s]+\.[^@\s]+$", v):
            raise ValueError("Invalid email address")
        return v


class Username(RootValueObject[str]):
    """Display name shown next to comments, 3-50 characters."""

    @field_validator("root")
    @classmethod
    def validate_username(cls, v: str) -> str:
        """Validate username length."""
        v = v.strip()
        if len(v) < 3 or len(v) > 50:
            raise ValueError("Username must be 3-50 characters")
        return v
