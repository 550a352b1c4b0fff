"""Shared state for the in-memory repositories."""

from dataclasses import dataclass, field

from discuss.domain.model import Comment, Notification, User
from discuss.domain.value import CommentId, NotificationId, UserId


@dataclass
class InMemoryStore:
    """Tables held in dicts.

    One store is shared by the three in-memory repositories so that joins
    (notification -> comment -> author) and purge side effects behave like
    the database.
    """

    users: dict[UserId, User] = field(default_factory=dict)
    comments: dict[CommentId, Comment] = field(default_factory=dict)
    notifications: dict[NotificationId, Notification] = field(default_factory=dict)
