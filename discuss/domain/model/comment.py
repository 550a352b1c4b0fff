"""Comment entity.

Comments form a forest through ``parent_id``: top-level comments have no
parent, replies point at the comment they answer. The tree is resolved by
id lookup at read time, never stored as nested objects.
"""

from datetime import datetime, timedelta
from typing import Optional

from pydantic import Field, model_validator

from discuss.domain.model.common import DomainModel
from discuss.domain.value import CommentId, UserId
from discuss.util.clock import utc_now

EDIT_WINDOW = timedelta(minutes=15)
RESTORE_WINDOW = timedelta(minutes=15)

# Longest chain of comments from a top-level comment down to a reply
MAX_THREAD_DEPTH = 100


class Comment(DomainModel):
    """Comment entity.

    Lifecycle:
    - created live (``is_deleted=False``)
    - content editable by its author within the edit window after creation
    - soft-deleted by its author (content retained, ``deleted_at`` set)
    - restorable by its author within the restore window after deletion
    - purged (hard-deleted) once the restore window has elapsed

    Windows are evaluated against the caller's ``now``; nothing is stored.
    """

    id: CommentId
    author_id: UserId
    content: str = Field(min_length=1, max_length=10000)
    parent_id: Optional[CommentId] = None
    is_deleted: bool = False
    deleted_at: Optional[datetime] = None
    created_at: datetime = Field(default_factory=utc_now)
    updated_at: datetime = Field(default_factory=utc_now)

    @model_validator(mode="after")
    def validate_deletion_state(self) -> "Comment":
        """deleted_at is set exactly when the comment is soft-deleted."""
        if self.is_deleted != (self.deleted_at is not None):
            raise ValueError("deleted_at must be set if and only if is_deleted")
        return self

    def can_edit(self, now: datetime, window: timedelta = EDIT_WINDOW) -> bool:
        """Whether the edit window is still open at ``now``."""
        return now - self.created_at <= window

    def can_restore(self, now: datetime, window: timedelta = RESTORE_WINDOW) -> bool:
        """Whether a soft-deleted comment can still be restored at ``now``."""
        if not self.is_deleted or self.deleted_at is None:
            return False
        return now - self.deleted_at <= window

    def with_content(self, content: str, now: datetime) -> "Comment":
        """Return a copy with new content and a bumped ``updated_at``."""
        return self.evolve(content=content, updated_at=now)

    def soft_deleted(self, now: datetime) -> "Comment":
        """Return a soft-deleted copy."""
        return self.evolve(is_deleted=True, deleted_at=now)

    def restored(self) -> "Comment":
        """Return a live copy of a soft-deleted comment."""
        return self.evolve(is_deleted=False, deleted_at=None)
