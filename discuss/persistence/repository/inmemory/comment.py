"""In-memory comment repository for testing."""

from datetime import datetime
from typing import Optional

from discuss.domain.model.comment import Comment
from discuss.domain.repository.comment import CommentRepository
from discuss.domain.value import CommentId

from .store import InMemoryStore


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing.

    Purging mirrors the database foreign keys: replies are detached and
    notifications pointing at a purged comment lose their comment_id.
    """

    def __init__(self, store: InMemoryStore | None = None) -> None:
        self._store = store or InMemoryStore()

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        return self._store.comments.get(comment_id)

    async def find_all(self) -> list[Comment]:
        """Every comment, oldest first."""
        return sorted(self._store.comments.values(), key=lambda c: c.created_at)

    async def thread_depth(self, comment_id: CommentId) -> int:
        """Walk parent links up to the top-level comment."""
        depth = 0
        current = self._store.comments.get(comment_id)
        while current is not None:
            depth += 1
            if current.parent_id is None:
                break
            current = self._store.comments.get(current.parent_id)
        return depth

    async def save(self, comment: Comment) -> Comment:
        """Save a comment."""
        self._store.comments[comment.id] = comment
        return comment

    async def restore(
        self, comment_id: CommentId, deleted_after: datetime
    ) -> Optional[Comment]:
        """Undelete if still soft-deleted at or after ``deleted_after``."""
        comment = self._store.comments.get(comment_id)
        if (
            comment is None
            or not comment.is_deleted
            or comment.deleted_at is None
            or comment.deleted_at < deleted_after
        ):
            return None

        restored = comment.restored()
        self._store.comments[comment_id] = restored
        return restored

    async def purge_deleted_before(self, cutoff: datetime) -> int:
        """Remove soft-deleted comments with deleted_at < cutoff."""
        expired = {
            comment.id
            for comment in self._store.comments.values()
            if comment.is_deleted
            and comment.deleted_at is not None
            and comment.deleted_at < cutoff
        }
        if not expired:
            return 0

        for comment_id in expired:
            del self._store.comments[comment_id]

        # ON DELETE SET NULL
        for comment in list(self._store.comments.values()):
            if comment.parent_id in expired:
                self._store.comments[comment.id] = comment.evolve(parent_id=None)

        # ON DELETE SET NULL
        for notification in list(self._store.notifications.values()):
            if notification.comment_id in expired:
                self._store.notifications[notification.id] = notification.evolve(
                    comment_id=None
                )

        return len(expired)
