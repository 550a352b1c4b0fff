"""Comment repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from typing import List, Optional

from discuss.domain.model.comment import Comment
from discuss.domain.value import CommentId


class CommentRepository(ABC):
    """Repository for Comment entity.

    All comments live in one keyed collection; parent/child links are
    plain ids resolved by the caller.
    """

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID, deleted or not.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(self) -> List[Comment]:
        """Return every comment, soft-deleted ones included.

        Returns:
            All comments ordered by created_at ascending
        """
        pass

    @abstractmethod
    async def thread_depth(self, comment_id: CommentId) -> int:
        """Count the comments from the top-level comment down to this one.

        A top-level comment has depth 1, a reply to it depth 2, and so on.

        Returns:
            The depth, or 0 if no comment has that ID
        """
        pass

    @abstractmethod
    async def save(self, comment: Comment) -> Comment:
        """Save a comment (create or update).

        Args:
            comment: The comment to save

        Returns:
            The saved comment
        """
        pass

    @abstractmethod
    async def restore(
        self, comment_id: CommentId, deleted_after: datetime
    ) -> Optional[Comment]:
        """Undelete a comment if it is still inside its restore window.

        A single conditional write: the row only changes if it is still
        soft-deleted and ``deleted_at >= deleted_after``. This is the
        tie-break against a concurrent purge.

        Args:
            comment_id: The comment to restore
            deleted_after: Oldest deleted_at that may still be restored

        Returns:
            The restored comment, or None if the row no longer qualifies
        """
        pass

    @abstractmethod
    async def purge_deleted_before(self, cutoff: datetime) -> int:
        """Permanently delete soft-deleted comments with deleted_at < cutoff.

        Replies of purged comments are detached (parent_id set to None);
        notifications pointing at purged comments go with them.

        Args:
            cutoff: Deletion timestamp threshold (exclusive)

        Returns:
            Number of comments removed
        """
        pass
