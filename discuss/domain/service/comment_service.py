"""Comment domain service.

Owns the comment lifecycle: creation, the edit window, soft delete, the
restore window and purging of comments whose restore window has passed.
"""

from collections import defaultdict
from dataclasses import dataclass
from datetime import datetime, timedelta
from uuid import uuid4

import logfire

from discuss.domain.error import (
    ForbiddenError,
    InvalidStateError,
    NotFoundError,
    ValidationError,
)
from discuss.domain.model import EDIT_WINDOW, MAX_THREAD_DEPTH, RESTORE_WINDOW, Comment
from discuss.domain.repository import CommentRepository, UserRepository
from discuss.domain.value import CommentId, UserId, Username
from discuss.util.clock import Clock

UNKNOWN_USERNAME = Username("[unknown]")


@dataclass
class CommentNode:
    """Node in the comment forest.

    Represents a comment, its author's username, whether it is still
    editable, and its direct replies (recursively populated).
    """

    comment: Comment
    author_username: Username
    can_edit: bool
    replies: list["CommentNode"]


class CommentService:
    """Domain service for comment operations."""

    def __init__(
        self,
        comment_repository: CommentRepository,
        user_repository: UserRepository,
        clock: Clock,
        edit_window: timedelta = EDIT_WINDOW,
        restore_window: timedelta = RESTORE_WINDOW,
        max_thread_depth: int = MAX_THREAD_DEPTH,
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            user_repository: User repository (author checks, usernames)
            clock: Source of the current time
            edit_window: How long after creation content may be edited
            restore_window: How long after deletion a comment may be restored
            max_thread_depth: Deepest allowed reply, top-level comment being 1
        """
        self.comment_repository = comment_repository
        self.user_repository = user_repository
        self.clock = clock
        self.edit_window = edit_window
        self.restore_window = restore_window
        self.max_thread_depth = max_thread_depth

    async def create_comment(
        self,
        content: str,
        author_id: UserId,
        parent_id: CommentId | None = None,
    ) -> Comment:
        """Create a top-level comment or a reply.

        Args:
            content: Comment text
            author_id: Author user ID
            parent_id: Comment being replied to (None for top-level)

        Returns:
            Created comment

        Raises:
            NotFoundError: If the author does not exist, or the parent does
                not exist or is soft-deleted
            ValidationError: If the reply would nest deeper than
                ``max_thread_depth``
        """
        with logfire.span(
            "comment_service.create_comment",
            author_id=str(author_id),
            parent_id=str(parent_id) if parent_id else None,
        ):
            if parent_id:
                parent = await self.comment_repository.find_by_id(parent_id)
                if not parent or parent.is_deleted:
                    logfire.warn("Parent comment not found", parent_id=str(parent_id))
                    raise NotFoundError("Comment", str(parent_id))

                parent_depth = await self.comment_repository.thread_depth(parent_id)
                if parent_depth >= self.max_thread_depth:
                    logfire.warn(
                        "Reply too deeply nested",
                        parent_id=str(parent_id),
                        parent_depth=parent_depth,
                    )
                    raise ValidationError(
                        f"Replies cannot nest more than {self.max_thread_depth} levels"
                    )

            author = await self.user_repository.find_by_id(author_id)
            if not author:
                logfire.warn("Comment author not found", author_id=str(author_id))
                raise NotFoundError("User", str(author_id))

            now = self.clock.now()
            comment = Comment(
                id=CommentId(uuid4()),
                author_id=author_id,
                content=content,
                parent_id=parent_id,
                is_deleted=False,
                deleted_at=None,
                created_at=now,
                updated_at=now,
            )

            saved = await self.comment_repository.save(comment)
            logfire.info(
                "Comment created",
                comment_id=str(saved.id),
                author_id=str(author_id),
                is_reply=parent_id is not None,
            )
            return saved

    async def get_comment_by_id(self, comment_id: CommentId) -> Comment | None:
        """Get a comment by ID, deleted or not.

        Args:
            comment_id: Comment ID

        Returns:
            Comment if found, None otherwise
        """
        with logfire.span(
            "comment_service.get_comment_by_id", comment_id=str(comment_id)
        ):
            return await self.comment_repository.find_by_id(comment_id)

    def is_editable(self, comment: Comment) -> bool:
        """Whether the comment is still inside its edit window right now."""
        return comment.can_edit(self.clock.now(), self.edit_window)

    async def get_author_username(self, author_id: UserId) -> Username:
        """Resolve a comment author's username."""
        usernames = await self.user_repository.find_usernames([author_id])
        return usernames.get(author_id, UNKNOWN_USERNAME)

    async def list_comment_tree(self) -> list[CommentNode]:
        """Build the full comment forest.

        Algorithm:
        1. Fetch every comment (soft-deleted included) in one query
        2. Resolve author usernames in one batch
        3. Group comments by parent_id
        4. Top-level comments (no parent) sorted newest first
        5. Replies at every level sorted oldest first, expanded recursively

        Roots are exactly the comments whose parent_id is None. Replies of a
        purged comment are among them because the purge clears their
        parent_id; a reply whose parent_id points at a comment not in the
        result is left out rather than shown at the top level.

        Returns:
            Top-level CommentNode objects with replies populated recursively
        """
        with logfire.span("comment_service.list_comment_tree"):
            comments = await self.comment_repository.find_all()
            usernames = await self.user_repository.find_usernames(
                {comment.author_id for comment in comments}
            )
            now = self.clock.now()

            children: dict[CommentId | None, list[Comment]] = defaultdict(list)
            for comment in comments:
                children[comment.parent_id].append(comment)

            def build_subtree(comment: Comment) -> CommentNode:
                """Build tree recursively from a comment."""
                replies = sorted(children.get(comment.id, []), key=lambda c: c.created_at)
                return CommentNode(
                    comment=comment,
                    author_username=usernames.get(comment.author_id, UNKNOWN_USERNAME),
                    can_edit=comment.can_edit(now, self.edit_window),
                    replies=[build_subtree(reply) for reply in replies],
                )

            roots = sorted(
                children.get(None, []), key=lambda c: c.created_at, reverse=True
            )
            tree = [build_subtree(root) for root in roots]

            logfire.info(
                "Built comment tree", root_count=len(tree), total=len(comments)
            )
            return tree

    async def update_comment(
        self, comment_id: CommentId, content: str, requester_id: UserId
    ) -> Comment:
        """Replace a comment's content within the edit window.

        Args:
            comment_id: Comment ID
            content: New content
            requester_id: User asking for the edit

        Returns:
            Updated comment

        Raises:
            NotFoundError: If no live comment has that ID
            ForbiddenError: If the requester is not the author
            InvalidStateError: If the edit window has expired
        """
        with logfire.span(
            "comment_service.update_comment",
            comment_id=str(comment_id),
            requester_id=str(requester_id),
        ):
            comment = await self._get_live_comment(comment_id)

            if comment.author_id != requester_id:
                logfire.warn(
                    "Edit by non-author",
                    comment_id=str(comment_id),
                    requester_id=str(requester_id),
                )
                raise ForbiddenError(
                    "edit", "comment", str(comment_id), str(requester_id)
                )

            now = self.clock.now()
            if not comment.can_edit(now, self.edit_window):
                logfire.warn("Edit window expired", comment_id=str(comment_id))
                raise InvalidStateError("Edit window expired")

            updated = await self.comment_repository.save(
                comment.with_content(content, now)
            )
            logfire.info(
                "Comment updated",
                comment_id=str(comment_id),
                content_length=len(content),
            )
            return updated

    async def delete_comment(self, comment_id: CommentId, requester_id: UserId) -> None:
        """Soft-delete a comment.

        Content is retained so the author can restore it within the
        restore window.

        Raises:
            NotFoundError: If no live comment has that ID
            ForbiddenError: If the requester is not the author
        """
        with logfire.span(
            "comment_service.delete_comment",
            comment_id=str(comment_id),
            requester_id=str(requester_id),
        ):
            comment = await self._get_live_comment(comment_id)

            if comment.author_id != requester_id:
                logfire.warn(
                    "Delete by non-author",
                    comment_id=str(comment_id),
                    requester_id=str(requester_id),
                )
                raise ForbiddenError(
                    "delete", "comment", str(comment_id), str(requester_id)
                )

            await self.comment_repository.save(comment.soft_deleted(self.clock.now()))
            logfire.info("Comment soft-deleted", comment_id=str(comment_id))

    async def restore_comment(
        self, comment_id: CommentId, requester_id: UserId
    ) -> Comment:
        """Undo a soft delete within the restore window.

        Args:
            comment_id: Comment ID
            requester_id: User asking for the restore

        Returns:
            Restored comment

        Raises:
            NotFoundError: If no soft-deleted comment has that ID, or it was
                purged while the restore was in flight
            ForbiddenError: If the requester is not the author
            InvalidStateError: If the restore window has expired
        """
        with logfire.span(
            "comment_service.restore_comment",
            comment_id=str(comment_id),
            requester_id=str(requester_id),
        ):
            comment = await self.comment_repository.find_by_id(comment_id)
            if not comment or not comment.is_deleted:
                logfire.warn("Deleted comment not found", comment_id=str(comment_id))
                raise NotFoundError("Comment", str(comment_id))

            if comment.author_id != requester_id:
                logfire.warn(
                    "Restore by non-author",
                    comment_id=str(comment_id),
                    requester_id=str(requester_id),
                )
                raise ForbiddenError(
                    "restore", "comment", str(comment_id), str(requester_id)
                )

            now = self.clock.now()
            if not comment.can_restore(now, self.restore_window):
                logfire.warn("Restore window expired", comment_id=str(comment_id))
                raise InvalidStateError("Restore window expired")

            restored = await self.comment_repository.restore(
                comment_id, now - self.restore_window
            )
            if restored is None:
                # Lost the race against the reaper
                logfire.warn("Comment purged during restore", comment_id=str(comment_id))
                raise NotFoundError("Comment", str(comment_id))

            logfire.info("Comment restored", comment_id=str(comment_id))
            return restored

    async def purge_expired(self, now: datetime | None = None) -> int:
        """Permanently remove soft-deleted comments past their restore window.

        Idempotent: a second call with nothing newly expired returns 0.

        Args:
            now: Evaluation time (defaults to the clock)

        Returns:
            Number of comments removed
        """
        now = now or self.clock.now()
        cutoff = now - self.restore_window
        with logfire.span("comment_service.purge_expired", cutoff=cutoff.isoformat()):
            count = await self.comment_repository.purge_deleted_before(cutoff)
            if count:
                logfire.info("Expired comments purged", count=count)
            return count

    async def _get_live_comment(self, comment_id: CommentId) -> Comment:
        """Fetch a comment that exists and is not soft-deleted."""
        comment = await self.comment_repository.find_by_id(comment_id)
        if not comment or comment.is_deleted:
            logfire.warn("Comment not found", comment_id=str(comment_id))
            raise NotFoundError("Comment", str(comment_id))
        return comment
