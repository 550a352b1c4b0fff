"""PostgreSQL implementation of Comment repository."""

from datetime import datetime
from typing import List, Optional

from sqlalchemy import delete, func, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from discuss.domain.model import Comment
from discuss.domain.repository import CommentRepository
from discuss.domain.value import CommentId
from discuss.persistence.mappers import comment_to_dict, row_to_comment
from discuss.persistence.tables import comments_table


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        stmt = select(comments_table).where(comments_table.c.id == comment_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_comment(row._asdict()) if row else None

    async def find_all(self) -> List[Comment]:
        """Every comment, oldest first."""
        stmt = select(comments_table).order_by(comments_table.c.created_at)
        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def thread_depth(self, comment_id: CommentId) -> int:
        """Depth via a recursive CTE over parent_id."""
        ancestors = (
            select(comments_table.c.id, comments_table.c.parent_id)
            .where(comments_table.c.id == comment_id)
            .cte("ancestors", recursive=True)
        )
        ancestors = ancestors.union_all(
            select(comments_table.c.id, comments_table.c.parent_id).join(
                ancestors, comments_table.c.id == ancestors.c.parent_id
            )
        )
        result = await self.session.execute(
            select(func.count()).select_from(ancestors)
        )
        return result.scalar_one()

    async def save(self, comment: Comment) -> Comment:
        """Save a comment (create or update)."""
        existing = await self.find_by_id(comment.id)

        comment_dict = comment_to_dict(comment)

        if existing:
            # id and created_at never change
            comment_dict.pop("id")
            comment_dict.pop("created_at")
            stmt = (
                update(comments_table)
                .where(comments_table.c.id == comment.id)
                .values(**comment_dict)
            )
        else:
            stmt = comments_table.insert().values(**comment_dict)
        await self.session.execute(stmt)

        await self.session.flush()
        return comment

    async def restore(
        self, comment_id: CommentId, deleted_after: datetime
    ) -> Optional[Comment]:
        """Conditionally undelete in a single UPDATE ... RETURNING.

        The row lock taken by the UPDATE serialises this against a concurrent
        purge; whichever commits first wins.
        """
        stmt = (
            update(comments_table)
            .where(comments_table.c.id == comment_id)
            .where(comments_table.c.is_deleted.is_(True))
            .where(comments_table.c.deleted_at >= deleted_after)
            .values(is_deleted=False, deleted_at=None)
            .returning(comments_table)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        await self.session.flush()
        return row_to_comment(row._asdict()) if row else None

    async def purge_deleted_before(self, cutoff: datetime) -> int:
        """Hard-delete expired soft-deleted comments in one statement.

        The foreign keys detach replies and unlink notifications (both
        SET NULL).
        """
        stmt = (
            delete(comments_table)
            .where(comments_table.c.is_deleted.is_(True))
            .where(comments_table.c.deleted_at < cutoff)
            .returning(comments_table.c.id)
        )
        result = await self.session.execute(stmt)
        purged = result.fetchall()
        await self.session.flush()
        return len(purged)
