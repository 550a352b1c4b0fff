"""Builders shared by tests."""

from datetime import datetime
from uuid import uuid4

from discuss.domain.model import Comment, User
from discuss.domain.repository import CommentRepository, UserRepository
from discuss.domain.value import CommentId, Email, UserId, Username
from discuss.util.password import hash_password


async def make_user(
    user_repo: UserRepository, username: str = "alice", password: str = "secret123"
) -> User:
    """Save a user with a unique email."""
    user = User(
        id=UserId(uuid4()),
        email=Email(f"{username}-{uuid4().hex[:8]}@example.com"),
        username=Username(username),
        password_hash=hash_password(password),
    )
    return await user_repo.save(user)


async def make_comment(
    comment_repo: CommentRepository,
    author_id: UserId,
    created_at: datetime,
    content: str = "A comment",
    parent_id: CommentId | None = None,
    deleted_at: datetime | None = None,
) -> Comment:
    """Save a comment directly, bypassing the service's clock."""
    comment = Comment(
        id=CommentId(uuid4()),
        author_id=author_id,
        content=content,
        parent_id=parent_id,
        is_deleted=deleted_at is not None,
        deleted_at=deleted_at,
        created_at=created_at,
        updated_at=created_at,
    )
    return await comment_repo.save(comment)
