"""Get comments use case."""

from pydantic import BaseModel

from discuss.domain.service import CommentNode, CommentService

from .create_comment import CommentResponse


class CommentItem(CommentResponse):
    """Comment in the tree, with its direct replies oldest first."""

    replies: list["CommentItem"]

    @classmethod
    def from_node(cls, node: CommentNode) -> "CommentItem":
        base = CommentResponse.from_comment(
            node.comment, node.author_username, node.can_edit
        )
        return cls(
            **base.model_dump(),
            replies=[cls.from_node(reply) for reply in node.replies],
        )


class GetCommentsRequest(BaseModel):
    """Get comments request."""


class GetCommentsResponse(BaseModel):
    """Get comments response."""

    comments: list[CommentItem]
    total: int  # Number of top-level comments


class GetCommentsUseCase:
    """Use case for reading the whole discussion as a tree."""

    def __init__(self, comment_service: CommentService) -> None:
        """Initialize get comments use case.

        Args:
            comment_service: Comment domain service
        """
        self.comment_service = comment_service

    async def execute(self, request: GetCommentsRequest) -> GetCommentsResponse:
        """Execute get comments flow.

        Top-level comments come newest first; replies at every depth come
        oldest first. Soft-deleted comments are included and flagged.

        Args:
            request: Get comments request

        Returns:
            Comment forest
        """
        tree = await self.comment_service.list_comment_tree()
        items = [CommentItem.from_node(node) for node in tree]
        return GetCommentsResponse(comments=items, total=len(items))
