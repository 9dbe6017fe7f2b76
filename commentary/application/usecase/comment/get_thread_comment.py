"""Get a single comment of a thread."""

from uuid import UUID

from pydantic import BaseModel

from commentary.application.usecase.base import BaseUseCase
from commentary.domain.service import CommentService, ThreadService, redact
from commentary.domain.value import CommentId, ThreadId

from .get_thread_comments import CommentItem


class GetThreadCommentRequest(BaseModel):
    """Get thread comment request."""

    thread_id: str
    comment_id: UUID


class GetThreadCommentResponse(BaseModel):
    """Get thread comment response."""

    comment: CommentItem
    parent: CommentItem | None
    depth: int


class GetThreadCommentUseCase(
    BaseUseCase[GetThreadCommentRequest, GetThreadCommentResponse]
):
    """Use case for retrieving one comment with its direct parent."""

    def __init__(
        self, thread_service: ThreadService, comment_service: CommentService
    ) -> None:
        """Initialize get thread comment use case.

        Args:
            thread_service: Thread domain service
            comment_service: Comment domain service
        """
        self.thread_service = thread_service
        self.comment_service = comment_service

    async def execute(
        self, request: GetThreadCommentRequest
    ) -> GetThreadCommentResponse:
        """Execute get thread comment flow.

        Raises:
            NotFoundError: If the thread or the comment does not exist
        """
        thread = await self.thread_service.get_thread(ThreadId(request.thread_id))
        comment = await self.comment_service.get_comment(
            thread, CommentId(request.comment_id)
        )

        parent = None
        if comment.parent_id is not None:
            parent = await self.comment_service.get_comment(thread, comment.parent_id)

        return GetThreadCommentResponse(
            comment=CommentItem.from_domain(redact(comment)),
            parent=CommentItem.from_domain(redact(parent)) if parent else None,
            depth=comment.depth,
        )
