"""Create comment use case."""

from uuid import UUID

from pydantic import BaseModel, Field

from commentary.application.usecase.base import BaseUseCase
from commentary.domain.service import CommentService, ThreadService
from commentary.domain.value import CommentId, ThreadId

from .get_thread_comments import CommentItem


class CreateCommentRequest(BaseModel):
    """Create comment request."""

    thread_id: str
    parent_id: UUID | None = None  # Parent comment ID for replies
    author: str | None = Field(default=None, max_length=255)
    body: str = Field(default="", max_length=10000)


class CreateCommentUseCase(BaseUseCase[CreateCommentRequest, CommentItem]):
    """Use case for commenting on a thread or replying to a comment."""

    def __init__(
        self, thread_service: ThreadService, comment_service: CommentService
    ) -> None:
        """Initialize create comment use case.

        Args:
            thread_service: Thread domain service
            comment_service: Comment domain service
        """
        self.thread_service = thread_service
        self.comment_service = comment_service

    async def execute(self, request: CreateCommentRequest) -> CommentItem:
        """Execute create comment flow.

        Steps:
        1. Load the thread
        2. Resolve the parent, which must belong to the same thread
        3. Build the comment (ancestry computed here) and save it

        Raises:
            NotFoundError: If the thread or the parent does not exist
            CrossThreadParentError: If the parent is in another thread
            ThreadNotCommentableError: If the thread is closed
        """
        thread = await self.thread_service.get_thread(ThreadId(request.thread_id))

        parent_id = CommentId(request.parent_id) if request.parent_id else None
        parent = await self.comment_service.get_valid_parent(thread, parent_id)

        comment = self.comment_service.create_comment(
            thread, parent=parent, author=request.author, body=request.body
        )
        saved = await self.comment_service.save_comment(comment)
        return CommentItem.from_domain(saved)
