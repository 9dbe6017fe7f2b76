"""Set comment state (moderation) use case."""

from uuid import UUID

from pydantic import BaseModel

from commentary.application.usecase.base import BaseUseCase
from commentary.domain.service import CommentService, ModerationService, ThreadService
from commentary.domain.value import CommentId, ThreadId

from .get_thread_comments import CommentItem


class SetCommentStateRequest(BaseModel):
    """Set comment state request."""

    thread_id: str
    comment_id: UUID
    state: str  # "visible" or "deleted"


class SetCommentStateUseCase(BaseUseCase[SetCommentStateRequest, CommentItem]):
    """Use case for deleting or restoring a comment."""

    def __init__(
        self,
        thread_service: ThreadService,
        comment_service: CommentService,
        moderation_service: ModerationService,
    ) -> None:
        """Initialize set comment state use case.

        Args:
            thread_service: Thread domain service
            comment_service: Comment domain service
            moderation_service: Moderation domain service
        """
        self.thread_service = thread_service
        self.comment_service = comment_service
        self.moderation_service = moderation_service

    async def execute(self, request: SetCommentStateRequest) -> CommentItem:
        """Execute set comment state flow.

        The response carries the unredacted comment so a moderator can see
        what was deleted.

        Raises:
            NotFoundError: If the thread or the comment does not exist
            InvalidStateTransitionError: If the state is unknown
        """
        thread = await self.thread_service.get_thread(ThreadId(request.thread_id))
        comment = await self.comment_service.get_comment(
            thread, CommentId(request.comment_id)
        )
        updated = await self.moderation_service.set_state(comment, request.state)
        return CommentItem.from_domain(updated)
