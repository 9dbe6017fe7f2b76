"""Open or close a thread for comments."""

from pydantic import BaseModel

from commentary.application.usecase.base import BaseUseCase
from commentary.domain.service import ThreadService
from commentary.domain.value import ThreadId

from .get_thread import ThreadResponse


class SetThreadCommentableRequest(BaseModel):
    """Set thread commentable request."""

    thread_id: str
    commentable: bool


class SetThreadCommentableUseCase(
    BaseUseCase[SetThreadCommentableRequest, ThreadResponse]
):
    """Use case for opening or closing a thread."""

    def __init__(self, thread_service: ThreadService) -> None:
        """Initialize set commentable use case.

        Args:
            thread_service: Thread domain service
        """
        self.thread_service = thread_service

    async def execute(self, request: SetThreadCommentableRequest) -> ThreadResponse:
        thread = await self.thread_service.get_thread(ThreadId(request.thread_id))
        updated = await self.thread_service.set_commentable(thread, request.commentable)
        return ThreadResponse.from_domain(updated)
