"""Get thread use case."""

from datetime import datetime

from pydantic import BaseModel

from commentary.application.usecase.base import BaseUseCase
from commentary.domain.model import Thread
from commentary.domain.service import ThreadService
from commentary.domain.value import ThreadId


class ThreadResponse(BaseModel):
    """Thread details."""

    thread_id: str
    permalink: str | None
    commentable: bool
    num_comments: int
    last_comment_at: datetime | None
    created_at: datetime

    @classmethod
    def from_domain(cls, thread: Thread) -> "ThreadResponse":
        return cls(
            thread_id=str(thread.id),
            permalink=thread.permalink,
            commentable=thread.commentable,
            num_comments=thread.num_comments,
            last_comment_at=thread.last_comment_at,
            created_at=thread.created_at,
        )


class GetThreadRequest(BaseModel):
    """Get thread request."""

    thread_id: str


class GetThreadUseCase(BaseUseCase[GetThreadRequest, ThreadResponse]):
    """Use case for retrieving one thread."""

    def __init__(self, thread_service: ThreadService) -> None:
        """Initialize get thread use case.

        Args:
            thread_service: Thread domain service
        """
        self.thread_service = thread_service

    async def execute(self, request: GetThreadRequest) -> ThreadResponse:
        """Execute get thread flow.

        Raises:
            NotFoundError: If the thread does not exist
        """
        thread = await self.thread_service.get_thread(ThreadId(request.thread_id))
        return ThreadResponse.from_domain(thread)
