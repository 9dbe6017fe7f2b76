"""Create thread use case."""

from pydantic import BaseModel

from commentary.application.usecase.base import BaseUseCase
from commentary.domain.service import ThreadService
from commentary.domain.value import ThreadId

from .get_thread import ThreadResponse


class CreateThreadRequest(BaseModel):
    """Create thread request."""

    thread_id: str
    permalink: str | None = None


class CreateThreadUseCase(BaseUseCase[CreateThreadRequest, ThreadResponse]):
    """Use case for explicitly creating a thread."""

    def __init__(self, thread_service: ThreadService) -> None:
        """Initialize create thread use case.

        Args:
            thread_service: Thread domain service
        """
        self.thread_service = thread_service

    async def execute(self, request: CreateThreadRequest) -> ThreadResponse:
        """Execute create thread flow.

        Raises:
            ValidationError: If the id or permalink is invalid
            DuplicateThreadError: If the id is already taken
        """
        thread = self.thread_service.create_thread().model_copy(
            update={
                "id": ThreadId(request.thread_id),
                "permalink": request.permalink,
            }
        )
        saved = await self.thread_service.save_thread(thread)
        return ThreadResponse.from_domain(saved)
