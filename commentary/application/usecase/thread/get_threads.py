"""Get threads use case."""

from pydantic import BaseModel

from commentary.application.usecase.base import BaseUseCase
from commentary.domain.service import ThreadService
from commentary.domain.value import ThreadId

from .get_thread import ThreadResponse


class GetThreadsRequest(BaseModel):
    """Get threads request."""

    thread_ids: list[str]


class GetThreadsResponse(BaseModel):
    """Get threads response (unknown ids are omitted)."""

    threads: list[ThreadResponse]
    total: int


class GetThreadsUseCase(BaseUseCase[GetThreadsRequest, GetThreadsResponse]):
    """Use case for retrieving several threads at once."""

    def __init__(self, thread_service: ThreadService) -> None:
        """Initialize get threads use case.

        Args:
            thread_service: Thread domain service
        """
        self.thread_service = thread_service

    async def execute(self, request: GetThreadsRequest) -> GetThreadsResponse:
        """Execute get threads flow.

        Raises:
            ValidationError: If no ids are given
        """
        threads = await self.thread_service.get_threads(
            [ThreadId(thread_id) for thread_id in request.thread_ids]
        )
        items = [ThreadResponse.from_domain(thread) for thread in threads]
        return GetThreadsResponse(threads=items, total=len(items))
