"""In-memory thread repository for testing."""

from collections.abc import Sequence
from datetime import datetime
from typing import Optional

from commentary.domain.error import DuplicateThreadError, NotFoundError
from commentary.domain.model.thread import Thread
from commentary.domain.repository.thread import ThreadRepository
from commentary.domain.value import ThreadId


class InMemoryThreadRepository(ThreadRepository):
    """In-memory implementation of ThreadRepository for testing."""

    def __init__(self) -> None:
        self._threads: dict[ThreadId, Thread] = {}

    async def find_by_id(self, thread_id: ThreadId) -> Optional[Thread]:
        """Find a thread by ID."""
        return self._threads.get(thread_id)

    async def find_by_ids(self, thread_ids: Sequence[ThreadId]) -> list[Thread]:
        """Find threads by IDs, in request order."""
        return [
            self._threads[tid]
            for tid in dict.fromkeys(thread_ids)
            if tid in self._threads
        ]

    async def save(self, thread: Thread) -> Thread:
        """Insert a thread, rejecting duplicate ids."""
        if thread.id is None:
            raise ValueError("Thread id must be assigned before saving")
        if thread.id in self._threads:
            raise DuplicateThreadError(thread.id)
        self._threads[thread.id] = thread
        return thread

    async def update(self, thread: Thread) -> Thread:
        """Update an existing thread."""
        if thread.id is None or thread.id not in self._threads:
            raise NotFoundError("Thread", str(thread.id))
        self._threads[thread.id] = thread
        return thread

    async def increment_comment_count(
        self,
        thread_id: ThreadId,
        delta: int,
        last_comment_at: Optional[datetime] = None,
    ) -> None:
        """Add delta to the comment count (minimum 0)."""
        thread = self._threads.get(thread_id)
        if thread:
            update: dict = {"num_comments": max(0, thread.num_comments + delta)}
            if last_comment_at is not None:
                update["last_comment_at"] = last_comment_at
            self._threads[thread_id] = thread.model_copy(update=update)
