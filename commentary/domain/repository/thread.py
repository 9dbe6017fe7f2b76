"""Thread repository interface."""

from abc import ABC, abstractmethod
from collections.abc import Sequence
from datetime import datetime
from typing import List, Optional

from commentary.domain.model.thread import Thread
from commentary.domain.value import ThreadId


class ThreadRepository(ABC):
    """Repository for Thread aggregate.

    Defines the contract for thread persistence operations.
    Implementations live in the infrastructure layer.
    """

    @abstractmethod
    async def find_by_id(self, thread_id: ThreadId) -> Optional[Thread]:
        """Find a thread by ID.

        Args:
            thread_id: The thread's identifier

        Returns:
            The thread if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_ids(self, thread_ids: Sequence[ThreadId]) -> List[Thread]:
        """Find all threads whose id is in the given list (batch query).

        Args:
            thread_ids: Thread identifiers

        Returns:
            Threads found, unknown ids are skipped
        """
        pass

    @abstractmethod
    async def save(self, thread: Thread) -> Thread:
        """Insert a new thread.

        The check for an existing id and the insert must be one atomic
        step (unique constraint or equivalent).

        Args:
            thread: The thread to insert (id must be set)

        Returns:
            The saved thread

        Raises:
            DuplicateThreadError: If a thread with this id already exists
        """
        pass

    @abstractmethod
    async def update(self, thread: Thread) -> Thread:
        """Update the mutable fields of an existing thread.

        Args:
            thread: The thread with updated fields

        Returns:
            The updated thread

        Raises:
            NotFoundError: If the thread does not exist
        """
        pass

    @abstractmethod
    async def increment_comment_count(
        self,
        thread_id: ThreadId,
        delta: int,
        last_comment_at: Optional[datetime] = None,
    ) -> None:
        """Atomically add delta to the comment count (never below 0).

        Args:
            thread_id: The thread ID
            delta: Signed change to apply
            last_comment_at: New last comment timestamp, if any
        """
        pass
