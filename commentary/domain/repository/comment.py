"""Comment repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from commentary.domain.model.comment import Comment
from commentary.domain.value import CommentId, CommentState, ThreadId


class CommentRepository(ABC):
    """Repository for Comment entity.

    Defines the contract for comment persistence operations.
    Comments are never physically deleted, so there is no delete.
    """

    @abstractmethod
    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID.

        Args:
            comment_id: The comment's unique identifier

        Returns:
            The comment if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all_by_thread(self, thread_id: ThreadId) -> List[Comment]:
        """Find every comment of a thread in one bulk read.

        Deleted comments are included; ordering is unspecified.

        Args:
            thread_id: The thread ID

        Returns:
            List of comments
        """
        pass

    @abstractmethod
    async def insert(self, comment: Comment) -> Comment:
        """Insert a new comment and assign its id.

        Args:
            comment: The unsaved comment (ancestry already computed)

        Returns:
            The saved comment with its id set
        """
        pass

    @abstractmethod
    async def update_state(self, comment_id: CommentId, state: CommentState) -> bool:
        """Set the moderation state of a comment if it differs.

        The check and the write happen in one step, so concurrent callers
        asking for the same state see exactly one change.

        Args:
            comment_id: The comment ID
            state: New state

        Returns:
            True if the stored state changed, False if it already matched

        Raises:
            NotFoundError: If the comment does not exist
        """
        pass

    @abstractmethod
    async def update_score(self, comment_id: CommentId, delta: int) -> int:
        """Atomically add delta to a comment's score.

        Args:
            comment_id: The comment ID
            delta: Signed change to apply

        Returns:
            The new score

        Raises:
            NotFoundError: If the comment does not exist
        """
        pass
