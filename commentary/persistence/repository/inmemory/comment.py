"""In-memory comment repository for testing."""

from typing import Optional
from uuid import uuid4

from commentary.domain.error import NotFoundError
from commentary.domain.model.comment import Comment
from commentary.domain.repository.comment import CommentRepository
from commentary.domain.value import CommentId, CommentState, ThreadId


class InMemoryCommentRepository(CommentRepository):
    """In-memory implementation of CommentRepository for testing."""

    def __init__(self) -> None:
        self._comments: dict[CommentId, Comment] = {}

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        return self._comments.get(comment_id)

    async def find_all_by_thread(self, thread_id: ThreadId) -> list[Comment]:
        """Find all comments of a thread, deleted ones included."""
        return [c for c in self._comments.values() if c.thread_id == thread_id]

    async def insert(self, comment: Comment) -> Comment:
        """Insert a comment, assigning an id if it has none."""
        saved = (
            comment
            if comment.id is not None
            else comment.model_copy(update={"id": CommentId(uuid4())})
        )
        self._comments[saved.id] = saved  # type: ignore[index]
        return saved

    async def update_state(self, comment_id: CommentId, state: CommentState) -> bool:
        """Set the moderation state unless the comment already has it."""
        comment = self._comments.get(comment_id)
        if comment is None:
            raise NotFoundError("Comment", str(comment_id))
        if comment.state == state:
            return False
        self._comments[comment_id] = comment.model_copy(update={"state": state})
        return True

    async def update_score(self, comment_id: CommentId, delta: int) -> int:
        """Add delta to the score."""
        comment = self._comments.get(comment_id)
        if comment is None:
            raise NotFoundError("Comment", str(comment_id))
        updated = comment.model_copy(update={"score": comment.score + delta})
        self._comments[comment_id] = updated
        return updated.score
