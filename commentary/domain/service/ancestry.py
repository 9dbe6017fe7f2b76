"""Ancestry computation for new comments."""

from typing import Optional

from commentary.domain.error import CrossThreadParentError
from commentary.domain.model.comment import Comment
from commentary.domain.value import CommentId, ThreadId


def derive_ancestry(
    thread_id: ThreadId, parent: Optional[Comment]
) -> tuple[tuple[CommentId, ...], int]:
    """Compute the ancestors and depth of a new comment.

    Args:
        thread_id: Thread the new comment is posted in
        parent: Comment being replied to (None for top-level)

    Returns:
        (ancestors, depth) where depth == len(ancestors)

    Raises:
        CrossThreadParentError: If parent belongs to another thread
        ValueError: If parent has not been saved yet
    """
    if parent is None:
        return (), 0

    if parent.thread_id != thread_id:
        raise CrossThreadParentError(str(parent.id), parent.thread_id, thread_id)
    if parent.id is None:
        raise ValueError("Parent comment must be saved before replying to it")

    ancestors = parent.ancestors + (parent.id,)
    return ancestors, len(ancestors)
