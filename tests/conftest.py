"""Test configuration and fixtures."""

from datetime import datetime, timedelta
from typing import Optional
from uuid import uuid4

from commentary.domain.model import Comment, Thread
from commentary.domain.value import CommentId, CommentState, ThreadId

BASE_TIME = datetime(2024, 1, 1, 12, 0, 0)


def make_thread(thread_id: str = "thread-1", **overrides) -> Thread:
    """Helper to build a saved-looking thread for tests."""
    fields = {
        "id": ThreadId(thread_id),
        "permalink": f"https://example.com/{thread_id}",
        "created_at": BASE_TIME,
    }
    fields.update(overrides)
    return Thread(**fields)


def make_comment(
    thread_id: str = "thread-1",
    parent: Optional[Comment] = None,
    minutes: int = 0,
    score: int = 0,
    state: CommentState = CommentState.VISIBLE,
    body: str = "text",
    comment_id: Optional[CommentId] = None,
) -> Comment:
    """Helper to build a comment with an id, chained under parent.

    Args:
        thread_id: Thread of the comment
        parent: Parent comment (None for top-level)
        minutes: Creation time offset from BASE_TIME, for ordering
        score: Cached score
        state: Moderation state
        body: Comment text
        comment_id: Explicit id (random when None)
    """
    ancestors = parent.ancestors + (parent.id,) if parent is not None else ()
    return Comment(
        id=comment_id or CommentId(uuid4()),
        thread_id=ThreadId(thread_id),
        ancestors=ancestors,
        author="author",
        body=body,
        state=state,
        score=score,
        created_at=BASE_TIME + timedelta(minutes=minutes),
    )
