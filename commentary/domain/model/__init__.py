"""Domain model entities for the comment core."""

from commentary.domain.model.comment import Comment
from commentary.domain.model.thread import Thread
from commentary.domain.model.vote import Vote

__all__ = [
    "Thread",
    "Comment",
    "Vote",
]
