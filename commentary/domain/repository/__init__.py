"""Repository interfaces for the comment core.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from commentary.domain.repository.comment import CommentRepository
from commentary.domain.repository.thread import ThreadRepository
from commentary.domain.repository.vote import VoteRepository

__all__ = [
    "ThreadRepository",
    "CommentRepository",
    "VoteRepository",
]
