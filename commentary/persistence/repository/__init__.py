"""PostgreSQL repository implementations."""

from commentary.persistence.repository.comment import PostgresCommentRepository
from commentary.persistence.repository.thread import PostgresThreadRepository
from commentary.persistence.repository.vote import PostgresVoteRepository

__all__ = [
    "PostgresThreadRepository",
    "PostgresCommentRepository",
    "PostgresVoteRepository",
]
