"""Mock persistence providers for testing."""

from dishka import Scope, provide

from commentary.config import Settings
from commentary.domain.repository import (
    CommentRepository,
    ThreadRepository,
    VoteRepository,
)
from commentary.persistence.repository.inmemory import (
    InMemoryCommentRepository,
    InMemoryThreadRepository,
    InMemoryVoteRepository,
)
from commentary.util.di.infrastructure.persistence import PersistenceProvider


class MockPersistenceProvider(PersistenceProvider):
    """Mock persistence provider using in-memory repositories.

    Uses REQUEST scope to ensure test isolation - each test gets fresh repositories.
    """

    __is_mock__ = True

    @provide(scope=Scope.REQUEST)
    def get_thread_repository(self) -> ThreadRepository:
        """Provide in-memory thread repository."""
        return InMemoryThreadRepository()

    @provide(scope=Scope.REQUEST)
    def get_comment_repository(self) -> CommentRepository:
        """Provide in-memory comment repository."""
        return InMemoryCommentRepository()

    @provide(scope=Scope.REQUEST)
    def get_vote_repository(self, settings: Settings) -> VoteRepository:
        """Provide in-memory vote repository with the configured policy."""
        return InMemoryVoteRepository(duplicate_policy=settings.votes.duplicate_policy)
