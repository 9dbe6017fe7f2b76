"""Domain layer DI providers."""

from dishka import Scope, provide

from commentary.domain.repository import (
    CommentRepository,
    ThreadRepository,
    VoteRepository,
)
from commentary.domain.service import (
    CommentService,
    ModerationService,
    PydanticThreadValidator,
    ThreadService,
    Validator,
    VoteService,
)
from commentary.util.di.base import ProviderBase


class ProdDomainProvider(ProviderBase):
    """Production domain services provider - concrete, no mocks needed.

    Domain services are REQUEST-scoped to align with repository/session lifecycle.
    """

    scope = Scope.REQUEST

    @provide(scope=Scope.APP)
    def get_validator(self) -> Validator:
        """Provide the new-thread validator."""
        return PydanticThreadValidator()

    @provide
    def get_thread_service(
        self, thread_repository: ThreadRepository, validator: Validator
    ) -> ThreadService:
        """Provide thread domain service."""
        return ThreadService(thread_repository=thread_repository, validator=validator)

    @provide
    def get_comment_service(
        self,
        comment_repository: CommentRepository,
        thread_repository: ThreadRepository,
    ) -> CommentService:
        """Provide comment domain service."""
        return CommentService(
            comment_repository=comment_repository,
            thread_repository=thread_repository,
        )

    @provide
    def get_moderation_service(
        self,
        comment_repository: CommentRepository,
        thread_repository: ThreadRepository,
    ) -> ModerationService:
        """Provide moderation domain service."""
        return ModerationService(
            comment_repository=comment_repository,
            thread_repository=thread_repository,
        )

    @provide
    def get_vote_service(
        self,
        vote_repository: VoteRepository,
        comment_repository: CommentRepository,
    ) -> VoteService:
        """Provide vote domain service."""
        return VoteService(
            vote_repository=vote_repository,
            comment_repository=comment_repository,
        )
