"""Application layer DI providers."""

from dishka import Scope, from_context, provide

from commentary.application.usecase.comment import (
    CreateCommentUseCase,
    GetThreadCommentsUseCase,
    GetThreadCommentUseCase,
    SetCommentStateUseCase,
)
from commentary.application.usecase.thread import (
    CreateThreadUseCase,
    GetThreadsUseCase,
    GetThreadUseCase,
    SetThreadCommentableUseCase,
)
from commentary.application.usecase.vote import CastVoteUseCase, GetCommentScoreUseCase
from commentary.config import CommentSettings
from commentary.domain.service import (
    CommentService,
    IdentityResolver,
    ModerationService,
    ThreadService,
    VoteService,
)
from commentary.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Production application use cases provider - concrete, no mocks needed.

    The voter identity is request context: enter the request scope with
    ``container(context={IdentityResolver: resolver})``.
    """

    identity_resolver = from_context(provides=IdentityResolver, scope=Scope.REQUEST)

    # Thread use cases
    @provide(scope=Scope.REQUEST)
    def get_get_thread_use_case(self, thread_service: ThreadService) -> GetThreadUseCase:
        """Provide get thread use case."""
        return GetThreadUseCase(thread_service=thread_service)

    @provide(scope=Scope.REQUEST)
    def get_get_threads_use_case(
        self, thread_service: ThreadService
    ) -> GetThreadsUseCase:
        """Provide get threads use case."""
        return GetThreadsUseCase(thread_service=thread_service)

    @provide(scope=Scope.REQUEST)
    def get_create_thread_use_case(
        self, thread_service: ThreadService
    ) -> CreateThreadUseCase:
        """Provide create thread use case."""
        return CreateThreadUseCase(thread_service=thread_service)

    @provide(scope=Scope.REQUEST)
    def get_set_thread_commentable_use_case(
        self, thread_service: ThreadService
    ) -> SetThreadCommentableUseCase:
        """Provide set thread commentable use case."""
        return SetThreadCommentableUseCase(thread_service=thread_service)

    # Comment use cases
    @provide(scope=Scope.REQUEST)
    def get_get_thread_comments_use_case(
        self,
        thread_service: ThreadService,
        comment_service: CommentService,
        comment_settings: CommentSettings,
    ) -> GetThreadCommentsUseCase:
        """Provide get thread comments use case."""
        return GetThreadCommentsUseCase(
            thread_service=thread_service,
            comment_service=comment_service,
            comment_settings=comment_settings,
        )

    @provide(scope=Scope.REQUEST)
    def get_get_thread_comment_use_case(
        self, thread_service: ThreadService, comment_service: CommentService
    ) -> GetThreadCommentUseCase:
        """Provide get thread comment use case."""
        return GetThreadCommentUseCase(
            thread_service=thread_service, comment_service=comment_service
        )

    @provide(scope=Scope.REQUEST)
    def get_create_comment_use_case(
        self, thread_service: ThreadService, comment_service: CommentService
    ) -> CreateCommentUseCase:
        """Provide create comment use case."""
        return CreateCommentUseCase(
            thread_service=thread_service, comment_service=comment_service
        )

    @provide(scope=Scope.REQUEST)
    def get_set_comment_state_use_case(
        self,
        thread_service: ThreadService,
        comment_service: CommentService,
        moderation_service: ModerationService,
    ) -> SetCommentStateUseCase:
        """Provide set comment state use case."""
        return SetCommentStateUseCase(
            thread_service=thread_service,
            comment_service=comment_service,
            moderation_service=moderation_service,
        )

    # Vote use cases
    @provide(scope=Scope.REQUEST)
    def get_cast_vote_use_case(
        self,
        thread_service: ThreadService,
        comment_service: CommentService,
        vote_service: VoteService,
        identity_resolver: IdentityResolver,
    ) -> CastVoteUseCase:
        """Provide cast vote use case."""
        return CastVoteUseCase(
            thread_service=thread_service,
            comment_service=comment_service,
            vote_service=vote_service,
            identity_resolver=identity_resolver,
        )

    @provide(scope=Scope.REQUEST)
    def get_get_comment_score_use_case(
        self, vote_service: VoteService
    ) -> GetCommentScoreUseCase:
        """Provide get comment score use case."""
        return GetCommentScoreUseCase(vote_service=vote_service)
