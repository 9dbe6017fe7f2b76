"""Cast vote use case."""

from uuid import UUID

from pydantic import BaseModel

from commentary.application.usecase.base import BaseUseCase
from commentary.domain.service import (
    CommentService,
    IdentityResolver,
    ThreadService,
    VoteService,
)
from commentary.domain.value import CommentId, ThreadId


class CastVoteRequest(BaseModel):
    """Cast vote request."""

    thread_id: str
    comment_id: UUID
    value: int  # +1 or -1


class CastVoteResponse(BaseModel):
    """Cast vote response."""

    comment_id: str
    voter_id: str
    value: int
    score: int


class CastVoteUseCase(BaseUseCase[CastVoteRequest, CastVoteResponse]):
    """Use case for voting on a comment as the current voter."""

    def __init__(
        self,
        thread_service: ThreadService,
        comment_service: CommentService,
        vote_service: VoteService,
        identity_resolver: IdentityResolver,
    ) -> None:
        """Initialize cast vote use case.

        Args:
            thread_service: Thread domain service
            comment_service: Comment domain service
            vote_service: Vote domain service
            identity_resolver: Supplies the voter for this request
        """
        self.thread_service = thread_service
        self.comment_service = comment_service
        self.vote_service = vote_service
        self.identity_resolver = identity_resolver

    async def execute(self, request: CastVoteRequest) -> CastVoteResponse:
        """Execute cast vote flow.

        Raises:
            NotFoundError: If the thread or the comment does not exist
            VoteError: If the value is unsupported or the duplicate is rejected
        """
        thread = await self.thread_service.get_thread(ThreadId(request.thread_id))
        comment = await self.comment_service.get_comment(
            thread, CommentId(request.comment_id)
        )

        voter_id = self.identity_resolver.resolve()
        score = await self.vote_service.cast_vote(comment, voter_id, request.value)

        return CastVoteResponse(
            comment_id=str(comment.id),
            voter_id=voter_id,
            value=request.value,
            score=score,
        )
