"""Get comment score use case."""

from uuid import UUID

from pydantic import BaseModel

from commentary.application.usecase.base import BaseUseCase
from commentary.domain.service import VoteService
from commentary.domain.value import CommentId


class GetCommentScoreRequest(BaseModel):
    """Get comment score request."""

    comment_id: UUID


class GetCommentScoreResponse(BaseModel):
    """Get comment score response."""

    comment_id: str
    score: int


class GetCommentScoreUseCase(
    BaseUseCase[GetCommentScoreRequest, GetCommentScoreResponse]
):
    """Use case for reading a comment's score."""

    def __init__(self, vote_service: VoteService) -> None:
        """Initialize get comment score use case.

        Args:
            vote_service: Vote domain service
        """
        self.vote_service = vote_service

    async def execute(self, request: GetCommentScoreRequest) -> GetCommentScoreResponse:
        comment_id = CommentId(request.comment_id)
        score = await self.vote_service.get_score(comment_id)
        return GetCommentScoreResponse(comment_id=str(comment_id), score=score)
