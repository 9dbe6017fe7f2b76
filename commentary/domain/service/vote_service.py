"""Vote domain service."""

from datetime import datetime
from uuid import uuid4

import logfire
from pydantic import ValidationError as PydanticValidationError

from commentary.domain.error import DuplicateVoteError, NotFoundError, VoteError
from commentary.domain.model.comment import Comment
from commentary.domain.model.vote import Vote
from commentary.domain.repository import CommentRepository, VoteRepository
from commentary.domain.value import CommentId, DuplicateVotePolicy, VoteId, VoterId


class VoteService:
    """Domain service aggregating votes into comment scores."""

    def __init__(
        self,
        vote_repository: VoteRepository,
        comment_repository: CommentRepository,
    ) -> None:
        """Initialize vote service.

        Args:
            vote_repository: Vote repository (declares the duplicate policy)
            comment_repository: Comment repository (holds cached scores)
        """
        self.vote_repository = vote_repository
        self.comment_repository = comment_repository

    async def cast_vote(self, comment: Comment, voter_id: VoterId, value: int) -> int:
        """Cast a vote on a comment.

        Records the vote under the store's duplicate policy, then applies
        the resulting delta with an atomic score increment. A replaced vote
        moves the score by new - old; an identical re-vote changes nothing.

        Args:
            comment: Saved comment
            voter_id: Voter identity
            value: +1 or -1

        Returns:
            Updated comment score

        Raises:
            VoteError: If value is unsupported, or the voter already voted
                and the store rejects duplicates
        """
        with logfire.span(
            "vote_service.cast_vote",
            comment_id=str(comment.id),
            voter_id=voter_id,
            value=value,
        ):
            if comment.id is None:
                raise ValueError("Cannot vote on an unsaved comment")

            try:
                vote = Vote(
                    id=VoteId(uuid4()),
                    comment_id=comment.id,
                    voter_id=voter_id,
                    value=value,
                    created_at=datetime.now(),
                )
            except PydanticValidationError:
                logfire.warn("Invalid vote value", comment_id=str(comment.id), value=value)
                raise VoteError(f"Unsupported vote value: {value!r}") from None

            policy = self.vote_repository.duplicate_policy
            if policy == DuplicateVotePolicy.REPLACE:
                previous = await self.vote_repository.replace(vote)
                delta = vote.value - (previous.value if previous else 0)
            else:
                try:
                    await self.vote_repository.save(vote)
                except DuplicateVoteError:
                    logfire.warn(
                        "Duplicate vote attempt",
                        comment_id=str(comment.id),
                        voter_id=voter_id,
                    )
                    raise VoteError("Already voted on this comment") from None
                delta = vote.value

            if delta:
                score = await self.comment_repository.update_score(comment.id, delta)
            else:
                score = await self.get_score(comment.id)

            logfire.info(
                "Vote cast",
                comment_id=str(comment.id),
                voter_id=voter_id,
                policy=policy.value,
                delta=delta,
                score=score,
            )
            return score

    async def get_score(self, comment_id: CommentId) -> int:
        """Get the cached score of a comment.

        Raises:
            NotFoundError: If the comment does not exist
        """
        comment = await self.comment_repository.find_by_id(comment_id)
        if comment is None:
            raise NotFoundError("Comment", str(comment_id))
        return comment.score

    async def recompute_score(self, comment: Comment) -> int:
        """Resynchronise a comment's cached score with its vote ledger.

        The ledger sum and the cached score are read separately before the
        difference is applied. Callers must serialize this against votes on
        the same comment (a maintenance job, not a request path), otherwise
        a vote landing in between is counted twice or lost.

        Args:
            comment: Saved comment

        Returns:
            Score according to the ledger
        """
        with logfire.span("vote_service.recompute_score", comment_id=str(comment.id)):
            ledger_score = await self.vote_repository.sum_by_comment(comment.id)  # type: ignore[arg-type]
            cached = await self.get_score(comment.id)  # type: ignore[arg-type]
            if ledger_score != cached:
                logfire.warn(
                    "Cached score drifted from vote ledger",
                    comment_id=str(comment.id),
                    cached=cached,
                    ledger=ledger_score,
                )
                return await self.comment_repository.update_score(
                    comment.id, ledger_score - cached  # type: ignore[arg-type]
                )
            return cached
