"""In-memory vote repository for testing."""

from typing import Optional

from commentary.domain.error import DuplicateVoteError
from commentary.domain.model.vote import Vote
from commentary.domain.repository.vote import VoteRepository
from commentary.domain.value import CommentId, DuplicateVotePolicy, VoterId


class InMemoryVoteRepository(VoteRepository):
    """In-memory implementation of VoteRepository for testing."""

    def __init__(
        self, duplicate_policy: DuplicateVotePolicy = DuplicateVotePolicy.REPLACE
    ) -> None:
        self.duplicate_policy = duplicate_policy
        self._votes: dict[tuple[CommentId, VoterId], Vote] = {}

    async def find_by_comment(self, comment_id: CommentId) -> list[Vote]:
        """Find all votes on a comment."""
        return [v for v in self._votes.values() if v.comment_id == comment_id]

    async def save(self, vote: Vote) -> Vote:
        """Insert a vote.

        Raises:
            DuplicateVoteError: If the voter already voted on this comment
        """
        key = (vote.comment_id, vote.voter_id)
        if key in self._votes:
            raise DuplicateVoteError(str(vote.comment_id), vote.voter_id)
        self._votes[key] = vote
        return vote

    async def replace(self, vote: Vote) -> Optional[Vote]:
        """Insert a vote or replace the previous one."""
        key = (vote.comment_id, vote.voter_id)
        previous = self._votes.get(key)
        self._votes[key] = vote
        return previous

    async def sum_by_comment(self, comment_id: CommentId) -> int:
        """Sum the vote values on a comment."""
        return sum(v.value for v in self._votes.values() if v.comment_id == comment_id)
