"""Vote repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from commentary.domain.model.vote import Vote
from commentary.domain.value import CommentId, DuplicateVotePolicy


class VoteRepository(ABC):
    """Repository for Vote entity.

    Each store declares how it treats a second vote by the same voter on the
    same comment; the vote service honors that policy for every vote.
    """

    duplicate_policy: DuplicateVotePolicy = DuplicateVotePolicy.REJECT

    @abstractmethod
    async def find_by_comment(self, comment_id: CommentId) -> List[Vote]:
        """Find all votes on a comment.

        Args:
            comment_id: The comment ID

        Returns:
            List of votes on the comment
        """
        pass

    @abstractmethod
    async def save(self, vote: Vote) -> Vote:
        """Insert a vote.

        Args:
            vote: The vote to save

        Returns:
            The saved vote

        Raises:
            DuplicateVoteError: If the voter already voted on this comment
        """
        pass

    @abstractmethod
    async def replace(self, vote: Vote) -> Optional[Vote]:
        """Insert a vote or replace the voter's previous vote on the comment.

        Args:
            vote: The new vote

        Returns:
            The replaced vote, or None if there was none

        Raises:
            StoreError: If the upsert keeps conflicting
        """
        pass

    @abstractmethod
    async def sum_by_comment(self, comment_id: CommentId) -> int:
        """Sum the values of all votes on a comment.

        Args:
            comment_id: The comment ID

        Returns:
            Score according to the vote ledger
        """
        pass
