"""PostgreSQL implementation of Vote repository."""

from typing import List, Optional

import logfire
from sqlalchemy import and_, func, insert, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from commentary.domain.error import DuplicateVoteError, StoreError
from commentary.domain.model import Vote
from commentary.domain.repository import VoteRepository
from commentary.domain.value import CommentId, DuplicateVotePolicy, VoterId
from commentary.persistence.mappers import row_to_vote, vote_to_dict
from commentary.persistence.tables import votes_table


class PostgresVoteRepository(VoteRepository):
    """PostgreSQL implementation of VoteRepository.

    Uniqueness of (comment_id, voter_id) is enforced by the unique_vote
    constraint.
    """

    def __init__(
        self,
        session: AsyncSession,
        duplicate_policy: DuplicateVotePolicy = DuplicateVotePolicy.REPLACE,
        max_retries: int = 3,
    ) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
            duplicate_policy: Declared policy for repeated votes
            max_retries: Upsert attempts before giving up with StoreError
        """
        self.session = session
        self.duplicate_policy = duplicate_policy
        self.max_retries = max_retries

    def _voter_clause(self, comment_id: CommentId, voter_id: VoterId):
        return and_(
            votes_table.c.comment_id == comment_id,
            votes_table.c.voter_id == voter_id,
        )

    async def find_by_comment(self, comment_id: CommentId) -> List[Vote]:
        """Find all votes on a comment."""
        stmt = select(votes_table).where(votes_table.c.comment_id == comment_id)
        result = await self.session.execute(stmt)
        return [row_to_vote(row._asdict()) for row in result.fetchall()]

    async def save(self, vote: Vote) -> Vote:
        """Insert a vote (unique per comment and voter)."""
        stmt = insert(votes_table).values(**vote_to_dict(vote))
        try:
            async with self.session.begin_nested():
                await self.session.execute(stmt)
        except IntegrityError:
            raise DuplicateVoteError(str(vote.comment_id), vote.voter_id) from None
        return vote

    async def replace(self, vote: Vote) -> Optional[Vote]:
        """Insert or replace a voter's vote.

        The existing row is locked while it is replaced. Two first votes
        racing on the insert conflict on unique_vote; the loser retries and
        then sees the winner's row.
        """
        for attempt in range(1, self.max_retries + 1):
            try:
                async with self.session.begin_nested():
                    stmt = (
                        select(votes_table)
                        .where(self._voter_clause(vote.comment_id, vote.voter_id))
                        .with_for_update()
                    )
                    row = (await self.session.execute(stmt)).fetchone()
                    previous = row_to_vote(row._asdict()) if row else None

                    if previous is None:
                        await self.session.execute(
                            insert(votes_table).values(**vote_to_dict(vote))
                        )
                    else:
                        await self.session.execute(
                            update(votes_table)
                            .where(votes_table.c.id == previous.id)
                            .values(value=vote.value, created_at=vote.created_at)
                        )
                return previous
            except IntegrityError:
                logfire.warn(
                    "Vote upsert conflict",
                    comment_id=str(vote.comment_id),
                    voter_id=vote.voter_id,
                    attempt=attempt,
                )

        raise StoreError(
            f"Could not record vote of {vote.voter_id} on comment {vote.comment_id} "
            f"after {self.max_retries} attempts"
        )

    async def sum_by_comment(self, comment_id: CommentId) -> int:
        """Sum the vote values on a comment."""
        stmt = select(func.coalesce(func.sum(votes_table.c.value), 0)).where(
            votes_table.c.comment_id == comment_id
        )
        result = await self.session.execute(stmt)
        return int(result.scalar() or 0)
