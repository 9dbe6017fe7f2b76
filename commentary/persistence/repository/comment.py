"""PostgreSQL implementation of Comment repository."""

from typing import List, Optional

from sqlalchemy import insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from commentary.domain.error import NotFoundError
from commentary.domain.model import Comment
from commentary.domain.repository import CommentRepository
from commentary.domain.value import CommentId, CommentState, ThreadId
from commentary.persistence.mappers import comment_to_dict, row_to_comment
from commentary.persistence.tables import comments_table


class PostgresCommentRepository(CommentRepository):
    """PostgreSQL implementation of CommentRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, comment_id: CommentId) -> Optional[Comment]:
        """Find a comment by ID."""
        stmt = select(comments_table).where(comments_table.c.id == comment_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_comment(row._asdict()) if row else None

    async def find_all_by_thread(self, thread_id: ThreadId) -> List[Comment]:
        """Find all comments for a thread in one query."""
        stmt = select(comments_table).where(comments_table.c.thread_id == thread_id)
        result = await self.session.execute(stmt)
        return [row_to_comment(row._asdict()) for row in result.fetchall()]

    async def insert(self, comment: Comment) -> Comment:
        """Insert a comment; the database assigns the id when missing."""
        comment_dict = comment_to_dict(comment)
        if comment_dict["id"] is None:
            del comment_dict["id"]

        stmt = insert(comments_table).values(**comment_dict).returning(comments_table)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        await self.session.flush()
        return row_to_comment(row._asdict())  # type: ignore[union-attr]

    async def update_state(self, comment_id: CommentId, state: CommentState) -> bool:
        """Set the moderation state unless the row already has it."""
        stmt = (
            update(comments_table)
            .where(
                comments_table.c.id == comment_id,
                comments_table.c.state != state.value,
            )
            .values(state=state.value)
            .returning(comments_table.c.id)
        )
        result = await self.session.execute(stmt)
        if result.scalar_one_or_none() is not None:
            await self.session.flush()
            return True

        exists = await self.session.execute(
            select(comments_table.c.id).where(comments_table.c.id == comment_id)
        )
        if exists.scalar_one_or_none() is None:
            raise NotFoundError("Comment", str(comment_id))
        return False

    async def update_score(self, comment_id: CommentId, delta: int) -> int:
        """Atomically add delta to the score (SQL-level increment)."""
        stmt = (
            update(comments_table)
            .where(comments_table.c.id == comment_id)
            .values(score=comments_table.c.score + delta)
            .returning(comments_table.c.score)
        )
        result = await self.session.execute(stmt)
        score = result.scalar_one_or_none()
        if score is None:
            raise NotFoundError("Comment", str(comment_id))
        await self.session.flush()
        return score
