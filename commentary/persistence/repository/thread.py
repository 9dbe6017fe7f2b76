"""PostgreSQL implementation of Thread repository."""

from collections.abc import Sequence
from datetime import datetime
from typing import List, Optional

from sqlalchemy import func, insert, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from commentary.domain.error import DuplicateThreadError, NotFoundError
from commentary.domain.model import Thread
from commentary.domain.repository import ThreadRepository
from commentary.domain.value import ThreadId
from commentary.persistence.mappers import row_to_thread, thread_to_dict
from commentary.persistence.tables import threads_table


class PostgresThreadRepository(ThreadRepository):
    """PostgreSQL implementation of ThreadRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, thread_id: ThreadId) -> Optional[Thread]:
        """Find a thread by ID."""
        stmt = select(threads_table).where(threads_table.c.id == thread_id)
        result = await self.session.execute(stmt)
        row = result.fetchone()
        return row_to_thread(row._asdict()) if row else None

    async def find_by_ids(self, thread_ids: Sequence[ThreadId]) -> List[Thread]:
        """Find threads by IDs (batch query)."""
        if not thread_ids:
            return []

        stmt = select(threads_table).where(threads_table.c.id.in_(thread_ids))
        result = await self.session.execute(stmt)
        return [row_to_thread(row._asdict()) for row in result.fetchall()]

    async def save(self, thread: Thread) -> Thread:
        """Insert a thread; the primary key makes check-and-insert atomic."""
        if thread.id is None:
            raise ValueError("Thread id must be assigned before saving")

        stmt = insert(threads_table).values(**thread_to_dict(thread))
        try:
            # Savepoint keeps the request transaction usable after a conflict
            async with self.session.begin_nested():
                await self.session.execute(stmt)
        except IntegrityError:
            raise DuplicateThreadError(thread.id) from None

        return thread

    async def update(self, thread: Thread) -> Thread:
        """Update the mutable fields of a thread."""
        stmt = (
            update(threads_table)
            .where(threads_table.c.id == thread.id)
            .values(
                permalink=thread.permalink,
                commentable=thread.commentable,
            )
            .returning(threads_table)
        )
        result = await self.session.execute(stmt)
        row = result.fetchone()
        if row is None:
            raise NotFoundError("Thread", str(thread.id))

        await self.session.flush()
        return row_to_thread(row._asdict())

    async def increment_comment_count(
        self,
        thread_id: ThreadId,
        delta: int,
        last_comment_at: Optional[datetime] = None,
    ) -> None:
        """Atomically add delta to the comment count (minimum 0)."""
        values: dict = {
            "num_comments": func.greatest(threads_table.c.num_comments + delta, 0)
        }
        if last_comment_at is not None:
            values["last_comment_at"] = last_comment_at

        stmt = update(threads_table).where(threads_table.c.id == thread_id).values(**values)
        await self.session.execute(stmt)
        await self.session.flush()
