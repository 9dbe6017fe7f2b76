"""Comment domain service."""

from datetime import datetime
from typing import Optional

import logfire

from commentary.domain.error import (
    CrossThreadParentError,
    NotFoundError,
    ThreadNotCommentableError,
)
from commentary.domain.model.comment import Comment
from commentary.domain.model.thread import Thread
from commentary.domain.repository import CommentRepository, ThreadRepository
from commentary.domain.value import CommentId, SortKey, ViewMode

from .ancestry import derive_ancestry
from .moderation_service import redact
from .tree import CommentNode, build_view


class CommentService:
    """Domain service for comment operations."""

    def __init__(
        self,
        comment_repository: CommentRepository,
        thread_repository: ThreadRepository,
    ) -> None:
        """Initialize comment service.

        Args:
            comment_repository: Comment repository
            thread_repository: Thread repository
        """
        self.comment_repository = comment_repository
        self.thread_repository = thread_repository

    def create_comment(
        self,
        thread: Thread,
        parent: Optional[Comment] = None,
        author: Optional[str] = None,
        body: str = "",
    ) -> Comment:
        """Create an unsaved comment in a thread, optionally as a reply.

        Ancestry and depth are fully computed here, before any write.

        Args:
            thread: Thread to post in
            parent: Comment being replied to (None for top-level)
            author: Opaque author metadata
            body: Comment text

        Returns:
            Unsaved comment (id is None)

        Raises:
            CrossThreadParentError: If parent belongs to another thread
        """
        try:
            ancestors, _depth = derive_ancestry(thread.id, parent)  # type: ignore[arg-type]
        except CrossThreadParentError:
            logfire.error(
                "Parent comment does not belong to thread",
                parent_id=str(parent.id) if parent else None,
                parent_thread_id=parent.thread_id if parent else None,
                thread_id=thread.id,
            )
            raise

        return Comment(
            id=None,
            thread_id=thread.id,
            ancestors=ancestors,
            author=author,
            body=body,
            score=0,
            created_at=datetime.now(),
        )

    async def save_comment(self, comment: Comment) -> Comment:
        """Insert a new comment and update its thread's counters.

        Args:
            comment: Unsaved comment from create_comment

        Returns:
            Saved comment with its id set

        Raises:
            NotFoundError: If the thread does not exist
            ThreadNotCommentableError: If the thread is closed
            StoreError: If the store cannot insert the comment
        """
        with logfire.span(
            "comment_service.save_comment",
            thread_id=comment.thread_id,
            parent_id=str(comment.parent_id) if comment.parent_id else None,
            depth=comment.depth,
        ):
            if comment.id is not None:
                raise ValueError("Comment is already saved")

            thread = await self.thread_repository.find_by_id(comment.thread_id)
            if thread is None:
                logfire.warn("Comment on non-existent thread", thread_id=comment.thread_id)
                raise NotFoundError("Thread", comment.thread_id)
            if not thread.commentable:
                logfire.warn("Comment on closed thread", thread_id=comment.thread_id)
                raise ThreadNotCommentableError(comment.thread_id)

            saved = await self.comment_repository.insert(comment)
            await self.thread_repository.increment_comment_count(
                comment.thread_id, 1, last_comment_at=saved.created_at
            )

            logfire.info(
                "Comment created",
                comment_id=str(saved.id),
                thread_id=saved.thread_id,
                depth=saved.depth,
            )
            return saved

    async def get_comment(self, thread: Thread, comment_id: CommentId) -> Comment:
        """Get a comment of a thread.

        Raises:
            NotFoundError: If the comment does not exist in this thread
        """
        with logfire.span(
            "comment_service.get_comment",
            thread_id=thread.id,
            comment_id=str(comment_id),
        ):
            comment = await self.comment_repository.find_by_id(comment_id)
            if comment is None or comment.thread_id != thread.id:
                logfire.warn(
                    "Comment not found in thread",
                    thread_id=thread.id,
                    comment_id=str(comment_id),
                )
                raise NotFoundError(
                    "Comment", f"{comment_id} (thread '{thread.id}')"
                )
            return comment

    async def get_valid_parent(
        self, thread: Thread, parent_id: Optional[CommentId]
    ) -> Optional[Comment]:
        """Resolve a reply target, checking it belongs to the thread.

        Args:
            thread: Thread being posted in
            parent_id: Requested parent (None for top-level)

        Returns:
            Parent comment, or None when parent_id is None

        Raises:
            NotFoundError: If the parent does not exist
            CrossThreadParentError: If the parent belongs to another thread
        """
        if parent_id is None:
            return None

        parent = await self.comment_repository.find_by_id(parent_id)
        if parent is None:
            logfire.warn("Parent comment not found", parent_id=str(parent_id))
            raise NotFoundError("Parent comment", str(parent_id))
        if parent.thread_id != thread.id:
            logfire.error(
                "Parent comment does not belong to thread",
                parent_id=str(parent_id),
                parent_thread_id=parent.thread_id,
                thread_id=thread.id,
            )
            raise CrossThreadParentError(str(parent_id), parent.thread_id, thread.id)  # type: ignore[arg-type]
        return parent

    async def find_comments_view(
        self,
        thread: Thread,
        mode: ViewMode = ViewMode.TREE,
        sort_key: SortKey = SortKey.DATE_DESC,
        max_depth: Optional[int] = None,
    ) -> list[CommentNode]:
        """Get a thread's comments as a FLAT list or a TREE.

        Deleted comments keep their node (so replies stay reachable) but
        their content is redacted.

        Args:
            thread: Thread to list
            mode: View shape
            sort_key: Ordering
            max_depth: Deepest level to include (None for unbounded)

        Returns:
            Ordered list of comment nodes
        """
        with logfire.span(
            "comment_service.find_comments_view",
            thread_id=thread.id,
            mode=mode.value,
            sort_key=sort_key.value,
            max_depth=max_depth,
        ):
            comments = await self.comment_repository.find_all_by_thread(thread.id)  # type: ignore[arg-type]
            view = build_view(comments, mode, sort_key, max_depth, present=redact)
            logfire.info(
                "Comments view built",
                thread_id=thread.id,
                count=len(comments),
                top_level=len(view),
            )
            return view
