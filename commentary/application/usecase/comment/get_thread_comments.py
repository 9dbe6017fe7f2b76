"""Get thread comments use case."""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from commentary.application.usecase.base import BaseUseCase
from commentary.application.usecase.thread import ThreadResponse
from commentary.config import CommentSettings
from commentary.domain.model import Comment
from commentary.domain.service import CommentNode, CommentService, ThreadService
from commentary.domain.value import SortKey, ThreadId, ViewMode


class CommentItem(BaseModel):
    """Comment as shown to readers (deleted comments arrive redacted)."""

    comment_id: str
    thread_id: str
    parent_id: str | None
    depth: int
    author: str | None
    body: str
    state: str
    score: int
    created_at: datetime

    @classmethod
    def from_domain(cls, comment: Comment) -> "CommentItem":
        return cls(
            comment_id=str(comment.id),
            thread_id=comment.thread_id,
            parent_id=str(comment.parent_id) if comment.parent_id else None,
            depth=comment.depth,
            author=comment.author,
            body=comment.body,
            state=comment.state.value,
            score=comment.score,
            created_at=comment.created_at,
        )


class CommentNodeResponse(BaseModel):
    """A comment with its replies; hidden_count > 0 marks a depth cut."""

    comment: CommentItem
    children: list["CommentNodeResponse"] = Field(default_factory=list)
    hidden_count: int = 0

    @classmethod
    def from_domain(cls, node: CommentNode) -> "CommentNodeResponse":
        root = cls(
            comment=CommentItem.from_domain(node.comment),
            hidden_count=node.hidden_count,
        )
        stack = [(node, root)]
        while stack:
            source, target = stack.pop()
            for child in source.children:
                converted = cls(
                    comment=CommentItem.from_domain(child.comment),
                    hidden_count=child.hidden_count,
                )
                target.children.append(converted)
                stack.append((child, converted))
        return root


class GetThreadCommentsRequest(BaseModel):
    """Get thread comments request.

    Unset view, sort and max_depth fall back to the configured defaults.
    """

    thread_id: str
    permalink: str | None = None  # Percent-encoded, used if the thread is new
    view: Optional[ViewMode] = None
    sort: Optional[SortKey] = None
    max_depth: Optional[int] = Field(default=None, ge=0)


class GetThreadCommentsResponse(BaseModel):
    """Get thread comments response."""

    thread: ThreadResponse
    view: ViewMode
    sort: SortKey
    comments: list[CommentNodeResponse]
    total: int


class GetThreadCommentsUseCase(
    BaseUseCase[GetThreadCommentsRequest, GetThreadCommentsResponse]
):
    """Use case for listing a thread's comments, creating the thread on first use."""

    def __init__(
        self,
        thread_service: ThreadService,
        comment_service: CommentService,
        comment_settings: CommentSettings,
    ) -> None:
        """Initialize get thread comments use case.

        Args:
            thread_service: Thread domain service
            comment_service: Comment domain service
            comment_settings: Listing defaults
        """
        self.thread_service = thread_service
        self.comment_service = comment_service
        self.comment_settings = comment_settings

    async def execute(
        self, request: GetThreadCommentsRequest
    ) -> GetThreadCommentsResponse:
        """Execute get thread comments flow.

        Steps:
        1. Ensure the thread exists (created from the permalink if new)
        2. Build the requested view from one bulk read

        Raises:
            ValidationError: If the thread is new and invalid
        """
        thread = await self.thread_service.ensure_thread(
            ThreadId(request.thread_id), request.permalink
        )

        view = request.view or self.comment_settings.default_view
        sort = request.sort or self.comment_settings.default_sort
        max_depth = (
            request.max_depth
            if request.max_depth is not None
            else self.comment_settings.default_display_depth
        )

        nodes = await self.comment_service.find_comments_view(
            thread, mode=view, sort_key=sort, max_depth=max_depth
        )

        return GetThreadCommentsResponse(
            thread=ThreadResponse.from_domain(thread),
            view=view,
            sort=sort,
            comments=[CommentNodeResponse.from_domain(node) for node in nodes],
            total=thread.num_comments,
        )
