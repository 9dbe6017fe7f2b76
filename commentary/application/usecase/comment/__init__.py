"""Comment use cases."""

from .create_comment import CreateCommentRequest, CreateCommentUseCase
from .get_thread_comment import (
    GetThreadCommentRequest,
    GetThreadCommentResponse,
    GetThreadCommentUseCase,
)
from .get_thread_comments import (
    CommentItem,
    CommentNodeResponse,
    GetThreadCommentsRequest,
    GetThreadCommentsResponse,
    GetThreadCommentsUseCase,
)
from .set_comment_state import SetCommentStateRequest, SetCommentStateUseCase

__all__ = [
    "CommentItem",
    "CommentNodeResponse",
    "CreateCommentRequest",
    "CreateCommentUseCase",
    "GetThreadCommentRequest",
    "GetThreadCommentResponse",
    "GetThreadCommentUseCase",
    "GetThreadCommentsRequest",
    "GetThreadCommentsResponse",
    "GetThreadCommentsUseCase",
    "SetCommentStateRequest",
    "SetCommentStateUseCase",
]
