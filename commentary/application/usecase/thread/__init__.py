"""Thread use cases."""

from .create_thread import CreateThreadRequest, CreateThreadUseCase
from .get_thread import GetThreadRequest, GetThreadUseCase, ThreadResponse
from .get_threads import GetThreadsRequest, GetThreadsResponse, GetThreadsUseCase
from .set_commentable import SetThreadCommentableRequest, SetThreadCommentableUseCase

__all__ = [
    "CreateThreadRequest",
    "CreateThreadUseCase",
    "GetThreadRequest",
    "GetThreadUseCase",
    "GetThreadsRequest",
    "GetThreadsResponse",
    "GetThreadsUseCase",
    "SetThreadCommentableRequest",
    "SetThreadCommentableUseCase",
    "ThreadResponse",
]
