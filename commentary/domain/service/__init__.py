"""Domain services."""

from .ancestry import derive_ancestry
from .comment_service import CommentService
from .identity import IdentityResolver
from .moderation_service import ModerationService, is_displayable, redact
from .sorting import sort_comments
from .thread_service import ThreadService
from .tree import CommentNode, build_view
from .validation import PydanticThreadValidator, Validator
from .vote_service import VoteService

__all__ = [
    "CommentNode",
    "CommentService",
    "IdentityResolver",
    "ModerationService",
    "PydanticThreadValidator",
    "ThreadService",
    "Validator",
    "VoteService",
    "build_view",
    "derive_ancestry",
    "is_displayable",
    "redact",
    "sort_comments",
]
