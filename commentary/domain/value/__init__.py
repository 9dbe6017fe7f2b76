"""Domain value objects for the comment core."""

from commentary.domain.value.identifiers import CommentId, ThreadId, VoteId, VoterId
from commentary.domain.value.types import (
    DOWNVOTE,
    UPVOTE,
    VOTE_VALUES,
    CommentState,
    ConstraintViolation,
    DuplicateVotePolicy,
    Permalink,
    SortKey,
    ValidationRuleset,
    ViewMode,
)

__all__ = [
    # Identifiers
    "ThreadId",
    "CommentId",
    "VoteId",
    "VoterId",
    # Types
    "CommentState",
    "ViewMode",
    "SortKey",
    "DuplicateVotePolicy",
    "ValidationRuleset",
    "ConstraintViolation",
    "Permalink",
    "UPVOTE",
    "DOWNVOTE",
    "VOTE_VALUES",
]
