"""Mappers for converting between database rows and domain models.

Since we're using Pydantic domain models (immutable), we use manual mapping
instead of SQLAlchemy's classical imperative mapping.
"""

from typing import Any, Dict
from uuid import UUID

from commentary.domain.model import Comment, Thread, Vote
from commentary.domain.value import CommentId, CommentState, ThreadId, VoteId, VoterId


def _uuid(value: Any) -> UUID:
    return UUID(value) if isinstance(value, str) else value


def row_to_thread(row: Dict[str, Any]) -> Thread:
    """Convert database row to Thread domain model.

    Args:
        row: Database row as dict

    Returns:
        Thread domain model
    """
    return Thread(
        id=ThreadId(row["id"]),
        permalink=row.get("permalink"),
        commentable=row["commentable"],
        num_comments=row["num_comments"],
        last_comment_at=row.get("last_comment_at"),
        created_at=row["created_at"],
    )


def thread_to_dict(thread: Thread) -> Dict[str, Any]:
    """Convert Thread domain model to database dict."""
    return thread.model_dump()


def row_to_comment(row: Dict[str, Any]) -> Comment:
    """Convert database row to Comment domain model.

    parent_id and depth are not read back: both derive from ancestors.

    Args:
        row: Database row as dict

    Returns:
        Comment domain model
    """
    return Comment(
        id=CommentId(_uuid(row["id"])),
        thread_id=ThreadId(row["thread_id"]),
        ancestors=tuple(CommentId(_uuid(a)) for a in row.get("ancestors") or ()),
        author=row.get("author"),
        body=row["body"],
        state=CommentState(row["state"]),
        score=row["score"],
        created_at=row["created_at"],
    )


def comment_to_dict(comment: Comment) -> Dict[str, Any]:
    """Convert Comment domain model to database dict.

    Includes the computed parent_id and depth columns.
    """
    data = comment.model_dump()
    data["ancestors"] = list(comment.ancestors)
    data["state"] = comment.state.value
    return data


def row_to_vote(row: Dict[str, Any]) -> Vote:
    """Convert database row to Vote domain model.

    Args:
        row: Database row as dict

    Returns:
        Vote domain model
    """
    return Vote(
        id=VoteId(_uuid(row["id"])),
        comment_id=CommentId(_uuid(row["comment_id"])),
        voter_id=VoterId(row["voter_id"]),
        value=row["value"],
        created_at=row["created_at"],
    )


def vote_to_dict(vote: Vote) -> Dict[str, Any]:
    """Convert Vote domain model to database dict."""
    return vote.model_dump()
