"""Deterministic comment ordering."""

from collections.abc import Iterable

from commentary.domain.model.comment import Comment
from commentary.domain.value import SortKey


def _tie_break(comment: Comment) -> tuple:
    return (comment.created_at, str(comment.id) if comment.id else "")


def sort_comments(comments: Iterable[Comment], sort_key: SortKey) -> list[Comment]:
    """Sort comments by sort_key with a fixed tie-break.

    Equal keys are ordered by creation time ascending, then id ascending.
    Python's sort is stable (also with reverse=True), so sorting by the
    tie-break first and by the primary key second keeps that order.

    Args:
        comments: Comments to sort
        sort_key: Primary ordering

    Returns:
        New sorted list
    """
    ordered = sorted(comments, key=_tie_break)

    if sort_key == SortKey.DATE_DESC:
        ordered.sort(key=lambda c: c.created_at, reverse=True)
    elif sort_key == SortKey.SCORE_DESC:
        ordered.sort(key=lambda c: c.score, reverse=True)

    return ordered
