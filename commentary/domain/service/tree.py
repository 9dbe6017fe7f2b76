"""Tree assembler: shapes a thread's flat comment list into a view.

Comments carry their full ancestry, so one bulk read is enough to rebuild
the forest; no per-node lookups are made.
"""

from collections import defaultdict
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass, field
from typing import Optional

import logfire

from commentary.domain.model.comment import Comment
from commentary.domain.value import CommentId, SortKey, ViewMode

from .sorting import sort_comments


@dataclass
class CommentNode:
    """Node of a comment view.

    Both view modes share this shape; FLAT nodes never have children.
    A node cut at the depth limit has no children and reports how many
    descendants were hidden, so a renderer can offer "load more".
    """

    comment: Comment
    children: list["CommentNode"] = field(default_factory=list)
    hidden_count: int = 0

    @property
    def truncated(self) -> bool:
        return self.hidden_count > 0


def build_view(
    comments: Sequence[Comment],
    mode: ViewMode,
    sort_key: SortKey,
    max_depth: Optional[int] = None,
    present: Optional[Callable[[Comment], Comment]] = None,
) -> list[CommentNode]:
    """Build a FLAT or TREE view from a thread's comments.

    Args:
        comments: All comments of one thread, in any order
        mode: FLAT or TREE
        sort_key: Ordering of the flat list or of each sibling list
        max_depth: Deepest level to include (None for unbounded)
        present: Optional transform applied to each comment placed in the
            view (used to redact deleted comments)

    Returns:
        Ordered list of nodes (roots for TREE)

    Raises:
        ValueError: If max_depth is negative
    """
    if max_depth is not None and max_depth < 0:
        raise ValueError("max_depth must be >= 0")

    show = present or (lambda c: c)

    if mode == ViewMode.FLAT:
        return build_flat(comments, sort_key, max_depth, show)
    return build_tree(comments, sort_key, max_depth, show)


def build_flat(
    comments: Iterable[Comment],
    sort_key: SortKey,
    max_depth: Optional[int],
    show: Callable[[Comment], Comment],
) -> list[CommentNode]:
    """Depth-filtered, globally sorted list of childless nodes."""
    selected = [c for c in comments if max_depth is None or c.depth <= max_depth]
    return [CommentNode(comment=show(c)) for c in sort_comments(selected, sort_key)]


def build_tree(
    comments: Sequence[Comment],
    sort_key: SortKey,
    max_depth: Optional[int],
    show: Callable[[Comment], Comment],
) -> list[CommentNode]:
    """Rebuild the comment forest and cut it at max_depth.

    Levels are positional: the root list is level 0. A comment whose parent
    is missing from the input is promoted to a root and logged, never
    dropped. Traversal is iterative, so thread depth is not limited by the
    interpreter's recursion limit.
    """
    by_id: dict[CommentId, Comment] = {c.id: c for c in comments if c.id is not None}
    children: dict[Optional[CommentId], list[Comment]] = defaultdict(list)

    for comment in by_id.values():
        parent_id = comment.parent_id
        if parent_id is not None and parent_id not in by_id:
            logfire.warn(
                "Orphaned comment promoted to root",
                comment_id=str(comment.id),
                thread_id=comment.thread_id,
                missing_parent_id=str(parent_id),
            )
            parent_id = None
        children[parent_id].append(comment)

    roots: list[CommentNode] = []
    visited: set[CommentId] = set()

    def walk(start: list[Comment]) -> None:
        stack: list[tuple[Comment, int, list[CommentNode]]] = [
            (c, 0, roots) for c in reversed(sort_comments(start, sort_key))
        ]
        while stack:
            comment, level, siblings = stack.pop()
            if comment.id in visited:
                continue
            visited.add(comment.id)  # type: ignore[arg-type]

            node = CommentNode(comment=show(comment))
            siblings.append(node)

            kids = children.get(comment.id, [])
            if max_depth is not None and level >= max_depth:
                node.hidden_count = _count_descendants(comment.id, children, visited)
                continue
            for kid in reversed(sort_comments(kids, sort_key)):
                stack.append((kid, level + 1, node.children))

    walk(children.get(None, []))

    # Corrupt ancestry loops (A under B, B under A) have no root; surface them
    unreachable = [c for c in by_id.values() if c.id not in visited]
    if unreachable:
        logfire.warn(
            "Comments unreachable from any root promoted to root",
            thread_id=unreachable[0].thread_id,
            count=len(unreachable),
        )
        walk(unreachable)

    return roots


def _count_descendants(
    comment_id: Optional[CommentId],
    children: dict[Optional[CommentId], list[Comment]],
    visited: set[CommentId],
) -> int:
    """Count and mark every descendant hidden below a cut node."""
    count = 0
    stack = list(children.get(comment_id, []))
    while stack:
        comment = stack.pop()
        if comment.id in visited:
            continue
        visited.add(comment.id)  # type: ignore[arg-type]
        count += 1
        stack.extend(children.get(comment.id, []))
    return count
