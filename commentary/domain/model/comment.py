"""Comment entity.

Comments form a tree inside a thread with unlimited depth. Each comment
carries its materialized path (ancestors, root first) so a whole thread can be
rebuilt from one bulk read.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field, computed_field, model_validator

from commentary.domain.model.common import DomainModel
from commentary.domain.value import CommentId, CommentState, ThreadId


class Comment(DomainModel):
    """Comment entity.

    Threading is managed through:
    - ancestors: Ids from the root comment down to the direct parent
    - parent_id: Last ancestor (None for top-level)
    - depth: Number of ancestors (0 for top-level)

    thread_id and ancestors never change after creation. Only state
    (moderation) and score (votes) are updated.
    """

    id: Optional[CommentId] = None  # Assigned by the store on insert
    thread_id: ThreadId
    ancestors: tuple[CommentId, ...] = ()
    author: Optional[str] = Field(default=None, max_length=255)
    body: str = Field(default="", max_length=10000)
    state: CommentState = CommentState.VISIBLE
    score: int = 0
    created_at: datetime = Field(default_factory=datetime.now)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def parent_id(self) -> Optional[CommentId]:
        """Direct parent id, or None for a top-level comment."""
        return self.ancestors[-1] if self.ancestors else None

    @computed_field  # type: ignore[prop-decorator]
    @property
    def depth(self) -> int:
        """Nesting level; always len(ancestors)."""
        return len(self.ancestors)

    @property
    def is_deleted(self) -> bool:
        """Whether moderation has hidden this comment."""
        return self.state == CommentState.DELETED

    @model_validator(mode="after")
    def validate_ancestry(self) -> "Comment":
        """An ancestry path is acyclic: no repeats, never the comment itself."""
        if len(set(self.ancestors)) != len(self.ancestors):
            raise ValueError("Ancestors must not repeat")
        if self.id is not None and self.id in self.ancestors:
            raise ValueError("A comment cannot be its own ancestor")
        return self
