"""Thread aggregate root.

A thread anchors the comment tree of one page. Its identifier is chosen by
the caller and never changes once the thread is saved.
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from commentary.domain.model.common import DomainModel
from commentary.domain.value import ThreadId


class Thread(DomainModel):
    """Thread aggregate root.

    Business rules:
    - id is unique; a second save of the same id is a DuplicateThreadError
    - permalink is stored decoded
    - num_comments only moves with comment creation and deletion bookkeeping
    """

    id: Optional[ThreadId] = None  # None until the caller assigns one
    permalink: Optional[str] = None
    commentable: bool = True
    num_comments: int = Field(default=0, ge=0)
    last_comment_at: Optional[datetime] = None
    created_at: datetime = Field(default_factory=datetime.now)
