"""Vote entity.

A signed vote (+1 or -1) cast by one voter on one comment.
"""

from datetime import datetime

from pydantic import Field, field_validator

from commentary.domain.model.common import DomainModel
from commentary.domain.value import VOTE_VALUES, CommentId, VoteId, VoterId


class Vote(DomainModel):
    """Vote entity.

    Business rules:
    - One vote per voter per comment (store policy decides reject vs replace)
    - Value is +1 or -1; retraction is not supported
    """

    id: VoteId
    comment_id: CommentId
    voter_id: VoterId
    value: int
    created_at: datetime = Field(default_factory=datetime.now)

    @field_validator("value", mode="before")
    @classmethod
    def validate_value(cls, v: object) -> object:
        """Only +1 and -1 are supported (booleans are not votes)."""
        if isinstance(v, bool) or v not in VOTE_VALUES:
            raise ValueError("Vote value must be +1 or -1")
        return v
