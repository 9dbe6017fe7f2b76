"""Domain value objects for the comment core.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

from enum import Enum
from urllib.parse import urlsplit

from pydantic import field_validator

from commentary.domain.value.common import RootValueObject, ValueObject


class CommentState(str, Enum):
    """Moderation state of a comment.

    Deletion is a state, not a row removal, so replies to a deleted
    comment keep a valid ancestry.
    """

    VISIBLE = "visible"
    DELETED = "deleted"


class ViewMode(str, Enum):
    """Shape of a comment listing."""

    FLAT = "flat"  # Depth-filtered sorted list of childless nodes
    TREE = "tree"  # Nested forest rebuilt from ancestry


class SortKey(str, Enum):
    """Sibling ordering for comment views.

    Ties are always broken by creation time ascending, then identifier
    ascending, so pagination is reproducible across calls.
    """

    DATE_ASC = "date_asc"
    DATE_DESC = "date_desc"
    SCORE_DESC = "score_desc"


class DuplicateVotePolicy(str, Enum):
    """What a vote store does when a voter votes twice on one comment."""

    REJECT = "reject"  # Second vote fails with VoteError
    REPLACE = "replace"  # Second vote replaces the first


class ValidationRuleset(str, Enum):
    """Named validation groups understood by the Validator."""

    NEW_THREAD = "new_thread"


# Supported vote magnitudes; retraction (0) is not supported
UPVOTE = 1
DOWNVOTE = -1
VOTE_VALUES = frozenset({UPVOTE, DOWNVOTE})


class ConstraintViolation(ValueObject):
    """A single validation failure on an entity property."""

    property_path: str
    message: str
    invalid_value: str | None = None

    def __str__(self) -> str:
        return f"{self.property_path}: {self.message}"


class Permalink(RootValueObject[str]):
    """Decoded locator of the page a thread belongs to.

    Must be an absolute http(s) URL, at most 2048 characters.
    Examples: 'https://example.org/articles/42', 'http://x'
    """

    @field_validator("root")
    @classmethod
    def validate_permalink(cls, v: str) -> str:
        """Validate permalink is an absolute http(s) URL."""
        if not v or not v.strip():
            raise ValueError("Permalink must not be blank")
        if len(v) > 2048:
            raise ValueError("Permalink must be at most 2048 characters")
        parts = urlsplit(v)
        if parts.scheme not in ("http", "https") or not parts.netloc:
            raise ValueError("Permalink must be an absolute http(s) URL")
        return v
