"""Domain layer errors."""

from collections.abc import Sequence

from commentary.domain.value.types import ConstraintViolation


class DomainError(Exception):
    """Base domain error."""

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class ValidationError(DomainError):
    """Raised with every constraint violation found on an entity.

    Violations are collected, never partial: the list holds all of them.
    """

    def __init__(self, violations: Sequence[ConstraintViolation]):
        self.violations = list(violations)
        super().__init__(
            "Validation failed: " + "; ".join(str(v) for v in self.violations)
        )


class DuplicateThreadError(DomainError):
    """Raised when a thread id is already taken."""

    def __init__(self, thread_id: str):
        self.thread_id = thread_id
        super().__init__(f"Duplicate thread id '{thread_id}'")


class CrossThreadParentError(DomainError):
    """Raised when a parent comment belongs to a different thread."""

    def __init__(self, parent_id: str, parent_thread_id: str, thread_id: str):
        self.parent_id = parent_id
        self.parent_thread_id = parent_thread_id
        self.thread_id = thread_id
        super().__init__(
            f"Parent comment {parent_id} belongs to thread '{parent_thread_id}', "
            f"not '{thread_id}'"
        )


class InvalidStateTransitionError(DomainError):
    """Raised when a comment is moved to an unknown state."""

    def __init__(self, comment_id: str, state: object):
        self.comment_id = comment_id
        self.state = state
        super().__init__(f"Invalid state {state!r} for comment {comment_id}")


class ThreadNotCommentableError(DomainError):
    """Raised when commenting on a closed thread."""

    def __init__(self, thread_id: str):
        self.thread_id = thread_id
        super().__init__(f"Thread '{thread_id}' is not commentable")


class VoteError(DomainError):
    """Raised for unsupported vote values or rejected duplicate votes."""

    pass


class StoreError(DomainError):
    """Raised by a store adapter when a write cannot be completed."""

    pass


class DuplicateVoteError(StoreError):
    """Raised by a vote store when (comment, voter) already has a vote."""

    def __init__(self, comment_id: str, voter_id: str):
        self.comment_id = comment_id
        self.voter_id = voter_id
        super().__init__(f"Voter {voter_id} already voted on comment {comment_id}")
