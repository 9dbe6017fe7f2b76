"""Moderation domain service.

Comments move between VISIBLE and DELETED in both directions. Deletion
never removes the comment or touches ancestry, so replies stay attached.
"""

import logfire

from commentary.domain.error import InvalidStateTransitionError
from commentary.domain.model.comment import Comment
from commentary.domain.repository import CommentRepository, ThreadRepository
from commentary.domain.value import CommentState


def parse_state(comment: Comment, state: object) -> CommentState:
    """Coerce a raw state value into a CommentState.

    Raises:
        InvalidStateTransitionError: If state is not a known CommentState
    """
    if isinstance(state, CommentState):
        return state
    try:
        return CommentState(state)
    except ValueError:
        raise InvalidStateTransitionError(str(comment.id), state) from None


def is_displayable(comment: Comment) -> bool:
    """Whether a comment's content may be shown."""
    return not comment.is_deleted


def redact(comment: Comment) -> Comment:
    """Hide the content of a deleted comment, keeping its place in the tree."""
    if is_displayable(comment):
        return comment
    return comment.model_copy(update={"body": "", "author": None})


class ModerationService:
    """Domain service for comment state transitions."""

    def __init__(
        self,
        comment_repository: CommentRepository,
        thread_repository: ThreadRepository,
    ) -> None:
        """Initialize moderation service.

        Args:
            comment_repository: Comment repository
            thread_repository: Thread repository (comment count bookkeeping)
        """
        self.comment_repository = comment_repository
        self.thread_repository = thread_repository

    async def set_state(self, comment: Comment, new_state: object) -> Comment:
        """Move a comment to a new moderation state.

        Deleting decrements the thread's comment count, reinstating
        increments it again. The count moves only when the stored state
        actually changes, so a stale or repeated request is a no-op.

        Args:
            comment: Saved comment
            new_state: CommentState or its raw value

        Returns:
            Comment with the new state

        Raises:
            InvalidStateTransitionError: If new_state is not a known state
        """
        with logfire.span(
            "moderation_service.set_state",
            comment_id=str(comment.id),
            from_state=comment.state.value,
            to_state=str(new_state),
        ):
            try:
                state = parse_state(comment, new_state)
            except InvalidStateTransitionError:
                logfire.warn(
                    "Invalid comment state requested",
                    comment_id=str(comment.id),
                    state=str(new_state),
                )
                raise

            changed = await self.comment_repository.update_state(comment.id, state)  # type: ignore[arg-type]
            if not changed:
                logfire.info(
                    "Comment already in requested state",
                    comment_id=str(comment.id),
                    state=state.value,
                )
                return comment.model_copy(update={"state": state})

            delta = -1 if state == CommentState.DELETED else 1
            await self.thread_repository.increment_comment_count(
                comment.thread_id, delta
            )

            logfire.info(
                "Comment state changed",
                comment_id=str(comment.id),
                thread_id=comment.thread_id,
                state=state.value,
            )
            return comment.model_copy(update={"state": state})
