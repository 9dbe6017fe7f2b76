"""Thread domain service."""

from collections.abc import Sequence
from datetime import datetime
from urllib.parse import unquote

import logfire

from commentary.domain.error import (
    DuplicateThreadError,
    NotFoundError,
    ValidationError,
)
from commentary.domain.model.thread import Thread
from commentary.domain.repository import ThreadRepository
from commentary.domain.value import ConstraintViolation, ThreadId, ValidationRuleset

from .validation import Validator


class ThreadService:
    """Domain service for thread lifecycle operations."""

    def __init__(
        self, thread_repository: ThreadRepository, validator: Validator
    ) -> None:
        """Initialize thread service.

        Args:
            thread_repository: Thread repository
            validator: Validator for new threads
        """
        self.thread_repository = thread_repository
        self.validator = validator

    def create_thread(self) -> Thread:
        """Create an unsaved, commentable thread.

        The caller must assign an id before saving it.
        """
        return Thread(id=None, commentable=True, created_at=datetime.now())

    async def save_thread(self, thread: Thread) -> Thread:
        """Validate and insert a new thread.

        Args:
            thread: Thread with id and permalink assigned

        Returns:
            Saved thread

        Raises:
            ValidationError: With every violation if the thread is invalid
            DuplicateThreadError: If the id is already taken
        """
        with logfire.span(
            "thread_service.save_thread",
            thread_id=thread.id,
            permalink=thread.permalink,
        ):
            violations = self.validator.validate(thread, ValidationRuleset.NEW_THREAD)
            if violations:
                logfire.warn(
                    "Thread validation failed",
                    thread_id=thread.id,
                    violations=[str(v) for v in violations],
                )
                raise ValidationError(violations)

            try:
                saved = await self.thread_repository.save(thread)
            except DuplicateThreadError:
                logfire.warn("Duplicate thread id", thread_id=thread.id)
                raise

            logfire.info("Thread created", thread_id=saved.id)
            return saved

    async def ensure_thread(self, thread_id: ThreadId, permalink_raw: str | None) -> Thread:
        """Return the thread with this id, creating it on first use.

        An existing thread is returned unchanged. A new one is commentable
        and stores the permalink decoded exactly once (the caller sends it
        percent-encoded).

        Args:
            thread_id: Caller-chosen thread id
            permalink_raw: Percent-encoded permalink of the page

        Returns:
            Existing or newly created thread

        Raises:
            ValidationError: If the new thread is invalid (nothing is saved)
            DuplicateThreadError: If a concurrent call created the same id
                between the lookup and the insert
        """
        with logfire.span("thread_service.ensure_thread", thread_id=thread_id):
            existing = await self.thread_repository.find_by_id(thread_id)
            if existing is not None:
                logfire.info("Thread found", thread_id=thread_id)
                return existing

            thread = self.create_thread().model_copy(
                update={
                    "id": thread_id,
                    "permalink": unquote(permalink_raw) if permalink_raw else None,
                }
            )
            return await self.save_thread(thread)

    async def get_thread(self, thread_id: ThreadId) -> Thread:
        """Get a thread by ID.

        Raises:
            NotFoundError: If no thread has this id
        """
        with logfire.span("thread_service.get_thread", thread_id=thread_id):
            thread = await self.thread_repository.find_by_id(thread_id)
            if thread is None:
                logfire.warn("Thread not found", thread_id=thread_id)
                raise NotFoundError("Thread", thread_id)
            return thread

    async def get_threads(self, thread_ids: Sequence[ThreadId]) -> list[Thread]:
        """Get the threads with the given ids (unknown ids are skipped).

        Raises:
            ValidationError: If no ids are given
        """
        with logfire.span("thread_service.get_threads", count=len(thread_ids)):
            if not thread_ids:
                raise ValidationError(
                    [
                        ConstraintViolation(
                            property_path="ids",
                            message="Cannot query threads without ids",
                        )
                    ]
                )
            threads = await self.thread_repository.find_by_ids(thread_ids)
            logfire.info(
                "Threads retrieved", requested=len(thread_ids), found=len(threads)
            )
            return threads

    async def set_commentable(self, thread: Thread, commentable: bool) -> Thread:
        """Open or close a thread for new comments.

        Args:
            thread: Saved thread
            commentable: True to open, False to close

        Returns:
            Updated thread
        """
        with logfire.span(
            "thread_service.set_commentable",
            thread_id=thread.id,
            commentable=commentable,
        ):
            if thread.commentable == commentable:
                return thread

            updated = await self.thread_repository.update(
                thread.model_copy(update={"commentable": commentable})
            )
            logfire.info(
                "Thread commentable state changed",
                thread_id=thread.id,
                commentable=commentable,
            )
            return updated
