"""Unit tests for ModerationService."""

import asyncio

import pytest

from commentary.domain.error import InvalidStateTransitionError
from commentary.domain.repository import CommentRepository, ThreadRepository
from commentary.domain.service import (
    CommentService,
    ModerationService,
    is_displayable,
    redact,
)
from commentary.domain.value import CommentState
from tests.conftest import make_comment, make_thread
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no database needed
unit_env = create_env_fixture()


async def _setup(unit_env):
    comment_service = await unit_env.get(CommentService)
    thread_repo = await unit_env.get(ThreadRepository)
    thread = await thread_repo.save(make_thread())
    root = await comment_service.save_comment(
        comment_service.create_comment(thread, body="root")
    )
    reply = await comment_service.save_comment(
        comment_service.create_comment(thread, parent=root, body="reply")
    )
    return thread, root, reply


class TestSetState:
    """Tests for set_state method."""

    @pytest.mark.asyncio
    async def test_delete_keeps_comment_and_decrements_count(self, unit_env):
        # Arrange
        moderation_service = await unit_env.get(ModerationService)
        comment_repo = await unit_env.get(CommentRepository)
        thread_repo = await unit_env.get(ThreadRepository)
        thread, root, reply = await _setup(unit_env)

        # Act
        deleted = await moderation_service.set_state(root, CommentState.DELETED)

        # Assert
        assert deleted.state == CommentState.DELETED
        stored = await comment_repo.find_by_id(root.id)
        assert stored.state == CommentState.DELETED
        assert stored.body == "root"
        assert (await thread_repo.find_by_id(thread.id)).num_comments == 1

        # Replies keep their ancestry
        stored_reply = await comment_repo.find_by_id(reply.id)
        assert stored_reply.ancestors == (root.id,)

    @pytest.mark.asyncio
    async def test_restore_reverses_delete(self, unit_env):
        moderation_service = await unit_env.get(ModerationService)
        thread_repo = await unit_env.get(ThreadRepository)
        thread, root, _ = await _setup(unit_env)

        deleted = await moderation_service.set_state(root, "deleted")
        restored = await moderation_service.set_state(deleted, "visible")

        assert restored.state == CommentState.VISIBLE
        assert (await thread_repo.find_by_id(thread.id)).num_comments == 2

    @pytest.mark.asyncio
    async def test_same_state_is_a_no_op(self, unit_env):
        moderation_service = await unit_env.get(ModerationService)
        thread_repo = await unit_env.get(ThreadRepository)
        thread, root, _ = await _setup(unit_env)

        result = await moderation_service.set_state(root, CommentState.VISIBLE)

        assert result == root
        assert (await thread_repo.find_by_id(thread.id)).num_comments == 2

    @pytest.mark.asyncio
    async def test_stale_copy_deleted_twice_counts_once(self, unit_env):
        moderation_service = await unit_env.get(ModerationService)
        thread_repo = await unit_env.get(ThreadRepository)
        thread, root, _ = await _setup(unit_env)

        # Both requests loaded the comment while it was still visible
        first, second = await asyncio.gather(
            moderation_service.set_state(root, CommentState.DELETED),
            moderation_service.set_state(root, CommentState.DELETED),
        )

        assert first.state == second.state == CommentState.DELETED
        assert (await thread_repo.find_by_id(thread.id)).num_comments == 1

    @pytest.mark.asyncio
    async def test_stale_copy_restored_after_restore_counts_once(self, unit_env):
        moderation_service = await unit_env.get(ModerationService)
        thread_repo = await unit_env.get(ThreadRepository)
        thread, root, _ = await _setup(unit_env)
        deleted = await moderation_service.set_state(root, CommentState.DELETED)

        await moderation_service.set_state(deleted, CommentState.VISIBLE)
        await moderation_service.set_state(deleted, CommentState.VISIBLE)

        assert (await thread_repo.find_by_id(thread.id)).num_comments == 2

    @pytest.mark.asyncio
    async def test_unknown_state_is_rejected(self, unit_env):
        moderation_service = await unit_env.get(ModerationService)
        comment_repo = await unit_env.get(CommentRepository)
        _, root, _ = await _setup(unit_env)

        with pytest.raises(InvalidStateTransitionError) as exc_info:
            await moderation_service.set_state(root, "archived")

        assert exc_info.value.state == "archived"
        assert (await comment_repo.find_by_id(root.id)).state == CommentState.VISIBLE


class TestRedaction:
    """Tests for display helpers."""

    def test_visible_comment_is_shown_as_is(self):
        comment = make_comment(body="hello")

        assert is_displayable(comment)
        assert redact(comment) is comment

    def test_deleted_comment_loses_content_not_identity(self):
        comment = make_comment(body="hello", state=CommentState.DELETED)

        redacted = redact(comment)

        assert not is_displayable(comment)
        assert redacted.body == ""
        assert redacted.author is None
        assert redacted.id == comment.id
        assert redacted.ancestors == comment.ancestors
