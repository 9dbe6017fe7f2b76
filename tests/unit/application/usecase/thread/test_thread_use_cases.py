"""Unit tests for thread use cases."""

import pytest

from commentary.application.usecase.thread import (
    CreateThreadRequest,
    CreateThreadUseCase,
    GetThreadRequest,
    GetThreadsRequest,
    GetThreadsUseCase,
    GetThreadUseCase,
    SetThreadCommentableRequest,
    SetThreadCommentableUseCase,
)
from commentary.domain.error import DuplicateThreadError, NotFoundError, ValidationError
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestCreateThreadUseCase:
    @pytest.mark.asyncio
    async def test_create_then_get(self, unit_env):
        # Arrange
        create_thread = await unit_env.get(CreateThreadUseCase)
        get_thread = await unit_env.get(GetThreadUseCase)

        # Act
        created = await create_thread.execute(
            CreateThreadRequest(thread_id="post-1", permalink="https://example.com/1")
        )
        fetched = await get_thread.execute(GetThreadRequest(thread_id="post-1"))

        # Assert
        assert created == fetched
        assert fetched.commentable is True
        assert fetched.num_comments == 0
        assert fetched.last_comment_at is None

    @pytest.mark.asyncio
    async def test_duplicate_create_fails(self, unit_env):
        create_thread = await unit_env.get(CreateThreadUseCase)
        request = CreateThreadRequest(thread_id="post-1", permalink="https://example.com/1")
        await create_thread.execute(request)

        with pytest.raises(DuplicateThreadError):
            await create_thread.execute(request)

    @pytest.mark.asyncio
    async def test_invalid_thread_fails_validation(self, unit_env):
        create_thread = await unit_env.get(CreateThreadUseCase)

        with pytest.raises(ValidationError):
            await create_thread.execute(CreateThreadRequest(thread_id="post-1"))


class TestGetThreadsUseCase:
    @pytest.mark.asyncio
    async def test_returns_known_threads(self, unit_env):
        create_thread = await unit_env.get(CreateThreadUseCase)
        get_threads = await unit_env.get(GetThreadsUseCase)
        for thread_id in ("a", "b"):
            await create_thread.execute(
                CreateThreadRequest(thread_id=thread_id, permalink="https://example.com")
            )

        response = await get_threads.execute(GetThreadsRequest(thread_ids=["a", "zz", "b"]))

        assert response.total == 2
        assert [t.thread_id for t in response.threads] == ["a", "b"]

    @pytest.mark.asyncio
    async def test_missing_thread_is_not_found(self, unit_env):
        get_thread = await unit_env.get(GetThreadUseCase)

        with pytest.raises(NotFoundError):
            await get_thread.execute(GetThreadRequest(thread_id="missing"))


class TestSetThreadCommentableUseCase:
    @pytest.mark.asyncio
    async def test_close_and_reopen(self, unit_env):
        create_thread = await unit_env.get(CreateThreadUseCase)
        set_commentable = await unit_env.get(SetThreadCommentableUseCase)
        await create_thread.execute(
            CreateThreadRequest(thread_id="t", permalink="https://example.com")
        )

        closed = await set_commentable.execute(
            SetThreadCommentableRequest(thread_id="t", commentable=False)
        )
        reopened = await set_commentable.execute(
            SetThreadCommentableRequest(thread_id="t", commentable=True)
        )

        assert closed.commentable is False
        assert reopened.commentable is True
