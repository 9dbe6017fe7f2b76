"""Integration tests for the PostgreSQL repositories.

These tests need a migrated PostgreSQL database reachable at DATABASE__URL.
"""

import os
from uuid import uuid4

import pytest

from commentary.domain.error import DuplicateThreadError
from commentary.domain.model import Comment, Vote
from commentary.domain.repository import (
    CommentRepository,
    ThreadRepository,
    VoteRepository,
)
from commentary.domain.value import CommentState, ThreadId, VoteId, VoterId
from tests.conftest import make_thread
from tests.harness import create_env_fixture

pytestmark = pytest.mark.skipif(
    "DATABASE__URL" not in os.environ, reason="needs a PostgreSQL database"
)

# Integration test fixture - real persistence
integration_env = create_env_fixture(unmock={"persistence"})


async def _thread_with_comment(integration_env):
    thread_repo = await integration_env.get(ThreadRepository)
    comment_repo = await integration_env.get(CommentRepository)
    thread = await thread_repo.save(make_thread(f"it-{uuid4()}"))
    comment = await comment_repo.insert(Comment(thread_id=thread.id, body="root"))
    return thread, comment


class TestPostgresThreadRepository:
    @pytest.mark.asyncio
    async def test_duplicate_id_is_rejected(self, integration_env):
        thread_repo = await integration_env.get(ThreadRepository)
        thread = await thread_repo.save(make_thread(f"it-{uuid4()}"))

        with pytest.raises(DuplicateThreadError):
            await thread_repo.save(make_thread(thread.id))

        # The request transaction survives the conflict
        assert await thread_repo.find_by_id(ThreadId(thread.id)) is not None

    @pytest.mark.asyncio
    async def test_comment_count_is_clamped_at_zero(self, integration_env):
        thread_repo = await integration_env.get(ThreadRepository)
        thread = await thread_repo.save(make_thread(f"it-{uuid4()}"))

        await thread_repo.increment_comment_count(thread.id, -1)

        assert (await thread_repo.find_by_id(thread.id)).num_comments == 0


class TestPostgresCommentRepository:
    @pytest.mark.asyncio
    async def test_insert_round_trips_ancestry(self, integration_env):
        comment_repo = await integration_env.get(CommentRepository)
        thread, root = await _thread_with_comment(integration_env)

        reply = await comment_repo.insert(
            Comment(thread_id=thread.id, ancestors=(root.id,), body="reply")
        )
        stored = await comment_repo.find_by_id(reply.id)

        assert root.id is not None
        assert stored.ancestors == (root.id,)
        assert stored.depth == 1
        assert {c.id for c in await comment_repo.find_all_by_thread(thread.id)} == {
            root.id,
            reply.id,
        }

    @pytest.mark.asyncio
    async def test_state_and_score_updates(self, integration_env):
        comment_repo = await integration_env.get(CommentRepository)
        _, comment = await _thread_with_comment(integration_env)

        assert await comment_repo.update_state(comment.id, CommentState.DELETED)
        assert not await comment_repo.update_state(comment.id, CommentState.DELETED)
        assert await comment_repo.update_score(comment.id, 3) == 3
        assert await comment_repo.update_score(comment.id, -1) == 2

        stored = await comment_repo.find_by_id(comment.id)
        assert stored.state == CommentState.DELETED
        assert stored.score == 2


class TestPostgresVoteRepository:
    @pytest.mark.asyncio
    async def test_replace_returns_previous_vote(self, integration_env):
        vote_repo = await integration_env.get(VoteRepository)
        _, comment = await _thread_with_comment(integration_env)

        def vote(value: int) -> Vote:
            return Vote(
                id=VoteId(uuid4()),
                comment_id=comment.id,
                voter_id=VoterId("alice"),
                value=value,
            )

        assert await vote_repo.replace(vote(1)) is None
        previous = await vote_repo.replace(vote(-1))

        assert previous.value == 1
        assert await vote_repo.sum_by_comment(comment.id) == -1
