"""Unit tests for in-memory repositories."""

from uuid import uuid4

import pytest

from commentary.domain.error import DuplicateThreadError, DuplicateVoteError, NotFoundError
from commentary.domain.model import Vote
from commentary.domain.value import (
    CommentId,
    CommentState,
    DuplicateVotePolicy,
    ThreadId,
    VoteId,
    VoterId,
)
from commentary.persistence.repository.inmemory import (
    InMemoryCommentRepository,
    InMemoryThreadRepository,
    InMemoryVoteRepository,
)
from tests.conftest import make_comment, make_thread


def _vote(comment_id: CommentId, voter: str, value: int) -> Vote:
    return Vote(id=VoteId(uuid4()), comment_id=comment_id, voter_id=VoterId(voter), value=value)


class TestInMemoryThreadRepository:
    @pytest.mark.asyncio
    async def test_save_rejects_duplicate_id(self):
        repo = InMemoryThreadRepository()
        await repo.save(make_thread("t"))

        with pytest.raises(DuplicateThreadError):
            await repo.save(make_thread("t"))

    @pytest.mark.asyncio
    async def test_update_unknown_thread_raises(self):
        repo = InMemoryThreadRepository()

        with pytest.raises(NotFoundError):
            await repo.update(make_thread("t"))

    @pytest.mark.asyncio
    async def test_comment_count_never_goes_negative(self):
        repo = InMemoryThreadRepository()
        await repo.save(make_thread("t"))

        await repo.increment_comment_count(ThreadId("t"), -3)

        assert (await repo.find_by_id(ThreadId("t"))).num_comments == 0

    @pytest.mark.asyncio
    async def test_find_by_ids_keeps_request_order(self):
        repo = InMemoryThreadRepository()
        for thread_id in ("a", "b", "c"):
            await repo.save(make_thread(thread_id))

        threads = await repo.find_by_ids([ThreadId("c"), ThreadId("a"), ThreadId("c")])

        assert [t.id for t in threads] == ["c", "a"]


class TestInMemoryCommentRepository:
    @pytest.mark.asyncio
    async def test_insert_assigns_id(self):
        repo = InMemoryCommentRepository()
        draft = make_comment().model_copy(update={"id": None})

        saved = await repo.insert(draft)

        assert saved.id is not None
        assert await repo.find_by_id(saved.id) == saved

    @pytest.mark.asyncio
    async def test_find_all_by_thread_includes_deleted(self):
        repo = InMemoryCommentRepository()
        visible = await repo.insert(make_comment())
        deleted = await repo.insert(make_comment(state=CommentState.DELETED))
        await repo.insert(make_comment(thread_id="other"))

        comments = await repo.find_all_by_thread(ThreadId("thread-1"))

        assert {c.id for c in comments} == {visible.id, deleted.id}

    @pytest.mark.asyncio
    async def test_update_state_reports_whether_it_changed(self):
        repo = InMemoryCommentRepository()
        comment = await repo.insert(make_comment())

        assert await repo.update_state(comment.id, CommentState.DELETED) is True
        assert await repo.update_state(comment.id, CommentState.DELETED) is False
        assert (await repo.find_by_id(comment.id)).state == CommentState.DELETED

    @pytest.mark.asyncio
    async def test_updates_on_missing_comment_raise(self):
        repo = InMemoryCommentRepository()
        missing = CommentId(uuid4())

        with pytest.raises(NotFoundError):
            await repo.update_state(missing, CommentState.DELETED)
        with pytest.raises(NotFoundError):
            await repo.update_score(missing, 1)


class TestInMemoryVoteRepository:
    @pytest.mark.asyncio
    async def test_save_rejects_second_vote(self):
        repo = InMemoryVoteRepository(duplicate_policy=DuplicateVotePolicy.REJECT)
        comment_id = CommentId(uuid4())
        await repo.save(_vote(comment_id, "alice", 1))

        with pytest.raises(DuplicateVoteError):
            await repo.save(_vote(comment_id, "alice", -1))

    @pytest.mark.asyncio
    async def test_replace_returns_previous_vote(self):
        repo = InMemoryVoteRepository()
        comment_id = CommentId(uuid4())
        first = _vote(comment_id, "alice", 1)

        assert await repo.replace(first) is None
        assert await repo.replace(_vote(comment_id, "alice", -1)) == first
        assert await repo.sum_by_comment(comment_id) == -1
        assert len(await repo.find_by_comment(comment_id)) == 1

    def test_default_policy_is_replace(self):
        assert InMemoryVoteRepository().duplicate_policy == DuplicateVotePolicy.REPLACE
