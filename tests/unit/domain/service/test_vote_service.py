"""Unit tests for VoteService."""

from uuid import uuid4

import pytest

from commentary.domain.error import NotFoundError, VoteError
from commentary.domain.repository import CommentRepository, VoteRepository
from commentary.domain.service import VoteService
from commentary.domain.value import (
    DOWNVOTE,
    UPVOTE,
    CommentId,
    DuplicateVotePolicy,
    VoterId,
)
from commentary.persistence.repository.inmemory import (
    InMemoryCommentRepository,
    InMemoryVoteRepository,
)
from tests.conftest import make_comment
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no database needed
unit_env = create_env_fixture()


def _service(policy: DuplicateVotePolicy) -> tuple[VoteService, InMemoryCommentRepository]:
    comment_repo = InMemoryCommentRepository()
    service = VoteService(
        vote_repository=InMemoryVoteRepository(duplicate_policy=policy),
        comment_repository=comment_repo,
    )
    return service, comment_repo


class TestCastVote:
    """Tests for cast_vote method."""

    @pytest.mark.asyncio
    async def test_three_voters_aggregate_to_sum(self, unit_env):
        """+1, +1, -1 from three voters gives a score of 1."""
        # Arrange
        vote_service = await unit_env.get(VoteService)
        comment_repo = await unit_env.get(CommentRepository)
        comment = await comment_repo.insert(make_comment())

        # Act
        await vote_service.cast_vote(comment, VoterId("alice"), UPVOTE)
        await vote_service.cast_vote(comment, VoterId("bob"), UPVOTE)
        score = await vote_service.cast_vote(comment, VoterId("carol"), DOWNVOTE)

        # Assert
        assert score == 1
        assert await vote_service.get_score(comment.id) == 1

    @pytest.mark.asyncio
    async def test_replace_policy_moves_score_by_difference(self):
        vote_service, comment_repo = _service(DuplicateVotePolicy.REPLACE)
        comment = await comment_repo.insert(make_comment())

        assert await vote_service.cast_vote(comment, VoterId("alice"), UPVOTE) == 1
        assert await vote_service.cast_vote(comment, VoterId("alice"), DOWNVOTE) == -1

    @pytest.mark.asyncio
    async def test_replace_policy_never_double_counts(self):
        vote_service, comment_repo = _service(DuplicateVotePolicy.REPLACE)
        comment = await comment_repo.insert(make_comment())

        await vote_service.cast_vote(comment, VoterId("alice"), UPVOTE)
        score = await vote_service.cast_vote(comment, VoterId("alice"), UPVOTE)

        assert score == 1

    @pytest.mark.asyncio
    async def test_reject_policy_refuses_second_vote(self):
        vote_service, comment_repo = _service(DuplicateVotePolicy.REJECT)
        comment = await comment_repo.insert(make_comment())
        await vote_service.cast_vote(comment, VoterId("alice"), UPVOTE)

        with pytest.raises(VoteError, match="Already voted"):
            await vote_service.cast_vote(comment, VoterId("alice"), DOWNVOTE)

        assert await vote_service.get_score(comment.id) == 1

    @pytest.mark.asyncio
    @pytest.mark.parametrize("value", [0, 2, -2, True])
    async def test_unsupported_values_are_rejected(self, unit_env, value):
        vote_service = await unit_env.get(VoteService)
        vote_repo = await unit_env.get(VoteRepository)
        comment_repo = await unit_env.get(CommentRepository)
        comment = await comment_repo.insert(make_comment())

        with pytest.raises(VoteError, match="Unsupported vote value"):
            await vote_service.cast_vote(comment, VoterId("alice"), value)

        assert await vote_repo.find_by_comment(comment.id) == []
        assert await vote_service.get_score(comment.id) == 0


class TestScores:
    """Tests for get_score and recompute_score methods."""

    @pytest.mark.asyncio
    async def test_score_of_missing_comment_raises_not_found(self, unit_env):
        vote_service = await unit_env.get(VoteService)

        with pytest.raises(NotFoundError):
            await vote_service.get_score(CommentId(uuid4()))

    @pytest.mark.asyncio
    async def test_recompute_repairs_drifted_cache(self, unit_env):
        vote_service = await unit_env.get(VoteService)
        comment_repo = await unit_env.get(CommentRepository)
        comment = await comment_repo.insert(make_comment())
        await vote_service.cast_vote(comment, VoterId("alice"), UPVOTE)
        await vote_service.cast_vote(comment, VoterId("bob"), UPVOTE)
        await comment_repo.update_score(comment.id, 40)

        score = await vote_service.recompute_score(comment)

        assert score == 2
        assert await vote_service.get_score(comment.id) == 2
