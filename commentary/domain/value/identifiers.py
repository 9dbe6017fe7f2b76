"""Strongly typed identifiers for threads, comments and votes.

Thread identifiers are chosen by the caller (opaque strings such as a page
key); comment and vote identifiers are UUIDs assigned on insert.
"""

from typing import NewType
from uuid import UUID

ThreadId = NewType("ThreadId", str)
CommentId = NewType("CommentId", UUID)
VoteId = NewType("VoteId", UUID)

# Opaque, equality-comparable token supplied by the IdentityResolver
VoterId = NewType("VoterId", str)
