"""Unit tests for StaticIdentityResolver."""

import pytest

from commentary.adapter import StaticIdentityResolver


def test_resolves_bound_identity():
    assert StaticIdentityResolver("alice").resolve() == "alice"


def test_empty_identity_is_rejected():
    with pytest.raises(ValueError):
        StaticIdentityResolver("")
