"""Test harness for unit and integration tests.

Integration tests assume a PostgreSQL database is reachable with the
settings loaded from environment variables (configure via .env or export).
"""

import pytest_asyncio

from commentary.adapter import StaticIdentityResolver
from commentary.domain.service import IdentityResolver
from commentary.util.di import Component
from tests.di import build_test_container

TEST_VOTER = "voter-under-test"


def create_env_fixture(unmock: set[Component] | None = None, voter_id: str = TEST_VOTER):
    """Factory for creating test environment fixtures.

    Creates a pytest fixture that:
    - Builds a test container with specified unmocking
    - Yields a request-scoped container for service access, with
      voter_id as the request's voter identity

    Args:
        unmock: Components to use real implementations for
        voter_id: Identity resolved for votes cast in the request

    Returns:
        Pytest fixture function that yields AsyncContainer

    Usage:
        # Unit tests - everything mocked, no database needed
        unit_env = create_env_fixture()

        # Integration tests - real persistence, assumes postgres running
        integration_env = create_env_fixture(unmock={"persistence"})

        @pytest.mark.asyncio
        async def test_save_thread(unit_env):
            service = await unit_env.get(ThreadService)
            ...
    """

    @pytest_asyncio.fixture
    async def _test_environment():
        container = build_test_container(unmock=unmock or set())

        context = {IdentityResolver: StaticIdentityResolver(voter_id)}
        async with container(context=context) as request_container:
            yield request_container

        await container.close()

    return _test_environment
