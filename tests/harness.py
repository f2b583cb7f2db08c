"""Test harness for unit and integration tests.

Unit tests run against in-memory adapters and need nothing running.
Integration tests unmock persistence and need a reachable PostgreSQL
database; settings are loaded from environment variables.
"""

import pytest_asyncio

from foro.util.di import Component
from tests.di import build_test_container


def create_env_fixture(unmock: set[Component] | None = None):
    """Factory for creating test environment fixtures.

    Creates a pytest fixture that:
    - Builds a test container with specified unmocking
    - Yields request-scoped container for repository and use case access
    - Closes the container afterwards

    Args:
        unmock: Components to use real implementations for

    Returns:
        Pytest fixture function that yields AsyncContainer

    Usage:
        # Unit tests - everything mocked
        unit_env = create_env_fixture()

        # Integration tests - real persistence
        integration_env = create_env_fixture(unmock={"persistence"})

        @pytest.mark.asyncio
        async def test_save_post(unit_env):
            repo = await unit_env.get(PostRepository)
            post = await repo.save(make_post())
            assert post.store_id is not None
    """

    @pytest_asyncio.fixture
    async def _test_environment():
        container = build_test_container(unmock=unmock or set())

        async with container() as request_container:
            yield request_container

        await container.close()

    return _test_environment
