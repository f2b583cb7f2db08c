"""Unit tests for GetDeletedPostsUseCase."""

import pytest

from foro.application.usecase.post import GetDeletedPostsRequest, GetDeletedPostsUseCase
from foro.domain.repository import PostRepository
from tests.conftest import make_post
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestGetDeletedPostsUseCase:
    """Tests for GetDeletedPostsUseCase."""

    @pytest.mark.asyncio
    async def test_lists_only_deleted_posts(self, unit_env):
        # Arrange
        repo = await unit_env.get(PostRepository)
        use_case = await unit_env.get(GetDeletedPostsUseCase)
        first = await repo.save(make_post(title="First"))
        second = await repo.save(make_post(title="Second", minutes=1))
        await repo.save(make_post(title="Active", minutes=2))
        await repo.soft_delete(str(first.id))
        await repo.soft_delete(str(second.id))

        # Act
        response = await use_case.execute(GetDeletedPostsRequest())

        # Assert
        assert {p.title for p in response.posts} == {"First", "Second"}
        assert all(p.is_deleted for p in response.posts)
        assert response.pagination.total == 2

    @pytest.mark.asyncio
    async def test_empty(self, unit_env):
        use_case = await unit_env.get(GetDeletedPostsUseCase)

        response = await use_case.execute(GetDeletedPostsRequest(page=0, limit=1000))

        assert response.posts == []
        assert response.pagination.page == 1
        assert response.pagination.limit == 100
        assert response.pagination.total_pages == 0
