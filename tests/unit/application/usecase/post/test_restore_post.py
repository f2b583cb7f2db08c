"""Unit tests for RestorePostUseCase."""

import pytest

from foro.application.usecase.post import RestorePostRequest, RestorePostUseCase
from foro.domain.error import InvalidStateError, NotFoundError, ValidationError
from foro.domain.repository import PostRepository
from tests.conftest import make_post
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestRestorePostUseCase:
    """Tests for RestorePostUseCase."""

    @pytest.mark.asyncio
    async def test_restore(self, unit_env):
        # Arrange
        repo = await unit_env.get(PostRepository)
        use_case = await unit_env.get(RestorePostUseCase)
        saved = await repo.save(make_post())
        await repo.soft_delete(str(saved.store_id))

        # Act
        response = await use_case.execute(RestorePostRequest(post_id=str(saved.store_id)))

        # Assert
        assert response.post.deleted_at is None
        assert response.post.updated_at == saved.updated_at
        assert await repo.find_by_id(str(saved.id)) is not None

    @pytest.mark.asyncio
    async def test_active_post_cannot_be_restored(self, unit_env):
        repo = await unit_env.get(PostRepository)
        use_case = await unit_env.get(RestorePostUseCase)
        saved = await repo.save(make_post())

        with pytest.raises(InvalidStateError) as exc_info:
            await use_case.execute(RestorePostRequest(post_id=str(saved.id)))

        assert exc_info.value.required_state == "deleted"

    @pytest.mark.asyncio
    async def test_missing_post(self, unit_env):
        use_case = await unit_env.get(RestorePostUseCase)

        with pytest.raises(NotFoundError):
            await use_case.execute(RestorePostRequest(post_id="42"))

    @pytest.mark.asyncio
    async def test_blank_identifier(self, unit_env):
        use_case = await unit_env.get(RestorePostUseCase)

        with pytest.raises(ValidationError):
            await use_case.execute(RestorePostRequest(post_id=""))
