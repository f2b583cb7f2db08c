"""Unit tests for SearchPostsUseCase."""

import pytest

from foro.application.usecase.post import SearchPostsRequest, SearchPostsUseCase
from foro.domain.error import ValidationError
from foro.domain.repository import PostRepository
from foro.persistence.repository.inmemory import InMemoryPostRepository
from tests.conftest import make_post
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class CountingPostRepository(InMemoryPostRepository):
    """Records how many times the store was searched."""

    def __init__(self) -> None:
        super().__init__()
        self.searches = 0

    async def search(self, query, page=1, limit=10):
        self.searches += 1
        return await super().search(query, page, limit)


class TestSearchPostsUseCase:
    """Tests for SearchPostsUseCase."""

    @pytest.mark.asyncio
    async def test_matches_title_body_and_tags(self, unit_env):
        # Arrange
        repo = await unit_env.get(PostRepository)
        use_case = await unit_env.get(SearchPostsUseCase)
        await repo.save(make_post(title="Quantum notes", minutes=2))
        await repo.save(make_post(title="Other", body="about QUANTUM effects", minutes=1))
        await repo.save(make_post(title="Tagged", tags=["quantum-physics"]))
        await repo.save(make_post(title="Unrelated", minutes=3))

        # Act
        response = await use_case.execute(SearchPostsRequest(query="quantum"))

        # Assert
        assert [p.title for p in response.posts] == ["Quantum notes", "Other", "Tagged"]
        assert response.pagination.total == 3
        assert response.query == "quantum"

    @pytest.mark.asyncio
    async def test_query_is_trimmed_and_echoed(self, unit_env):
        repo = await unit_env.get(PostRepository)
        use_case = await unit_env.get(SearchPostsUseCase)
        await repo.save(make_post(title="Hello world"))

        data = (await use_case.execute(SearchPostsRequest(query="  hello "))).to_dict()

        assert data["query"] == "hello"
        assert data["pagination"]["total"] == 1
        assert len(data["posts"]) == 1

    @pytest.mark.asyncio
    async def test_wildcards_match_literally(self, unit_env):
        repo = await unit_env.get(PostRepository)
        use_case = await unit_env.get(SearchPostsUseCase)
        await repo.save(make_post(title="50% off"))
        await repo.save(make_post(title="500 items"))

        response = await use_case.execute(SearchPostsRequest(query="0%"))

        assert [p.title for p in response.posts] == ["50% off"]

    @pytest.mark.asyncio
    async def test_deleted_posts_are_not_found(self, unit_env):
        repo = await unit_env.get(PostRepository)
        use_case = await unit_env.get(SearchPostsUseCase)
        saved = await repo.save(make_post(title="Hello world"))
        await repo.soft_delete(str(saved.id))

        response = await use_case.execute(SearchPostsRequest(query="hello"))

        assert response.posts == []
        assert response.pagination.total == 0

    @pytest.mark.asyncio
    @pytest.mark.parametrize("query", ["", "a", "  b  "])
    async def test_short_query_is_rejected_before_searching(self, query):
        repo = CountingPostRepository()
        use_case = SearchPostsUseCase(post_repository=repo)

        with pytest.raises(ValidationError) as exc_info:
            await use_case.execute(SearchPostsRequest(query=query))

        assert exc_info.value.field == "query"
        assert repo.searches == 0
