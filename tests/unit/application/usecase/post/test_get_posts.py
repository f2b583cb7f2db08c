"""Unit tests for GetPostsUseCase and the pagination envelope."""

import pytest

from foro.application.usecase.post import GetPostsRequest, GetPostsUseCase, Pagination
from foro.domain.repository import PostRepository
from tests.conftest import BASE_TIME, make_author, make_post
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


async def seed(repo: PostRepository, count: int) -> None:
    for i in range(count):
        await repo.save(make_post(title=f"Post {i}", minutes=i))


class TestPagination:
    """Tests for the pagination envelope."""

    def test_middle_page(self):
        pagination = Pagination.build(page=2, limit=10, total=25)

        assert pagination.total_pages == 3
        assert pagination.has_next_page
        assert pagination.has_prev_page
        assert pagination.next_page == 3
        assert pagination.prev_page == 1

    def test_empty(self):
        pagination = Pagination.build(page=1, limit=10, total=0)

        assert pagination.total_pages == 0
        assert not pagination.has_next_page
        assert not pagination.has_prev_page
        assert pagination.next_page is None
        assert pagination.prev_page is None

    def test_serializes_camel_case(self):
        data = Pagination.build(page=1, limit=10, total=25).model_dump(by_alias=True)

        assert data == {
            "page": 1,
            "limit": 10,
            "total": 25,
            "totalPages": 3,
            "hasNextPage": True,
            "hasPrevPage": False,
            "nextPage": 2,
            "prevPage": None,
        }


class TestGetPostsUseCase:
    """Tests for GetPostsUseCase."""

    @pytest.mark.asyncio
    async def test_first_page_of_25(self, unit_env):
        """25 posts with limit 10: total 25, 3 pages, next page 2."""
        # Arrange
        repo = await unit_env.get(PostRepository)
        use_case = await unit_env.get(GetPostsUseCase)
        await seed(repo, 25)

        # Act
        response = await use_case.execute(GetPostsRequest(page=1, limit=10))

        # Assert
        assert len(response.posts) == 10
        assert response.posts[0].title == "Post 24"
        assert response.pagination.total == 25
        assert response.pagination.total_pages == 3
        assert response.pagination.has_next_page
        assert response.pagination.next_page == 2
        assert not response.pagination.has_prev_page

    @pytest.mark.asyncio
    async def test_last_page(self, unit_env):
        repo = await unit_env.get(PostRepository)
        use_case = await unit_env.get(GetPostsUseCase)
        await seed(repo, 25)

        response = await use_case.execute(GetPostsRequest(page=3, limit=10))

        assert len(response.posts) == 5
        assert not response.pagination.has_next_page
        assert response.pagination.prev_page == 2

    @pytest.mark.asyncio
    async def test_page_and_limit_are_clamped(self, unit_env):
        repo = await unit_env.get(PostRepository)
        use_case = await unit_env.get(GetPostsUseCase)
        await seed(repo, 3)

        low = await use_case.execute(GetPostsRequest(page=0, limit=0))
        high = await use_case.execute(GetPostsRequest(page=-5, limit=500))

        assert (low.pagination.page, low.pagination.limit) == (1, 1)
        assert len(low.posts) == 1
        assert (high.pagination.page, high.pagination.limit) == (1, 100)
        assert len(high.posts) == 3

    @pytest.mark.asyncio
    async def test_filters_apply_to_page_and_total(self, unit_env):
        # Arrange
        repo = await unit_env.get(PostRepository)
        use_case = await unit_env.get(GetPostsUseCase)
        await seed(repo, 4)
        await repo.save(make_post(title="Grace 1", authors=[make_author("g1")], tags=["cobol"]))
        await repo.save(make_post(title="Grace 2", authors=[make_author("g1")], minutes=1))

        # Act
        by_author = await use_case.execute(GetPostsRequest(author_id="g1"))
        by_tag = await use_case.execute(GetPostsRequest(tag="COB"))

        # Assert
        assert [p.title for p in by_author.posts] == ["Grace 2", "Grace 1"]
        assert by_author.pagination.total == 2
        assert [p.title for p in by_tag.posts] == ["Grace 1"]
        assert by_tag.pagination.total == 1

    @pytest.mark.asyncio
    async def test_blank_filters_return_everything(self, unit_env):
        repo = await unit_env.get(PostRepository)
        use_case = await unit_env.get(GetPostsUseCase)
        await seed(repo, 3)
        await repo.save(make_post(title="Untagged", tags=[], minutes=5))

        result = await use_case.execute(GetPostsRequest(author_id="", tag=""))

        assert result.pagination.total == 4
        assert len(result.posts) == 4

    @pytest.mark.asyncio
    async def test_date_range(self, unit_env):
        repo = await unit_env.get(PostRepository)
        use_case = await unit_env.get(GetPostsUseCase)
        await seed(repo, 5)

        response = await use_case.execute(
            GetPostsRequest(
                date_from=BASE_TIME.replace(minute=1),
                date_to=BASE_TIME.replace(minute=3),
            )
        )

        assert [p.title for p in response.posts] == ["Post 3", "Post 2", "Post 1"]
        assert response.pagination.total == 3

    @pytest.mark.asyncio
    async def test_deleted_posts_are_excluded(self, unit_env):
        repo = await unit_env.get(PostRepository)
        use_case = await unit_env.get(GetPostsUseCase)
        saved = await repo.save(make_post())
        await repo.soft_delete(str(saved.id))

        response = await use_case.execute(GetPostsRequest())

        assert response.posts == []
        assert response.pagination.total == 0

    @pytest.mark.asyncio
    async def test_to_dict(self, unit_env):
        repo = await unit_env.get(PostRepository)
        use_case = await unit_env.get(GetPostsUseCase)
        await seed(repo, 1)

        data = (await use_case.execute(GetPostsRequest())).to_dict()

        assert data["posts"][0]["title"] == "Post 0"
        assert "storeId" in data["posts"][0]
        assert data["pagination"]["totalPages"] == 1
