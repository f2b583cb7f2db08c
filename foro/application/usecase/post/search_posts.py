"""Search posts use case."""

import logfire
from pydantic import BaseModel

from foro.application.usecase.base import BaseUseCase
from foro.application.usecase.post.common import (
    DEFAULT_LIMIT,
    Pagination,
    PostPageResponse,
    normalize_limit,
    normalize_page,
)
from foro.domain.error import ValidationError
from foro.domain.repository import PostFilter, PostRepository

MIN_QUERY_LENGTH = 2


class SearchPostsRequest(BaseModel):
    """Search posts request."""

    query: str
    page: int = 1
    limit: int = DEFAULT_LIMIT


class SearchPostsResponse(PostPageResponse):
    """Search results, echoing the query that produced them."""

    query: str

    def to_dict(self) -> dict:
        return {**super().to_dict(), "query": self.query}


class SearchPostsUseCase(BaseUseCase):
    """Use case for substring search over title, body and tags."""

    def __init__(self, post_repository: PostRepository) -> None:
        self.post_repository = post_repository

    async def execute(self, request: SearchPostsRequest) -> SearchPostsResponse:
        """Search active posts.

        Raises:
            ValidationError: If the trimmed query is shorter than two characters
        """
        query = request.query.strip()
        if len(query) < MIN_QUERY_LENGTH:
            raise ValidationError(
                f"Search query must be at least {MIN_QUERY_LENGTH} characters",
                field="query",
            )

        page = normalize_page(request.page)
        limit = normalize_limit(request.limit)

        with logfire.span("search_posts.execute", query=query, page=page, limit=limit):
            posts = await self.post_repository.search(query, page, limit)
            total = await self.post_repository.count(PostFilter(search=query))

            return SearchPostsResponse(
                posts=posts,
                pagination=Pagination.build(page, limit, total),
                query=query,
            )
