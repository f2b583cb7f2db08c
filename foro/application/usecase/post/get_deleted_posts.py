"""Get deleted posts use case."""

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
from foro.domain.repository import PostFilter, PostRepository


class GetDeletedPostsRequest(BaseModel):
    """Get deleted posts request."""

    page: int = 1
    limit: int = DEFAULT_LIMIT


class GetDeletedPostsUseCase(BaseUseCase):
    """Use case for listing soft-deleted posts, most recently deleted first."""

    def __init__(self, post_repository: PostRepository) -> None:
        self.post_repository = post_repository

    async def execute(self, request: GetDeletedPostsRequest) -> PostPageResponse:
        page = normalize_page(request.page)
        limit = normalize_limit(request.limit)

        with logfire.span("get_deleted_posts.execute", page=page, limit=limit):
            posts = await self.post_repository.find_deleted(page, limit)
            total = await self.post_repository.count(PostFilter(deleted=True))

            return PostPageResponse(
                posts=posts, pagination=Pagination.build(page, limit, total)
            )
