"""Get posts use case."""

from datetime import datetime
from typing import Optional

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


class GetPostsRequest(BaseModel):
    """Get posts request.

    Out-of-range page and limit values are clamped rather than rejected.
    """

    page: int = 1
    limit: int = DEFAULT_LIMIT
    author_id: Optional[str] = None
    tag: Optional[str] = None
    date_from: Optional[datetime] = None
    date_to: Optional[datetime] = None

    def to_filter(self) -> PostFilter:
        return PostFilter(
            author_id=self.author_id,
            tag=self.tag,
            date_from=self.date_from,
            date_to=self.date_to,
        )


class GetPostsUseCase(BaseUseCase):
    """Use case for listing active posts with filtering and pagination."""

    def __init__(self, post_repository: PostRepository) -> None:
        """Initialize get posts use case.

        Args:
            post_repository: Post repository
        """
        self.post_repository = post_repository

    async def execute(self, request: GetPostsRequest) -> PostPageResponse:
        """Execute get posts flow.

        The page and the total are fetched with the same filter, so the
        pagination envelope always describes the posts returned.

        Args:
            request: Get posts request with filters and pagination

        Returns:
            Posts on the page and the pagination envelope
        """
        page = normalize_page(request.page)
        limit = normalize_limit(request.limit)
        filters = request.to_filter()

        with logfire.span(
            "get_posts.execute",
            page=page,
            limit=limit,
            author_id=filters.author_id,
            tag=filters.tag,
        ):
            posts = await self.post_repository.find_all(page, limit, filters)
            total = await self.post_repository.count(filters)

            logfire.info("Posts listed", count=len(posts), total=total)

            return PostPageResponse(
                posts=posts, pagination=Pagination.build(page, limit, total)
            )
