"""Get post use case."""

import logfire
from pydantic import BaseModel

from foro.application.usecase.base import BaseUseCase
from foro.application.usecase.post.common import PostResponse, require_identifier
from foro.domain.error import NotFoundError
from foro.domain.repository import PostRepository


class GetPostRequest(BaseModel):
    """Get post request."""

    post_id: str  # Store or application identifier


class GetPostUseCase(BaseUseCase):
    """Use case for fetching a single active post."""

    def __init__(self, post_repository: PostRepository) -> None:
        self.post_repository = post_repository

    async def execute(self, request: GetPostRequest) -> PostResponse:
        """Fetch a post by either of its identifiers.

        Raises:
            ValidationError: If the identifier is blank
            NotFoundError: If no active post has that identifier
        """
        identifier = require_identifier(request.post_id)

        with logfire.span("get_post.execute", post_id=identifier):
            post = await self.post_repository.find_by_id(identifier)
            if post is None:
                raise NotFoundError("Post", identifier)

            return PostResponse(post=post)
