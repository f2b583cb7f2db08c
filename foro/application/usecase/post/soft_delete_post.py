"""Soft delete post use case."""

import logfire
from pydantic import BaseModel

from foro.application.usecase.base import BaseUseCase
from foro.application.usecase.post.common import PostResponse, require_identifier
from foro.domain.error import InvalidStateError, NotFoundError
from foro.domain.repository import PostRepository


class SoftDeletePostRequest(BaseModel):
    """Soft delete post request."""

    post_id: str  # Store or application identifier


class SoftDeletePostUseCase(BaseUseCase):
    """Use case for marking a post as deleted.

    The post stays in the store and can be restored.
    """

    def __init__(self, post_repository: PostRepository) -> None:
        self.post_repository = post_repository

    async def execute(self, request: SoftDeletePostRequest) -> PostResponse:
        """Soft-delete a post.

        Raises:
            NotFoundError: If no post has that identifier
            InvalidStateError: If the post is already deleted
        """
        identifier = require_identifier(request.post_id)

        with logfire.span("soft_delete_post.execute", post_id=identifier):
            existing = await self.post_repository.find_by_id(
                identifier, include_deleted=True
            )
            if existing is None:
                raise NotFoundError("Post", identifier)
            if existing.is_deleted:
                raise InvalidStateError("Post", identifier, "active")

            deleted = await self.post_repository.soft_delete(identifier)
            if deleted is None:
                raise NotFoundError("Post", identifier)

            logfire.info("Post soft-deleted", post_id=str(deleted.id))
            return PostResponse(post=deleted)
