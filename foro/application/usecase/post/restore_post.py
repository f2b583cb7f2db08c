"""Restore post use case."""

import logfire
from pydantic import BaseModel

from foro.application.usecase.base import BaseUseCase
from foro.application.usecase.post.common import PostResponse, require_identifier
from foro.domain.error import InvalidStateError, NotFoundError
from foro.domain.repository import PostRepository


class RestorePostRequest(BaseModel):
    """Restore post request."""

    post_id: str  # Store or application identifier


class RestorePostUseCase(BaseUseCase):
    """Use case for bringing a soft-deleted post back."""

    def __init__(self, post_repository: PostRepository) -> None:
        self.post_repository = post_repository

    async def execute(self, request: RestorePostRequest) -> PostResponse:
        """Restore a soft-deleted post.

        Raises:
            NotFoundError: If no post has that identifier
            InvalidStateError: If the post is not deleted
        """
        identifier = require_identifier(request.post_id)

        with logfire.span("restore_post.execute", post_id=identifier):
            existing = await self.post_repository.find_by_id(
                identifier, include_deleted=True
            )
            if existing is None:
                raise NotFoundError("Post", identifier)
            if not existing.is_deleted:
                raise InvalidStateError("Post", identifier, "deleted")

            restored = await self.post_repository.restore(identifier)
            if restored is None:
                raise NotFoundError("Post", identifier)

            logfire.info("Post restored", post_id=str(restored.id))
            return PostResponse(post=restored)
