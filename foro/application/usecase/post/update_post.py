"""Update post use case."""

from typing import Any, Optional

import logfire
from pydantic import BaseModel

from foro.application.usecase.base import BaseUseCase, build_values
from foro.application.usecase.post.common import PostResponse, require_identifier
from foro.application.usecase.post.create_post import (
    validate_authors,
    validate_body,
    validate_title,
)
from foro.domain.error import NotFoundError, ValidationError
from foro.domain.model.post import Post
from foro.domain.repository import PostRepository
from foro.domain.value import Image, Tag, utcnow


class UpdatePostRequest(BaseModel):
    """Update post request.

    Fields left as None keep their current value.
    """

    post_id: str  # Store or application identifier
    title: Optional[str] = None
    body: Optional[str] = None
    authors: Optional[list[Any]] = None
    tags: Optional[list[Any]] = None
    images: Optional[list[Any]] = None


class UpdatePostUseCase(BaseUseCase):
    """Use case for replacing a post's content."""

    def __init__(self, post_repository: PostRepository) -> None:
        """Initialize update post use case.

        Args:
            post_repository: Post repository
        """
        self.post_repository = post_repository

    async def execute(self, request: UpdatePostRequest) -> PostResponse:
        """Execute update post flow.

        The aggregate is rebuilt from the stored post and the provided
        fields. Identifiers, ``created_at`` and ``deleted_at`` carry over.

        Args:
            request: Update post request

        Returns:
            The saved post

        Raises:
            ValidationError: If the identifier is blank or a provided field
                is invalid
            NotFoundError: If no active post has that identifier
        """
        identifier = require_identifier(request.post_id)

        with logfire.span("update_post.execute", post_id=identifier):
            existing = await self.post_repository.find_by_id(identifier)
            if existing is None:
                raise NotFoundError("Post", identifier)

            title = (
                validate_title(request.title)
                if request.title is not None
                else existing.title
            )
            body = (
                validate_body(request.body) if request.body is not None else existing.body
            )
            authors = (
                validate_authors(request.authors)
                if request.authors is not None
                else existing.authors
            )
            tags = (
                build_values(Tag, request.tags, "tags")
                if request.tags is not None
                else existing.tags
            )
            images = (
                build_values(Image, request.images, "images")
                if request.images is not None
                else existing.images
            )

            updated = Post(
                id=existing.id,
                store_id=existing.store_id,
                title=title,
                body=body,
                authors=authors,
                tags=tags,
                images=images,
                created_at=existing.created_at,
                updated_at=max(utcnow(), existing.created_at),
                deleted_at=existing.deleted_at,
            )

            if not updated.is_valid():
                raise ValidationError("Post data is not valid")

            saved_post = await self.post_repository.save(updated)

            logfire.info(
                "Post updated successfully",
                post_id=str(saved_post.id),
                store_id=saved_post.store_id,
            )
            return PostResponse(post=saved_post)
