"""Create post use case."""

from typing import Any

import logfire
from pydantic import BaseModel

from foro.application.usecase.base import BaseUseCase, build_values
from foro.application.usecase.post.common import PostResponse
from foro.domain.error import ValidationError
from foro.domain.model.post import TITLE_MAX_LENGTH, Post
from foro.domain.repository import PostRepository
from foro.domain.storage import ImageStorage
from foro.domain.value import Author, Image, Tag


class CreatePostRequest(BaseModel):
    """Create post request.

    Nested items are raw dicts in their structural (camelCase) form; they are
    turned into value objects by the use case so that failures carry the
    path of the offending input.
    """

    title: str
    body: str
    authors: list[Any] = []
    tags: list[Any] = []
    images: list[Any] = []


def validate_title(title: str) -> str:
    """Trim a title and check it is non-empty and not too long."""
    title = title.strip()
    if not title:
        raise ValidationError("Title is required", field="title")
    if len(title) > TITLE_MAX_LENGTH:
        raise ValidationError(
            f"Title must be at most {TITLE_MAX_LENGTH} characters", field="title"
        )
    return title


def validate_body(body: str) -> str:
    """Trim a body and check it is non-empty."""
    body = body.strip()
    if not body:
        raise ValidationError("Body is required", field="body")
    return body


def validate_authors(authors: list[Any]) -> list[Author]:
    """Build authors, requiring at least one."""
    if not authors:
        raise ValidationError("At least one author is required", field="authors")
    return build_values(Author, authors, "authors")


class CreatePostUseCase(BaseUseCase):
    """Use case for creating a new post."""

    def __init__(
        self, post_repository: PostRepository, image_storage: ImageStorage
    ) -> None:
        """Initialize create post use case.

        Args:
            post_repository: Post repository
            image_storage: Storage holding the post's uploaded images
        """
        self.post_repository = post_repository
        self.image_storage = image_storage

    async def execute(self, request: CreatePostRequest) -> PostResponse:
        """Execute create post flow.

        Steps:
        1. Validate title, body and nested items
        2. Build the Post aggregate (duplicates collapse by key)
        3. Save it; if saving fails, delete the images it referenced

        Args:
            request: Create post request

        Returns:
            The saved post, carrying its store identifier

        Raises:
            ValidationError: If the input is invalid
            PersistenceError: If the store fails
        """
        with logfire.span(
            "create_post.execute",
            title=request.title,
            authors=len(request.authors),
            tags=len(request.tags),
            images=len(request.images),
        ):
            post = Post(
                title=validate_title(request.title),
                body=validate_body(request.body),
                authors=validate_authors(request.authors),
                tags=build_values(Tag, request.tags, "tags"),
                images=build_values(Image, request.images, "images"),
            )

            if not post.is_valid():
                raise ValidationError("Post data is not valid")

            try:
                saved_post = await self.post_repository.save(post)
            except Exception:
                await self._discard_images(post)
                raise

            logfire.info(
                "Post created successfully",
                post_id=str(saved_post.id),
                store_id=saved_post.store_id,
            )
            return PostResponse(post=saved_post)

    async def _discard_images(self, post: Post) -> None:
        """Delete the images of a post that could not be saved.

        Failures here are logged; the save error is what the caller sees.
        """
        for image in post.images:
            try:
                await self.image_storage.delete(image.filename)
            except Exception as e:
                logfire.warn(
                    "Failed to delete image after post save failed",
                    filename=image.filename,
                    error=str(e),
                )
