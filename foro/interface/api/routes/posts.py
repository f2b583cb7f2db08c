"""Post routes.

Posts are addressed by either identifier: the store identifier or the
application UUID. Responses use the structural camelCase form.
"""

from datetime import datetime
from typing import Any, Optional

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter, Query, UploadFile, status
from pydantic import BaseModel

from foro.adapter.error import StorageError
from foro.application.usecase.post import (
    CreatePostRequest,
    CreatePostUseCase,
    GetDeletedPostsRequest,
    GetDeletedPostsUseCase,
    GetPostRequest,
    GetPostsRequest,
    GetPostsUseCase,
    GetPostUseCase,
    ImageUpload,
    RestorePostRequest,
    RestorePostUseCase,
    SearchPostsRequest,
    SearchPostsUseCase,
    SoftDeletePostRequest,
    SoftDeletePostUseCase,
    UpdatePostRequest,
    UpdatePostUseCase,
    UploadImagesRequest,
    UploadImagesUseCase,
)
from foro.domain.error import DomainError
from foro.interface.error import to_http_exception

router = APIRouter(prefix="/posts", tags=["posts"], route_class=DishkaRoute)


class CreatePostAPIRequest(BaseModel):
    """API request for creating a post.

    Fields are checked by the use case so that every input problem is
    reported the same way.
    """

    title: str = ""
    body: str = ""
    authors: list[Any] = []
    tags: list[Any] = []
    images: list[Any] = []


class UpdatePostAPIRequest(BaseModel):
    """API request for updating a post. Omitted fields are left unchanged."""

    title: Optional[str] = None
    body: Optional[str] = None
    authors: Optional[list[Any]] = None
    tags: Optional[list[Any]] = None
    images: Optional[list[Any]] = None


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_post(
    request: CreatePostAPIRequest,
    create_post_use_case: FromDishka[CreatePostUseCase],
) -> dict[str, Any]:
    """Create a new post.

    Args:
        request: Post creation data
        create_post_use_case: Create post use case from DI

    Returns:
        Created post
    """
    try:
        result = await create_post_use_case.execute(
            CreatePostRequest(**request.model_dump())
        )
    except DomainError as e:
        raise to_http_exception(e, "create post") from e
    return result.to_dict()


@router.post("/upload", status_code=status.HTTP_201_CREATED)
async def upload_images(
    images: list[UploadFile],
    upload_images_use_case: FromDishka[UploadImagesUseCase],
) -> dict[str, Any]:
    """Upload image files for a post that is about to be created.

    Args:
        images: Multipart ``images`` files
        upload_images_use_case: Upload images use case from DI

    Returns:
        Image descriptors to pass as the new post's ``images``
    """
    files = []
    for image in images:
        files.append(
            ImageUpload(
                original_name=image.filename or "",
                mime_type=image.content_type or "",
                content=await image.read(),
            )
        )

    try:
        result = await upload_images_use_case.execute(UploadImagesRequest(files=files))
    except (DomainError, StorageError) as e:
        raise to_http_exception(e, "upload images") from e
    return result.to_dict()


@router.get("")
async def get_posts(
    get_posts_use_case: FromDishka[GetPostsUseCase],
    page: int = 1,
    limit: int = 10,
    author_id: Optional[str] = Query(default=None, alias="authorId"),
    tag: Optional[str] = None,
    date_from: Optional[datetime] = Query(default=None, alias="dateFrom"),
    date_to: Optional[datetime] = Query(default=None, alias="dateTo"),
) -> dict[str, Any]:
    """List active posts, newest first.

    Args:
        get_posts_use_case: Get posts use case from DI
        page: 1-based page number
        limit: Page size (clamped to 1-100)
        author_id: Only posts listing this author
        tag: Only posts with a tag containing this text
        date_from: Only posts created at or after this time
        date_to: Only posts created at or before this time

    Returns:
        Posts and pagination envelope
    """
    try:
        result = await get_posts_use_case.execute(
            GetPostsRequest(
                page=page,
                limit=limit,
                author_id=author_id,
                tag=tag,
                date_from=date_from,
                date_to=date_to,
            )
        )
    except DomainError as e:
        raise to_http_exception(e, "list posts") from e
    return result.to_dict()


@router.get("/search")
async def search_posts(
    search_posts_use_case: FromDishka[SearchPostsUseCase],
    q: str = "",
    page: int = 1,
    limit: int = 10,
) -> dict[str, Any]:
    """Search active posts by title, body and tags."""
    try:
        result = await search_posts_use_case.execute(
            SearchPostsRequest(query=q, page=page, limit=limit)
        )
    except DomainError as e:
        raise to_http_exception(e, "search posts") from e
    return result.to_dict()


@router.get("/deleted")
async def get_deleted_posts(
    get_deleted_posts_use_case: FromDishka[GetDeletedPostsUseCase],
    page: int = 1,
    limit: int = 10,
) -> dict[str, Any]:
    """List soft-deleted posts, most recently deleted first."""
    try:
        result = await get_deleted_posts_use_case.execute(
            GetDeletedPostsRequest(page=page, limit=limit)
        )
    except DomainError as e:
        raise to_http_exception(e, "list deleted posts") from e
    return result.to_dict()


@router.get("/author/{author_id}")
async def get_posts_by_author(
    author_id: str,
    get_posts_use_case: FromDishka[GetPostsUseCase],
    page: int = 1,
    limit: int = 10,
) -> dict[str, Any]:
    """List active posts by an author."""
    try:
        result = await get_posts_use_case.execute(
            GetPostsRequest(page=page, limit=limit, author_id=author_id)
        )
    except DomainError as e:
        raise to_http_exception(e, "list posts by author") from e
    return result.to_dict()


@router.get("/tag/{tag}")
async def get_posts_by_tag(
    tag: str,
    get_posts_use_case: FromDishka[GetPostsUseCase],
    page: int = 1,
    limit: int = 10,
) -> dict[str, Any]:
    """List active posts with a tag containing ``tag``."""
    try:
        result = await get_posts_use_case.execute(
            GetPostsRequest(page=page, limit=limit, tag=tag)
        )
    except DomainError as e:
        raise to_http_exception(e, "list posts by tag") from e
    return result.to_dict()


@router.get("/{post_id}")
async def get_post(
    post_id: str,
    get_post_use_case: FromDishka[GetPostUseCase],
) -> dict[str, Any]:
    """Get an active post by either identifier.

    Args:
        post_id: Store identifier or application UUID
        get_post_use_case: Get post use case from DI

    Returns:
        Post details
    """
    try:
        result = await get_post_use_case.execute(GetPostRequest(post_id=post_id))
    except DomainError as e:
        raise to_http_exception(e, "get post") from e
    return result.to_dict()


@router.put("/{post_id}")
async def update_post(
    post_id: str,
    request: UpdatePostAPIRequest,
    update_post_use_case: FromDishka[UpdatePostUseCase],
) -> dict[str, Any]:
    """Update an active post.

    Args:
        post_id: Store identifier or application UUID
        request: Fields to replace
        update_post_use_case: Update post use case from DI

    Returns:
        Updated post
    """
    try:
        result = await update_post_use_case.execute(
            UpdatePostRequest(post_id=post_id, **request.model_dump())
        )
    except DomainError as e:
        raise to_http_exception(e, "update post") from e
    return result.to_dict()


@router.delete("/{post_id}")
async def soft_delete_post(
    post_id: str,
    soft_delete_post_use_case: FromDishka[SoftDeletePostUseCase],
) -> dict[str, Any]:
    """Soft-delete a post. It can be restored later."""
    try:
        result = await soft_delete_post_use_case.execute(
            SoftDeletePostRequest(post_id=post_id)
        )
    except DomainError as e:
        raise to_http_exception(e, "delete post") from e
    return result.to_dict()


@router.post("/{post_id}/restore")
async def restore_post(
    post_id: str,
    restore_post_use_case: FromDishka[RestorePostUseCase],
) -> dict[str, Any]:
    """Restore a soft-deleted post."""
    try:
        result = await restore_post_use_case.execute(
            RestorePostRequest(post_id=post_id)
        )
    except DomainError as e:
        raise to_http_exception(e, "restore post") from e
    return result.to_dict()
