"""Post use cases."""

from .common import Pagination, PostPageResponse, PostResponse
from .create_post import CreatePostRequest, CreatePostUseCase
from .get_deleted_posts import GetDeletedPostsRequest, GetDeletedPostsUseCase
from .get_post import GetPostRequest, GetPostUseCase
from .get_posts import GetPostsRequest, GetPostsUseCase
from .restore_post import RestorePostRequest, RestorePostUseCase
from .search_posts import SearchPostsRequest, SearchPostsResponse, SearchPostsUseCase
from .soft_delete_post import SoftDeletePostRequest, SoftDeletePostUseCase
from .update_post import UpdatePostRequest, UpdatePostUseCase
from .upload_images import (
    ImageUpload,
    UploadImagesRequest,
    UploadImagesResponse,
    UploadImagesUseCase,
)

__all__ = [
    "Pagination",
    "PostPageResponse",
    "PostResponse",
    "CreatePostRequest",
    "CreatePostUseCase",
    "GetDeletedPostsRequest",
    "GetDeletedPostsUseCase",
    "GetPostRequest",
    "GetPostUseCase",
    "GetPostsRequest",
    "GetPostsUseCase",
    "RestorePostRequest",
    "RestorePostUseCase",
    "SearchPostsRequest",
    "SearchPostsResponse",
    "SearchPostsUseCase",
    "SoftDeletePostRequest",
    "SoftDeletePostUseCase",
    "UpdatePostRequest",
    "UpdatePostUseCase",
    "ImageUpload",
    "UploadImagesRequest",
    "UploadImagesResponse",
    "UploadImagesUseCase",
]
