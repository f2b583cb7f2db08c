"""Use case providers.

Use cases are built per request from their constructor signatures, so they
share the request's repository (and through it, its database session).
"""

from dishka import Scope, provide

from foro.application.usecase.post import (
    CreatePostUseCase,
    GetDeletedPostsUseCase,
    GetPostsUseCase,
    GetPostUseCase,
    RestorePostUseCase,
    SearchPostsUseCase,
    SoftDeletePostUseCase,
    UpdatePostUseCase,
    UploadImagesUseCase,
)
from foro.util.di.base import ProviderBase


class ProdApplicationProvider(ProviderBase):
    """Post use cases. Concrete: tests swap the components underneath instead."""

    scope = Scope.REQUEST

    create_post = provide(CreatePostUseCase)
    get_post = provide(GetPostUseCase)
    get_posts = provide(GetPostsUseCase)
    search_posts = provide(SearchPostsUseCase)
    update_post = provide(UpdatePostUseCase)
    soft_delete_post = provide(SoftDeletePostUseCase)
    restore_post = provide(RestorePostUseCase)
    get_deleted_posts = provide(GetDeletedPostsUseCase)
    upload_images = provide(UploadImagesUseCase)
