"""In-memory post repository for testing."""

from itertools import count as counter
from typing import Callable, Optional

from foro.domain.error import NotFoundError
from foro.domain.model.post import Post
from foro.domain.repository.post import PostFilter, PostRepository, Visibility
from foro.domain.value import StoreId, parse_post_id, parse_store_id, utcnow


def _newest_first(post: Post):
    return (post.created_at, post.store_id)


def _recently_deleted_first(post: Post):
    return (post.deleted_at, post.store_id)


class InMemoryPostRepository(PostRepository):
    """In-memory implementation of PostRepository for testing.

    Posts are copied on the way in and on the way out, so callers can never
    mutate stored state without calling ``save``.
    """

    def __init__(self) -> None:
        self._posts: dict[StoreId, Post] = {}
        self._ids = counter(1)

    def _resolve(self, identifier: str, visibility: Visibility) -> Optional[Post]:
        """Look a post up by store identifier, then by application identifier."""
        store_id = parse_store_id(identifier)
        if store_id is not None:
            post = self._posts.get(store_id)
            if post is not None and visibility.admits(post.deleted_at):
                return post

        post_id = parse_post_id(identifier)
        if post_id is not None:
            for post in self._posts.values():
                if post.id == post_id and visibility.admits(post.deleted_at):
                    return post
        return None

    def _page(
        self,
        filters: Optional[PostFilter],
        page: int,
        limit: int,
        key: Callable[[Post], tuple] = _newest_first,
    ) -> list[Post]:
        filters = filters or PostFilter()
        posts = [p for p in self._posts.values() if filters.matches(p)]
        posts.sort(key=key, reverse=True)

        offset = max(page - 1, 0) * limit
        return [p.model_copy(deep=True) for p in posts[offset : offset + limit]]

    async def save(self, post: Post) -> Post:
        """Save a post (insert or update by store identifier)."""
        if post.store_id is None:
            stored = post.model_copy(
                update={"store_id": StoreId(next(self._ids))}, deep=True
            )
        elif post.store_id in self._posts:
            stored = post.model_copy(deep=True)
        else:
            raise NotFoundError("Post", str(post.store_id))

        self._posts[stored.store_id] = stored
        return stored.model_copy(deep=True)

    async def find_by_id(
        self, identifier: str, include_deleted: bool = False
    ) -> Optional[Post]:
        """Find a post by store or application identifier."""
        visibility = Visibility.ALL if include_deleted else Visibility.ACTIVE
        post = self._resolve(identifier, visibility)
        return post.model_copy(deep=True) if post else None

    async def find_all(
        self,
        page: int = 1,
        limit: int = 10,
        filters: Optional[PostFilter] = None,
    ) -> list[Post]:
        """Find posts with filtering and pagination."""
        return self._page(filters, page, limit)

    async def find_by_author(
        self, author_id: str, page: int = 1, limit: int = 10
    ) -> list[Post]:
        return self._page(PostFilter(author_id=author_id), page, limit)

    async def find_by_tag(self, tag: str, page: int = 1, limit: int = 10) -> list[Post]:
        return self._page(PostFilter(tag=tag), page, limit)

    async def search(self, query: str, page: int = 1, limit: int = 10) -> list[Post]:
        return self._page(PostFilter(search=query), page, limit)

    async def find_deleted(self, page: int = 1, limit: int = 10) -> list[Post]:
        return self._page(
            PostFilter(deleted=True), page, limit, key=_recently_deleted_first
        )

    async def count(self, filters: Optional[PostFilter] = None) -> int:
        """Count posts matching the given filters."""
        filters = filters or PostFilter()
        return sum(1 for p in self._posts.values() if filters.matches(p))

    async def soft_delete(self, identifier: str) -> Optional[Post]:
        """Mark a post as deleted."""
        post = self._resolve(identifier, Visibility.ALL)
        if post is None:
            return None
        post.deleted_at = max(utcnow(), post.created_at)
        return post.model_copy(deep=True)

    async def restore(self, identifier: str) -> Optional[Post]:
        """Clear a post's deleted mark."""
        post = self._resolve(identifier, Visibility.ALL)
        if post is None:
            return None
        post.deleted_at = None
        return post.model_copy(deep=True)

    async def delete(self, identifier: str) -> bool:
        """Delete a post (hard delete)."""
        post = self._resolve(identifier, Visibility.ALL)
        if post is None:
            return False
        del self._posts[post.store_id]
        return True
