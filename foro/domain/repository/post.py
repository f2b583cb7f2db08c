"""Post repository interface."""

from abc import ABC, abstractmethod
from datetime import datetime
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, field_validator

from foro.domain.model.post import Post
from foro.domain.value import ensure_utc


class Visibility(str, Enum):
    """Which posts a read path may return, by soft-delete state."""

    ACTIVE = "active"  # deleted_at IS NULL (the default everywhere)
    DELETED = "deleted"  # deleted_at IS NOT NULL
    ALL = "all"

    def admits(self, deleted_at: Optional[datetime]) -> bool:
        """Whether a post with this ``deleted_at`` is visible."""
        if self is Visibility.ACTIVE:
            return deleted_at is None
        if self is Visibility.DELETED:
            return deleted_at is not None
        return True


class PostFilter(BaseModel):
    """Filters for post reads. All optional, combined with AND.

    Every read path and ``count`` go through the same filter, so a page and
    its total never disagree. Soft-deleted posts are hidden unless
    ``deleted`` is True.
    """

    model_config = ConfigDict(frozen=True)

    author_id: Optional[str] = None  # Exact match on any author id
    tag: Optional[str] = None  # Case-insensitive substring of any tag value
    date_from: Optional[datetime] = None  # Inclusive bound on created_at
    date_to: Optional[datetime] = None  # Inclusive bound on created_at
    search: Optional[str] = None  # Case-insensitive substring of title, body or tag
    deleted: Optional[bool] = None  # True: only deleted, otherwise only active

    @field_validator("author_id", "tag", "search")
    @classmethod
    def blank_means_unset(cls, v: Optional[str]) -> Optional[str]:
        """Treat empty or whitespace-only criteria as absent."""
        if v is None or not v.strip():
            return None
        return v

    @field_validator("date_from", "date_to")
    @classmethod
    def normalize_timezone(cls, v: Optional[datetime]) -> Optional[datetime]:
        return ensure_utc(v)

    @property
    def visibility(self) -> Visibility:
        """Soft-delete visibility requested by this filter."""
        return Visibility.DELETED if self.deleted is True else Visibility.ACTIVE

    def matches(self, post: Post) -> bool:
        """Evaluate the filter against a post in memory.

        Mirrors the SQL built by ``foro.persistence.query.build_post_conditions``.
        """
        if not self.visibility.admits(post.deleted_at):
            return False
        if self.author_id is not None and not any(
            a.id == self.author_id for a in post.authors
        ):
            return False
        if self.tag is not None and not any(
            _contains(t.value, self.tag) for t in post.tags
        ):
            return False
        if self.date_from is not None and post.created_at < self.date_from:
            return False
        if self.date_to is not None and post.created_at > self.date_to:
            return False
        if self.search is not None and not (
            _contains(post.title, self.search)
            or _contains(post.body, self.search)
            or any(_contains(t.value, self.search) for t in post.tags)
        ):
            return False
        return True


def _contains(haystack: str, needle: str) -> bool:
    return needle.lower() in haystack.lower()


class PostRepository(ABC):
    """Repository for Post aggregate.

    Defines the contract for post persistence operations.
    Implementations live in the infrastructure layer.

    Every method may raise ``PersistenceError`` when the store fails.
    Reads exclude soft-deleted posts unless told otherwise.
    """

    @abstractmethod
    async def save(self, post: Post) -> Post:
        """Save a post (insert or update).

        Posts without a store identifier are inserted; the returned post
        carries the identifier the store assigned. Posts with one are
        updated in place.

        Args:
            post: The post to save

        Returns:
            The saved post, reloaded from the store

        Raises:
            NotFoundError: If the post has a store identifier that matches
                no stored post
        """
        pass

    @abstractmethod
    async def find_by_id(
        self, identifier: str, include_deleted: bool = False
    ) -> Optional[Post]:
        """Find a post by store identifier or application identifier.

        The store identifier is tried first when ``identifier`` has the
        store's native shape; the application identifier is tried next.

        Args:
            identifier: Store or application identifier
            include_deleted: Whether soft-deleted posts may be returned

        Returns:
            The post if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(
        self,
        page: int = 1,
        limit: int = 10,
        filters: Optional[PostFilter] = None,
    ) -> List[Post]:
        """Find posts with filtering and pagination, newest first.

        Args:
            page: 1-based page number
            limit: Page size
            filters: Filters to apply (None for active posts)

        Returns:
            Posts on the requested page
        """
        pass

    @abstractmethod
    async def find_by_author(
        self, author_id: str, page: int = 1, limit: int = 10
    ) -> List[Post]:
        """Find active posts listing the given author, newest first."""
        pass

    @abstractmethod
    async def find_by_tag(self, tag: str, page: int = 1, limit: int = 10) -> List[Post]:
        """Find active posts with a tag value containing ``tag``, newest first."""
        pass

    @abstractmethod
    async def search(self, query: str, page: int = 1, limit: int = 10) -> List[Post]:
        """Find active posts whose title, body or a tag contains ``query``."""
        pass

    @abstractmethod
    async def find_deleted(self, page: int = 1, limit: int = 10) -> List[Post]:
        """Find soft-deleted posts, most recently deleted first."""
        pass

    @abstractmethod
    async def count(self, filters: Optional[PostFilter] = None) -> int:
        """Count posts matching the given filters.

        Args:
            filters: Filters to apply (None for active posts)

        Returns:
            Total number of posts matching the criteria
        """
        pass

    @abstractmethod
    async def soft_delete(self, identifier: str) -> Optional[Post]:
        """Mark a post as deleted.

        Args:
            identifier: Store or application identifier

        Returns:
            The post with ``deleted_at`` set, or None if not found
        """
        pass

    @abstractmethod
    async def restore(self, identifier: str) -> Optional[Post]:
        """Clear a post's deleted mark.

        Args:
            identifier: Store or application identifier

        Returns:
            The post with ``deleted_at`` cleared, or None if not found
        """
        pass

    @abstractmethod
    async def delete(self, identifier: str) -> bool:
        """Delete a post (hard delete).

        Note: Use cases only soft-delete; this is here for completeness.

        Args:
            identifier: Store or application identifier

        Returns:
            True if a post was removed
        """
        pass
