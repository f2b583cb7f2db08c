"""Shared request/response pieces for post use cases."""

import math
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from foro.domain.error import ValidationError
from foro.domain.model import Post

DEFAULT_LIMIT = 10
MAX_LIMIT = 100


def normalize_page(page: int) -> int:
    """Pages start at 1."""
    return max(1, page)


def normalize_limit(limit: int) -> int:
    """Clamp a page size to 1..MAX_LIMIT."""
    return min(MAX_LIMIT, max(1, limit))


def require_identifier(identifier: str) -> str:
    """Reject blank identifiers before touching the store."""
    identifier = identifier.strip()
    if not identifier:
        raise ValidationError("Post identifier is required", field="id")
    return identifier


class Pagination(BaseModel):
    """Pagination envelope for a page of posts."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    page: int
    limit: int
    total: int
    total_pages: int
    has_next_page: bool
    has_prev_page: bool
    next_page: Optional[int] = None
    prev_page: Optional[int] = None

    @classmethod
    def build(cls, page: int, limit: int, total: int) -> "Pagination":
        """Compute the envelope for ``page`` of ``total`` posts."""
        total_pages = math.ceil(total / limit)
        has_next_page = page < total_pages
        has_prev_page = page > 1
        return cls(
            page=page,
            limit=limit,
            total=total,
            total_pages=total_pages,
            has_next_page=has_next_page,
            has_prev_page=has_prev_page,
            next_page=page + 1 if has_next_page else None,
            prev_page=page - 1 if has_prev_page else None,
        )


class PostResponse(BaseModel):
    """A single post."""

    post: Post

    def to_dict(self) -> dict[str, Any]:
        return self.post.to_dict()


class PostPageResponse(BaseModel):
    """A page of posts and its pagination envelope."""

    posts: list[Post]
    pagination: Pagination

    def to_dict(self) -> dict[str, Any]:
        return {
            "posts": [post.to_dict() for post in self.posts],
            "pagination": self.pagination.model_dump(by_alias=True),
        }
