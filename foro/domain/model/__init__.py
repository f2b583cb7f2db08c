"""Domain model entities for posts."""

from foro.domain.model.post import TITLE_MAX_LENGTH, Post

__all__ = [
    "Post",
    "TITLE_MAX_LENGTH",
]
