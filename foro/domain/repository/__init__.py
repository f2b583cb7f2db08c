"""Repository interfaces for the post domain.

Repository interfaces are defined in the domain layer (dependency inversion).
Implementations live in the infrastructure layer.
"""

from foro.domain.repository.post import PostFilter, PostRepository, Visibility

__all__ = [
    "PostRepository",
    "PostFilter",
    "Visibility",
]
