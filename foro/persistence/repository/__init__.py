"""PostgreSQL repository implementations."""

from foro.persistence.repository.post import PostgresPostRepository

__all__ = [
    "PostgresPostRepository",
]
