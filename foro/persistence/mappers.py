"""Mappers for converting between database rows and domain models.

The Post aggregate is a pydantic model with nested value objects, so we map
by hand instead of using SQLAlchemy's ORM mapping. Nested collections are
stored as their structural (camelCase) form in JSONB columns.
"""

from typing import Any, Dict
from uuid import UUID

from foro.domain.model import Post
from foro.domain.value import Author, Image, PostId, StoreId, Tag


def row_to_post(row: Dict[str, Any]) -> Post:
    """Convert database row to Post domain model.

    Args:
        row: Database row as dict

    Returns:
        Post domain model with ``store_id`` populated
    """
    return Post(
        id=PostId(UUID(row["id"]) if isinstance(row["id"], str) else row["id"]),
        store_id=StoreId(row["store_id"]),
        title=row["title"],
        body=row["body"],
        authors=[Author.model_validate(a) for a in row.get("authors") or []],
        tags=[Tag.model_validate(t) for t in row.get("tags") or []],
        images=[Image.model_validate(i) for i in row.get("images") or []],
        created_at=row["created_at"],
        updated_at=row["updated_at"],
        deleted_at=row.get("deleted_at"),
    )


def post_to_dict(post: Post) -> Dict[str, Any]:
    """Convert Post domain model to database dict.

    The store identifier is left out: it is assigned by the database and
    only ever used in WHERE clauses.

    Args:
        post: Post domain model

    Returns:
        Dict suitable for database insertion/update
    """
    return {
        "id": post.id,
        "title": post.title,
        "body": post.body,
        "authors": [a.model_dump(mode="json", by_alias=True) for a in post.authors],
        "tags": [t.model_dump(mode="json", by_alias=True) for t in post.tags],
        "images": [i.model_dump(mode="json", by_alias=True) for i in post.images],
        "created_at": post.created_at,
        "updated_at": post.updated_at,
        "deleted_at": post.deleted_at,
    }
