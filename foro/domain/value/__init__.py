"""Domain value objects for posts."""

from foro.domain.value.common import ValueObject, ensure_utc, utcnow
from foro.domain.value.identifiers import (
    PostId,
    StoreId,
    parse_post_id,
    parse_store_id,
)
from foro.domain.value.types import (
    ALLOWED_IMAGE_MIME_TYPES,
    DEFAULT_TAG_COLOR,
    Author,
    Image,
    Tag,
)

__all__ = [
    # Identifiers
    "PostId",
    "StoreId",
    "parse_post_id",
    "parse_store_id",
    # Types
    "Author",
    "Tag",
    "Image",
    "ALLOWED_IMAGE_MIME_TYPES",
    "DEFAULT_TAG_COLOR",
    # Helpers
    "ValueObject",
    "ensure_utc",
    "utcnow",
]
