"""Post aggregate root.

A post owns its authors, tags and images. The collections are exposed as
tuples, so the only way to change them is through the aggregate's methods,
which keep ``updated_at`` current.
"""

from datetime import datetime
from typing import Any, Optional
from uuid import uuid4

from pydantic import ValidationInfo, field_validator, model_validator

from foro.domain.model.common import DomainModel
from foro.domain.value import (
    Author,
    Image,
    PostId,
    StoreId,
    Tag,
    ensure_utc,
    utcnow,
)

TITLE_MAX_LENGTH = 200


def _unique_by(items: tuple, key) -> tuple:
    """Drop later items whose key was already seen, keeping order."""
    seen = set()
    result = []
    for item in items:
        k = key(item)
        if k not in seen:
            seen.add(k)
            result.append(item)
    return tuple(result)


class Post(DomainModel):
    """Post aggregate root.

    Construction never fails on empty content: ``is_valid()`` is advisory and
    use cases reject invalid posts before saving them.

    ``store_id`` is only set once the store has persisted the post. It is kept
    apart from ``id`` so repositories can tell "known to this app" from
    "known to the store".
    """

    id: PostId
    title: str = ""
    body: str = ""
    authors: tuple[Author, ...] = ()
    tags: tuple[Tag, ...] = ()
    images: tuple[Image, ...] = ()
    created_at: datetime
    updated_at: datetime
    store_id: Optional[StoreId] = None
    deleted_at: Optional[datetime] = None

    @model_validator(mode="before")
    @classmethod
    def fill_defaults(cls, data: Any) -> Any:
        """Generate a missing id and default missing timestamps to one "now"."""
        if not isinstance(data, dict):
            return data

        data = dict(data)
        now = utcnow()

        if data.get("id") is None:
            data["id"] = uuid4()
        for name in ("title", "body"):
            if data.get(name) is None:
                data[name] = ""
        for name in ("authors", "tags", "images"):
            if data.get(name) is None:
                data[name] = ()
        for name, alias in (("created_at", "createdAt"), ("updated_at", "updatedAt")):
            if data.get(name) is None and data.get(alias) is None:
                data.pop(alias, None)
                data[name] = now

        return data

    @field_validator("created_at", "updated_at", "deleted_at")
    @classmethod
    def normalize_timezone(cls, v: Optional[datetime]) -> Optional[datetime]:
        """Store all timestamps as aware UTC."""
        return ensure_utc(v)

    @field_validator("updated_at")
    @classmethod
    def not_before_created(cls, v: datetime, info: ValidationInfo) -> datetime:
        """Clamp ``updated_at`` so it never precedes ``created_at``."""
        created_at = info.data.get("created_at")
        if created_at is None:
            return v
        return max(ensure_utc(v), ensure_utc(created_at))

    @field_validator("authors")
    @classmethod
    def unique_authors(cls, v: tuple[Author, ...]) -> tuple[Author, ...]:
        return _unique_by(v, lambda a: a.id)

    @field_validator("tags")
    @classmethod
    def unique_tags(cls, v: tuple[Tag, ...]) -> tuple[Tag, ...]:
        return _unique_by(v, lambda t: t.value)

    @field_validator("images")
    @classmethod
    def unique_images(cls, v: tuple[Image, ...]) -> tuple[Image, ...]:
        return _unique_by(v, lambda i: i.id)

    @property
    def is_deleted(self) -> bool:
        """Whether the post has been soft-deleted."""
        return self.deleted_at is not None

    @property
    def is_persisted(self) -> bool:
        """Whether the store has assigned an identifier to the post."""
        return self.store_id is not None

    def is_valid(self) -> bool:
        """Check that title and body have content and there is an author."""
        return (
            bool(self.title and self.title.strip())
            and bool(self.body and self.body.strip())
            and len(self.authors) > 0
        )

    def _touch(self) -> None:
        self.updated_at = max(utcnow(), self.created_at)

    # Authors

    def add_author(self, author: Author) -> None:
        """Add an author unless one with the same id is already present."""
        if any(a.id == author.id for a in self.authors):
            return
        self.authors = (*self.authors, author)
        self._touch()

    def remove_author(self, author_id: str) -> None:
        """Remove the author with the given id."""
        remaining = tuple(a for a in self.authors if a.id != author_id)
        if len(remaining) != len(self.authors):
            self.authors = remaining
            self._touch()

    # Tags

    def add_tag(self, tag: Tag) -> None:
        """Add a tag unless one with the same value is already present."""
        if any(t.value == tag.value for t in self.tags):
            return
        self.tags = (*self.tags, tag)
        self._touch()

    def remove_tag(self, value: str) -> None:
        """Remove the tag with the given value."""
        remaining = tuple(t for t in self.tags if t.value != value)
        if len(remaining) != len(self.tags):
            self.tags = remaining
            self._touch()

    # Images

    def add_image(self, image: Image) -> None:
        """Add an image unless one with the same id is already present."""
        if any(i.id == image.id for i in self.images):
            return
        self.images = (*self.images, image)
        self._touch()

    def remove_image(self, image_id: str) -> None:
        """Remove the image with the given id."""
        remaining = tuple(i for i in self.images if i.id != image_id)
        if len(remaining) != len(self.images):
            self.images = remaining
            self._touch()

    # Content

    def update_title(self, title: str) -> None:
        if title != self.title:
            self.title = title
            self._touch()

    def update_body(self, body: str) -> None:
        if body != self.body:
            self.body = body
            self._touch()

    # Structural form

    def to_dict(self) -> dict[str, Any]:
        """Convert to the plain structural form.

        ``storeId`` is only present on posts the store has seen.
        """
        data = self.model_dump(mode="json", by_alias=True)
        if self.store_id is None:
            data.pop("storeId", None)
        return data

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "Post":
        """Rebuild a post, including nested value objects, from its structural form.

        Accepts camelCase and snake_case keys. Missing collections become empty.
        """
        return cls.model_validate(data)
