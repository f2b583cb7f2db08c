"""Domain value objects for posts.

Value objects are immutable and defined by their values, not identity.
They encapsulate validation rules and business logic.
"""

import re
from typing import Optional
from uuid import uuid4

from pydantic import Field, field_validator

from foro.domain.value.common import ValueObject

DEFAULT_TAG_COLOR = "#007bff"

ALLOWED_IMAGE_MIME_TYPES = frozenset(
    {"image/jpeg", "image/png", "image/gif", "image/webp"}
)


class Author(ValueObject):
    """Author of a post.

    Two authors are the same author when their ids match, whatever the
    other fields say.
    """

    id: str = Field(min_length=1)
    name: str
    email: str
    avatar: Optional[str] = None

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """Validate name is not blank."""
        if not v.strip():
            raise ValueError("Author name must not be empty")
        return v

    @field_validator("email")
    @classmethod
    def validate_email(cls, v: str) -> str:
        """Validate email looks like an address."""
        if "@" not in v:
            raise ValueError("Author email must contain '@'")
        return v

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Author) and self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)


class Tag(ValueObject):
    """Tag attached to a post.

    Values are unique within a post. Equality is by value only.
    """

    value: str
    color: str = DEFAULT_TAG_COLOR

    @field_validator("value")
    @classmethod
    def validate_value(cls, v: str) -> str:
        """Validate tag value is 1-50 characters and not blank."""
        if not v.strip():
            raise ValueError("Tag value must not be empty")
        if len(v) > 50:
            raise ValueError("Tag value must be at most 50 characters")
        return v

    @field_validator("color", mode="before")
    @classmethod
    def default_color(cls, v: Optional[str]) -> str:
        """Fall back to the default color when none is given."""
        return v or DEFAULT_TAG_COLOR

    @staticmethod
    def normalize(value: str) -> str:
        """Normalize a raw tag value.

        Lowercases, trims and replaces whitespace runs with a hyphen:
        ``"  Machine Learning "`` becomes ``"machine-learning"``.
        """
        return re.sub(r"\s+", "-", value.lower().strip())

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Tag) and self.value == other.value

    def __hash__(self) -> int:
        return hash(self.value)


class Image(ValueObject):
    """Descriptor of an image stored in the object store.

    The post only keeps the descriptor; the bytes live elsewhere.
    """

    id: str = Field(default_factory=lambda: str(uuid4()))
    filename: str = Field(min_length=1)
    original_name: str = Field(min_length=1)
    mime_type: str
    size: int = Field(gt=0)
    url: str = Field(min_length=1)
    alt: str = ""

    @field_validator("id", mode="before")
    @classmethod
    def generate_missing_id(cls, v: Optional[str]) -> str:
        """Generate an id when none is given."""
        return v or str(uuid4())

    @field_validator("alt", mode="before")
    @classmethod
    def default_alt(cls, v: Optional[str]) -> str:
        """Treat a missing alt text as empty."""
        return v or ""

    @field_validator("mime_type")
    @classmethod
    def validate_mime_type(cls, v: str) -> str:
        """Validate the image type is one we accept."""
        if v not in ALLOWED_IMAGE_MIME_TYPES:
            raise ValueError(
                "Image type must be one of: " + ", ".join(sorted(ALLOWED_IMAGE_MIME_TYPES))
            )
        return v

    def __eq__(self, other: object) -> bool:
        return isinstance(other, Image) and self.id == other.id

    def __hash__(self) -> int:
        return hash(self.id)
