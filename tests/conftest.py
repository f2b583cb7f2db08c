"""Test configuration and helpers."""

from datetime import datetime, timedelta, timezone
from typing import Any

import logfire

from foro.domain.model.post import Post
from foro.domain.value import Author, Image, Tag

# Keep telemetry local during tests
logfire.configure(send_to_logfire=False, console=False)

BASE_TIME = datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)


def make_author(author_id: str = "a1", name: str = "Ada Lovelace") -> Author:
    """Build a valid author."""
    return Author(id=author_id, name=name, email=f"{author_id}@example.com")


def make_image(image_id: str = "img-1", filename: str = "cover.png") -> Image:
    """Build a valid image descriptor."""
    return Image(
        id=image_id,
        filename=filename,
        original_name="Cover.png",
        mime_type="image/png",
        size=2048,
        url=f"https://cdn.example.com/{filename}",
    )


def make_post(
    title: str = "Hello world",
    body: str = "A first post",
    authors: list[Author] | None = None,
    tags: list[str] = (),
    images: list[Image] = (),
    minutes: int = 0,
) -> Post:
    """Build a valid, unsaved post.

    ``minutes`` offsets ``created_at`` from a fixed base time, so tests can
    control newest-first ordering.
    """
    created_at = BASE_TIME + timedelta(minutes=minutes)
    return Post(
        title=title,
        body=body,
        authors=authors if authors is not None else [make_author()],
        tags=[Tag(value=t) for t in tags],
        images=list(images),
        created_at=created_at,
        updated_at=created_at,
    )


def author_data(author_id: str = "a1", **overrides: Any) -> dict[str, Any]:
    """Raw author input as sent by a client."""
    data = {"id": author_id, "name": "Ada Lovelace", "email": f"{author_id}@example.com"}
    data.update(overrides)
    return data


def image_data(filename: str = "cover.png", **overrides: Any) -> dict[str, Any]:
    """Raw image input as sent by a client (camelCase keys)."""
    data = {
        "filename": filename,
        "originalName": "Cover.png",
        "mimeType": "image/png",
        "size": 2048,
        "url": f"https://cdn.example.com/{filename}",
    }
    data.update(overrides)
    return data
