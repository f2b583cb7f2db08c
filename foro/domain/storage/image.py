"""Image storage interface.

Uploads happen before the post that references them is saved, and the two
are not atomic. The create flow uses ``delete`` to clean up after a failed
save.
"""

import time
from abc import ABC, abstractmethod
from pathlib import PurePath
from uuid import uuid4

from foro.domain.value import Image


def unique_filename(original_name: str) -> str:
    """Name a stored file ``<uuid>-<epoch ms><ext>``, keeping the extension."""
    suffix = PurePath(original_name).suffix.lower()
    return f"{uuid4()}-{int(time.time() * 1000)}{suffix}"


class ImageStorage(ABC):
    """Object store holding image bytes referenced by posts."""

    @abstractmethod
    async def upload(self, content: bytes, original_name: str, mime_type: str) -> Image:
        """Store image bytes under a fresh unique filename.

        Args:
            content: Raw file bytes
            original_name: Name the client gave the file
            mime_type: Declared content type

        Returns:
            Descriptor to attach to a post's ``images``
        """
        pass

    @abstractmethod
    async def delete(self, filename: str) -> bool:
        """Delete a stored image.

        Args:
            filename: Stored filename (``Image.filename``)

        Returns:
            True if the object existed and was removed
        """
        pass
