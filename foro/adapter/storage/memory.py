"""In-memory image storage for testing."""

from typing import Optional

from foro.adapter.error import StorageError
from foro.domain.storage import ImageStorage, unique_filename
from foro.domain.value import Image


class InMemoryImageStorage(ImageStorage):
    """Image storage that only remembers filenames.

    ``fail_after`` makes uploads fail once that many have succeeded.
    """

    def __init__(
        self, filenames: set[str] | None = None, fail_after: Optional[int] = None
    ) -> None:
        self.filenames: set[str] = set(filenames or ())
        self.uploaded: list[str] = []
        self.deleted: list[str] = []
        self.fail_after = fail_after

    async def upload(self, content: bytes, original_name: str, mime_type: str) -> Image:
        """Remember a new filename for the upload."""
        if self.fail_after is not None and len(self.uploaded) >= self.fail_after:
            raise StorageError(f"Failed to store image {original_name}")

        filename = unique_filename(original_name)
        self.filenames.add(filename)
        self.uploaded.append(filename)
        return Image(
            filename=filename,
            original_name=original_name,
            mime_type=mime_type,
            size=len(content),
            url=f"/uploads/{filename}",
        )

    async def delete(self, filename: str) -> bool:
        """Forget a filename, recording the attempt."""
        self.deleted.append(filename)
        if filename not in self.filenames:
            return False
        self.filenames.discard(filename)
        return True
