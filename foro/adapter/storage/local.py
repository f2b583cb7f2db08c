"""Local-disk image storage adapter."""

import asyncio
from pathlib import Path

import logfire

from foro.adapter.error import StorageError
from foro.domain.storage import ImageStorage, unique_filename
from foro.domain.value import Image


class LocalImageStorage(ImageStorage):
    """Stores image files under a single upload directory."""

    def __init__(self, upload_dir: Path, base_url: str) -> None:
        """Initialize storage.

        Args:
            upload_dir: Directory holding uploaded files
            base_url: Public URL the upload directory is served under
        """
        self.upload_dir = upload_dir
        self.base_url = base_url.rstrip("/")

    def _path_for(self, filename: str) -> Path:
        path = (self.upload_dir / filename).resolve()
        if path.parent != self.upload_dir.resolve():
            raise StorageError(f"Refusing to touch file outside upload dir: {filename}")
        return path

    @staticmethod
    def _write(path: Path, content: bytes) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(content)

    async def upload(self, content: bytes, original_name: str, mime_type: str) -> Image:
        """Write the bytes to a new file in the upload directory."""
        filename = unique_filename(original_name)
        path = self._path_for(filename)

        try:
            await asyncio.to_thread(self._write, path, content)
        except OSError as e:
            raise StorageError(f"Failed to store image {original_name}: {e}") from e

        logfire.info(
            "Image file stored",
            filename=filename,
            original_name=original_name,
            size=len(content),
        )
        return Image(
            filename=filename,
            original_name=original_name,
            mime_type=mime_type,
            size=len(content),
            url=f"{self.base_url}/{filename}",
        )

    async def delete(self, filename: str) -> bool:
        """Delete an uploaded file, if present."""
        path = self._path_for(filename)

        try:
            await asyncio.to_thread(path.unlink)
        except FileNotFoundError:
            logfire.warn("Image file not found", filename=filename)
            return False
        except OSError as e:
            raise StorageError(f"Failed to delete image {filename}: {e}") from e

        logfire.info("Image file deleted", filename=filename)
        return True
