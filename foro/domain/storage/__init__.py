"""Image storage interfaces."""

from foro.domain.storage.image import ImageStorage, unique_filename

__all__ = ["ImageStorage", "unique_filename"]
