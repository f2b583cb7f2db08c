"""Upload images use case.

Images are uploaded on their own, before the post that uses them exists.
The returned descriptors are what clients send back in a create request's
``images``.
"""

from typing import Any

import logfire
from pydantic import BaseModel

from foro.application.usecase.base import BaseUseCase
from foro.config import StorageSettings
from foro.domain.error import ValidationError
from foro.domain.storage import ImageStorage
from foro.domain.value import ALLOWED_IMAGE_MIME_TYPES, Image


class ImageUpload(BaseModel):
    """One file of a multipart upload."""

    original_name: str
    mime_type: str
    content: bytes


class UploadImagesRequest(BaseModel):
    """Upload images request."""

    files: list[ImageUpload]


class UploadImagesResponse(BaseModel):
    """Descriptors of the stored images, in upload order."""

    images: list[Image]

    def to_dict(self) -> dict[str, Any]:
        return {
            "images": [
                image.model_dump(mode="json", by_alias=True) for image in self.images
            ]
        }


class UploadImagesUseCase(BaseUseCase):
    """Use case for storing image files ahead of creating a post."""

    def __init__(
        self, image_storage: ImageStorage, storage_settings: StorageSettings
    ) -> None:
        """Initialize upload images use case.

        Args:
            image_storage: Storage receiving the files
            storage_settings: Upload limits
        """
        self.image_storage = image_storage
        self.max_files = storage_settings.max_files
        self.max_file_size = storage_settings.max_file_size

    def _validate(self, files: list[ImageUpload]) -> None:
        if not files:
            raise ValidationError("At least one image is required", field="images")
        if len(files) > self.max_files:
            raise ValidationError(
                f"At most {self.max_files} images can be uploaded at once",
                field="images",
            )

        for i, upload in enumerate(files):
            if not upload.original_name.strip():
                raise ValidationError(
                    "File name is required", field=f"images.{i}.originalName"
                )
            if upload.mime_type not in ALLOWED_IMAGE_MIME_TYPES:
                raise ValidationError(
                    "Image type must be one of: "
                    + ", ".join(sorted(ALLOWED_IMAGE_MIME_TYPES)),
                    field=f"images.{i}.mimeType",
                )
            if not upload.content:
                raise ValidationError("Image is empty", field=f"images.{i}.size")
            if len(upload.content) > self.max_file_size:
                raise ValidationError(
                    f"Image must be at most {self.max_file_size} bytes",
                    field=f"images.{i}.size",
                )

    async def execute(self, request: UploadImagesRequest) -> UploadImagesResponse:
        """Execute upload images flow.

        Every file is checked before any is stored. If storing one fails, the
        files already stored by this request are deleted again.

        Args:
            request: Upload images request

        Returns:
            One image descriptor per uploaded file

        Raises:
            ValidationError: If a file is missing, too large or not an image
            StorageError: If the storage fails
        """
        with logfire.span("upload_images.execute", files=len(request.files)):
            self._validate(request.files)

            images: list[Image] = []
            try:
                for upload in request.files:
                    images.append(
                        await self.image_storage.upload(
                            upload.content, upload.original_name, upload.mime_type
                        )
                    )
            except Exception:
                await self._discard(images)
                raise

            logfire.info(
                "Images uploaded",
                count=len(images),
                filenames=[image.filename for image in images],
            )
            return UploadImagesResponse(images=images)

    async def _discard(self, images: list[Image]) -> None:
        for image in images:
            try:
                await self.image_storage.delete(image.filename)
            except Exception as e:
                logfire.warn(
                    "Failed to delete image after upload failed",
                    filename=image.filename,
                    error=str(e),
                )
