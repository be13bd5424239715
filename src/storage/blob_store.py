"""Image storage used by the image upload route."""

import logging
from pathlib import Path
from typing import Protocol
from uuid import uuid4

from src.core.exceptions import StorageError
from src.core.models import ImageUpload

logger = logging.getLogger(__name__)


class BlobStore(Protocol):
    def save_image(self, image: ImageUpload) -> str:
        """Store the image and return the URL it can be downloaded from. Raises StorageError."""
        ...


class LocalBlobStore:
    """Writes images to a local directory that is served under base_url."""

    def __init__(self, directory: str | Path, base_url: str) -> None:
        self.directory = Path(directory)
        self.base_url = base_url.rstrip("/")

    def save_image(self, image: ImageUpload) -> str:
        blob_name = f"{uuid4().hex}{Path(image.filename).suffix.lower()}"
        try:
            self.directory.mkdir(parents=True, exist_ok=True)
            (self.directory / blob_name).write_bytes(image.data)
        except OSError as e:
            logger.error("Could not write image %s to %s: %s", blob_name, self.directory, e)
            raise StorageError(f"Could not store image: {e.strerror or e}") from e
        return f"{self.base_url}/{blob_name}"
