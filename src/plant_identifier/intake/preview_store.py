"""
Preview handles for selected images.

A handle is an opaque "blob:" string that the UI resolves back to a
locally viewable file, so views never hold file paths directly.
"""
import logging
import uuid
from pathlib import Path
from typing import Dict

from .image_file import ImageFile

logger = logging.getLogger(__name__)


class PreviewStore:
    """Allocates and releases preview handles."""

    PREFIX = "blob:"

    def __init__(self):
        self._previews: Dict[str, Path] = {}

    def create(self, image: ImageFile) -> str:
        """Allocate a new handle for the image."""
        handle = f"{self.PREFIX}{uuid.uuid4()}"
        self._previews[handle] = image.path
        logger.debug(f"Created preview {handle} for {image.name}")
        return handle

    def resolve(self, handle: str) -> Path:
        """
        Get the file behind a handle.

        :raises KeyError: If the handle was never created or already released
        """
        return self._previews[handle]

    def release(self, handle: str) -> None:
        """Release a handle. Unknown handles are ignored."""
        if self._previews.pop(handle, None) is not None:
            logger.debug(f"Released preview {handle}")

    def release_all(self) -> None:
        self._previews.clear()

    def __contains__(self, handle: str) -> bool:
        return handle in self._previews

    def __len__(self) -> int:
        return len(self._previews)
