"""Image export for the canvas."""

from __future__ import annotations

import logging
import os
from enum import Enum
from typing import List, Optional, Tuple

from PySide6.QtCore import QUrl
from PySide6.QtGui import QImage, QImageWriter

logger = logging.getLogger(__name__)

JPEG_QUALITY = 95


class CanvasSaveError(Exception):
    """Raised when the canvas image cannot be encoded or written."""


class ImageFormat(Enum):
    """Export formats offered by the save dialog."""

    PNG = ("PNG", (".png",))
    JPEG = ("JPEG", (".jpg", ".jpeg"))
    BMP = ("BMP", (".bmp",))

    @property
    def qt_name(self) -> str:
        return self.value[0]

    @property
    def extensions(self) -> Tuple[str, ...]:
        return self.value[1]

    @property
    def name_filter(self) -> str:
        patterns = " ".join(f"*{ext}" for ext in self.extensions)
        return f"{self.qt_name} files ({patterns})"

    @classmethod
    def from_path(cls, path: str) -> Optional["ImageFormat"]:
        _, ext = os.path.splitext(path)
        ext = ext.lower()
        for image_format in cls:
            if ext in image_format.extensions:
                return image_format
        return None


SAVE_NAME_FILTERS: List[str] = [image_format.name_filter for image_format in ImageFormat]


def format_for_filter(index: int) -> Optional[ImageFormat]:
    """Map a save dialog filter index to its format; None when out of range."""
    formats = list(ImageFormat)
    if 0 <= index < len(formats):
        return formats[index]
    return None


def _to_local_path(path: str) -> str:
    if path.startswith("file:"):
        return QUrl(path).toLocalFile()
    return path


def resolve_save_target(
    path: str,
    image_format: Optional[ImageFormat] = None,
) -> Tuple[str, ImageFormat]:
    """Return the local file path and format to write.

    An explicit ``image_format`` wins. Otherwise the extension decides. A
    path without a recognized extension gets the extension of the format
    used, ``.png`` by default.
    """
    local_path = _to_local_path(path.strip())
    if not local_path:
        raise CanvasSaveError("No file name given")

    detected = ImageFormat.from_path(local_path)
    if image_format is None:
        image_format = detected or ImageFormat.PNG
    if detected is None:
        local_path += image_format.extensions[0]
    return local_path, image_format


def save_image(image: QImage, path: str, image_format: Optional[ImageFormat] = None) -> str:
    """Encode ``image`` to disk and return the path written.

    Raises:
        CanvasSaveError: if there is nothing to save, the target directory is
            missing, or the encoder fails.
    """
    if image.isNull():
        raise CanvasSaveError("Canvas image is empty")

    target, image_format = resolve_save_target(path, image_format)
    directory = os.path.dirname(os.path.abspath(target))
    if not os.path.isdir(directory):
        raise CanvasSaveError(f"Directory does not exist: {directory}")

    writer = QImageWriter(target, image_format.qt_name.encode("ascii"))
    if image_format is ImageFormat.JPEG:
        writer.setQuality(JPEG_QUALITY)
    if not writer.write(image):
        raise CanvasSaveError(f"Could not write {image_format.qt_name} to {target}: {writer.errorString()}")

    logger.info("Saved %s image to %s", image_format.qt_name, target)
    return target
