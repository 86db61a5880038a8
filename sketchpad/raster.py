"""Persistent pixel buffer that pencil strokes and shapes are burned into."""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Iterator, Tuple

from PySide6.QtGui import QColor, QImage, QPainter, QPaintDevice

from .constants import BACKGROUND_COLOR, DEFAULT_CANVAS_SIZE

logger = logging.getLogger(__name__)


@contextmanager
def open_painter(device: QPaintDevice, antialias: bool = True) -> Iterator[QPainter]:
    """Yield a QPainter on ``device`` and always end it on exit."""
    painter = QPainter(device)
    try:
        if antialias:
            painter.setRenderHint(QPainter.Antialiasing)
        yield painter
    finally:
        painter.end()


class Raster:
    """White RGB image owned by the canvas.

    Content is not replayable: once a segment is burned in, only
    :meth:`clear` removes it.
    """

    def __init__(self, width: int = DEFAULT_CANVAS_SIZE[0], height: int = DEFAULT_CANVAS_SIZE[1]):
        self._image = QImage(max(1, width), max(1, height), QImage.Format_RGB32)
        self._image.fill(QColor(BACKGROUND_COLOR))

    @property
    def image(self) -> QImage:
        return self._image

    @property
    def size(self) -> Tuple[int, int]:
        return self._image.width(), self._image.height()

    def clear(self) -> None:
        self._image.fill(QColor(BACKGROUND_COLOR))

    @contextmanager
    def painter(self) -> Iterator[QPainter]:
        """Scoped painter for burning content into the raster."""
        with open_painter(self._image) as painter:
            yield painter

    def ensure_size(self, width: int, height: int) -> bool:
        """Grow the buffer to at least ``width`` x ``height``.

        Existing pixels stay anchored at the origin. Returns True when the
        buffer was reallocated.
        """
        current_width, current_height = self.size
        new_width = max(current_width, int(width))
        new_height = max(current_height, int(height))
        if (new_width, new_height) == (current_width, current_height):
            return False

        grown = QImage(new_width, new_height, QImage.Format_RGB32)
        grown.fill(QColor(BACKGROUND_COLOR))
        with open_painter(grown, antialias=False) as painter:
            painter.drawImage(0, 0, self._image)
        self._image = grown
        logger.debug("Raster grown to %dx%d", new_width, new_height)
        return True

    def copy(self) -> QImage:
        return self._image.copy()
