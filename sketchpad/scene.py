"""Scene store: committed shapes, the preview shape and the active gesture.

Two backings share one store. With a :class:`~sketchpad.raster.Raster`
the store burns pencil segments and finalized shapes into pixels; without
one it keeps every segment as a committed shape and the renderer replays
them.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Callable, List, Optional, Tuple

from .raster import Raster
from .rendering import draw_shape
from .types import Point, Shape, ShapeKind, Tool, ToolSettings

logger = logging.getLogger(__name__)


@dataclass
class _Gesture:
    settings: ToolSettings
    anchor: Point
    cursor: Point


class SceneStore:
    """Ordered committed shapes plus at most one in-flight preview."""

    def __init__(
        self,
        raster: Optional[Raster] = None,
        request_repaint: Optional[Callable[[], None]] = None,
    ):
        self._raster = raster
        self._request_repaint = request_repaint
        self._committed: List[Shape] = []
        self._preview: Optional[Shape] = None
        self._gesture: Optional[_Gesture] = None

    # --- read access --------------------------------------------------------
    @property
    def committed(self) -> Tuple[Shape, ...]:
        return tuple(self._committed)

    @property
    def preview(self) -> Optional[Shape]:
        return self._preview

    @property
    def raster(self) -> Optional[Raster]:
        return self._raster

    @property
    def is_raster_backed(self) -> bool:
        return self._raster is not None

    @property
    def is_gesture_active(self) -> bool:
        return self._gesture is not None

    # --- mutation -----------------------------------------------------------
    def clear(self) -> None:
        """Drop all committed shapes, the preview and any active gesture."""
        self._committed.clear()
        self._preview = None
        self._gesture = None
        if self._raster is not None:
            self._raster.clear()
        logger.info("Canvas cleared")
        self._repaint()

    def begin_gesture(self, settings: ToolSettings, at: Point) -> None:
        if settings.tool is Tool.CLEAR:
            self.clear()
            return
        if self._gesture is not None:
            logger.warning("Gesture started while another was active; abandoning the previous one")
            self._preview = None

        self._gesture = _Gesture(settings=settings, anchor=at, cursor=at)
        kind = settings.tool.shape_kind
        if kind is not None:
            self._preview = Shape(kind, at, at, settings.color, is_preview=True)
            self._repaint()

    def update_gesture(self, at: Point) -> None:
        gesture = self._gesture
        if gesture is None:
            return

        gesture.cursor = at
        if gesture.settings.tool is Tool.PENCIL:
            segment = Shape(ShapeKind.LINE, gesture.anchor, at, gesture.settings.color)
            self._commit_segment(segment)
            gesture.anchor = at
        elif self._preview is not None:
            self._preview = replace(self._preview, cursor=at)
        self._repaint()

    def end_gesture(self, at: Point) -> None:
        gesture = self._gesture
        if gesture is None:
            return

        self._gesture = None
        kind = gesture.settings.tool.shape_kind
        if kind is not None:
            shape = Shape(kind, gesture.anchor, at, gesture.settings.color)
            self._burn(shape)
            self._committed.append(shape)
        self._preview = None
        self._repaint()

    def cancel_gesture(self) -> None:
        """Drop the active gesture and its preview without committing anything.

        Pencil segments already committed by earlier moves stay.
        """
        if self._gesture is None:
            return
        self._gesture = None
        self._preview = None
        self._repaint()

    # --- helpers ------------------------------------------------------------
    def _commit_segment(self, segment: Shape) -> None:
        if self._raster is not None:
            self._burn(segment)
        else:
            self._committed.append(segment)

    def _burn(self, shape: Shape) -> None:
        if self._raster is None:
            return
        with self._raster.painter() as painter:
            draw_shape(painter, shape)

    def _repaint(self) -> None:
        if self._request_repaint is not None:
            self._request_repaint()
