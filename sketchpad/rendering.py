"""Scene rendering with QPainter.

Committed shapes are stroked solid, the in-progress preview dashed, so the
user can tell a rubber band from finished work.
"""

from __future__ import annotations

from typing import Optional, Tuple, TYPE_CHECKING

from PySide6.QtCore import QPoint, QRectF, Qt
from PySide6.QtGui import QColor, QImage, QPainter, QPen

from .constants import BACKGROUND_COLOR, DEFAULT_CANVAS_SIZE, PREVIEW_DASH_LENGTH, STROKE_WIDTH
from .geometry import bounding_rectangle, circle_bounds
from .raster import open_painter
from .types import Point, Rect, Shape, ShapeKind

if TYPE_CHECKING:
    from .scene import SceneStore


def _qpoint(point: Point) -> QPoint:
    return QPoint(point.x, point.y)


def _qrect(rect: Rect) -> QRectF:
    return QRectF(rect.x, rect.y, rect.width, rect.height)


def make_pen(shape: Shape) -> QPen:
    """Return the pen for ``shape``: solid when committed, dashed for previews."""
    pen = QPen(QColor(shape.color.hex), STROKE_WIDTH)
    pen.setJoinStyle(Qt.RoundJoin)
    if shape.is_preview:
        # Dash pattern entries are multiples of the pen width.
        dash = PREVIEW_DASH_LENGTH / STROKE_WIDTH
        pen.setCapStyle(Qt.FlatCap)
        pen.setDashPattern([dash, dash])
    else:
        pen.setCapStyle(Qt.RoundCap)
    return pen


def draw_shape(painter: QPainter, shape: Shape) -> None:
    """Stroke one shape with its kind-specific routine."""
    painter.setPen(make_pen(shape))
    painter.setBrush(Qt.NoBrush)
    if shape.kind is ShapeKind.LINE:
        painter.drawLine(_qpoint(shape.anchor), _qpoint(shape.cursor))
    elif shape.kind is ShapeKind.RECTANGLE:
        painter.drawRect(_qrect(bounding_rectangle(shape.anchor, shape.cursor)))
    elif shape.kind is ShapeKind.CIRCLE:
        painter.drawEllipse(_qrect(circle_bounds(shape.anchor, shape.cursor)))


def paint_scene(painter: QPainter, scene: "SceneStore", include_preview: bool = True) -> None:
    """Paint the scene onto an already opened painter.

    A raster-backed scene blits its raster as the base layer since committed
    shapes are already burned into it. A shape-list scene replays every
    committed shape in order.
    """
    painter.setRenderHint(QPainter.Antialiasing)
    raster = scene.raster
    if raster is not None:
        painter.drawImage(0, 0, raster.image)
    else:
        for shape in scene.committed:
            draw_shape(painter, shape)

    preview = scene.preview
    if include_preview and preview is not None:
        draw_shape(painter, preview)


def render(
    scene: "SceneStore",
    size: Optional[Tuple[int, int]] = None,
    include_preview: bool = True,
) -> QImage:
    """Return a fresh image of the scene. Never mutates ``scene``."""
    if size is None:
        size = scene.raster.size if scene.raster is not None else DEFAULT_CANVAS_SIZE
    width, height = size
    image = QImage(max(1, width), max(1, height), QImage.Format_RGB32)
    image.fill(QColor(BACKGROUND_COLOR))
    with open_painter(image) as painter:
        paint_scene(painter, scene, include_preview=include_preview)
    return image
