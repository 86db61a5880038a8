"""QtQuick item that paints a SketchModel's scene."""

from __future__ import annotations

from typing import Optional

from PySide6.QtCore import Property, QObject, QRectF, Signal
from PySide6.QtGui import QColor, QPainter
from PySide6.QtQuick import QQuickPaintedItem

from .constants import BACKGROUND_COLOR
from .model import SketchModel
from .rendering import paint_scene


class SketchCanvas(QQuickPaintedItem):
    """Canvas surface registered to QML as ``Sketchpad.SketchCanvas``."""

    modelChanged = Signal()

    def __init__(self, parent=None):
        super().__init__(parent)
        self._model: Optional[SketchModel] = None
        self.setAntialiasing(True)
        self.setFillColor(QColor(BACKGROUND_COLOR))

    @Property(QObject, notify=modelChanged)
    def model(self) -> Optional[SketchModel]:
        return self._model

    @model.setter  # type: ignore[no-redef]
    def model(self, value: Optional[SketchModel]) -> None:
        if value is self._model:
            return
        if self._model is not None:
            self._model.sceneChanged.disconnect(self.update)
        self._model = value
        if value is not None:
            value.sceneChanged.connect(self.update)
            self._report_size()
        self.modelChanged.emit()
        self.update()

    def paint(self, painter: QPainter) -> None:  # type: ignore[override]
        if self._model is None:
            return
        paint_scene(painter, self._model.scene)

    def geometryChange(self, new_geometry: QRectF, old_geometry: QRectF) -> None:  # type: ignore[override]
        super().geometryChange(new_geometry, old_geometry)
        self._report_size()

    def _report_size(self) -> None:
        if self._model is not None:
            self._model.resizeCanvas(self.width(), self.height())
