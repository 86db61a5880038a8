"""Qt model exposing the drawing core to QML."""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

from PySide6.QtCore import Property, QObject, Signal, Slot
from PySide6.QtGui import QImage

from .config import Backing, SketchpadConfig
from .gestures import GestureController
from .persistence import CanvasSaveError, ImageFormat, format_for_filter, save_image
from .raster import Raster
from .rendering import render
from .scene import SceneStore
from .types import Color, Point, Tool, ToolSettings

logger = logging.getLogger(__name__)

TOOLBAR_TOOLS = (Tool.PENCIL, Tool.LINE, Tool.RECTANGLE, Tool.CIRCLE)


class SketchModel(QObject):
    """Owns the current tool and color, the scene and the gesture controller."""

    sceneChanged = Signal()
    toolChanged = Signal()
    colorChanged = Signal()
    saveCompleted = Signal(str)  # Emitted with file path after successful save
    errorOccurred = Signal(str)  # Emitted with error message on failure

    def __init__(self, config: Optional[SketchpadConfig] = None, parent: Optional[QObject] = None):
        super().__init__(parent)
        self._config = config or SketchpadConfig()
        self._tool = Tool.PENCIL
        self._color = Color.BLACK
        self._canvas_size = self._config.canvas_size

        raster = None
        if self._config.backing is Backing.RASTER:
            raster = Raster(*self._canvas_size)
        self._scene = SceneStore(raster=raster, request_repaint=self.sceneChanged.emit)
        self._controller = GestureController(self._scene, self.tool_settings)

    # --- plain Python access ------------------------------------------------
    @property
    def scene(self) -> SceneStore:
        return self._scene

    @property
    def canvas_size(self) -> Tuple[int, int]:
        return self._canvas_size

    @property
    def controller(self) -> GestureController:
        return self._controller

    def tool_settings(self) -> ToolSettings:
        return ToolSettings(tool=self._tool, color=self._color)

    def export_image(self) -> QImage:
        """Return the committed drawing without any in-progress preview."""
        raster = self._scene.raster
        if raster is not None:
            return raster.copy()
        return render(self._scene, self._canvas_size, include_preview=False)

    # --- Properties exposed to QML -----------------------------------------
    @Property(str, notify=toolChanged)
    def currentTool(self) -> str:
        return self._tool.value

    @currentTool.setter  # type: ignore[no-redef]
    def currentTool(self, value: str) -> None:
        self.setTool(value)

    @Property(str, notify=colorChanged)
    def currentColor(self) -> str:
        return self._color.name.lower()

    @currentColor.setter  # type: ignore[no-redef]
    def currentColor(self, value: str) -> None:
        self.setColor(value)

    @Property(str, notify=colorChanged)
    def currentColorValue(self) -> str:
        return self._color.hex

    @Property(list, constant=True)
    def tools(self) -> List[Dict[str, Any]]:
        return [{"name": tool.value, "label": tool.label} for tool in TOOLBAR_TOOLS]

    @Property(list, constant=True)
    def colors(self) -> List[Dict[str, Any]]:
        return [
            {"name": color.name.lower(), "label": color.label, "value": color.hex}
            for color in Color
        ]

    @Property(int, notify=sceneChanged)
    def committedCount(self) -> int:
        return len(self._scene.committed)

    @Property(bool, notify=sceneChanged)
    def hasPreview(self) -> bool:
        return self._scene.preview is not None

    @Property(bool, constant=True)
    def rasterBacked(self) -> bool:
        return self._scene.is_raster_backed

    # --- toolbar slots ------------------------------------------------------
    @Slot(str)
    def setTool(self, name: str) -> None:
        try:
            tool = Tool.from_name(name)
        except ValueError as exc:
            logger.warning("%s", exc)
            return
        if tool is not self._tool:
            self._tool = tool
            self.toolChanged.emit()

    @Slot(str)
    def setColor(self, name: str) -> None:
        try:
            color = Color.from_name(name)
        except ValueError as exc:
            logger.warning("%s", exc)
            return
        if color is not self._color:
            self._color = color
            self.colorChanged.emit()

    @Slot()
    def clearCanvas(self) -> None:
        self._scene.clear()

    @Slot(str, result=bool)
    @Slot(str, int, result=bool)
    def saveImage(self, path: str, filter_index: int = -1) -> bool:
        """Write the drawing to ``path``; report the outcome through signals.

        ``filter_index`` is the save dialog filter the user picked. It decides
        the format when ``path`` has no recognized extension of its own.
        """
        image_format = None
        if ImageFormat.from_path(path) is None:
            image_format = format_for_filter(filter_index)
        try:
            saved_path = save_image(self.export_image(), path, image_format)
        except CanvasSaveError as exc:
            error_msg = f"Failed to save image: {exc}"
            logger.error(error_msg)
            self.errorOccurred.emit(error_msg)
            return False
        self.saveCompleted.emit(saved_path)
        return True

    # --- canvas slots -------------------------------------------------------
    @Slot(float, float)
    def pointerPressed(self, x: float, y: float) -> None:
        self._controller.pointer_down(Point(round(x), round(y)))

    @Slot(float, float)
    def pointerMoved(self, x: float, y: float) -> None:
        self._controller.pointer_move(Point(round(x), round(y)))

    @Slot(float, float)
    def pointerReleased(self, x: float, y: float) -> None:
        self._controller.pointer_up(Point(round(x), round(y)))

    @Slot()
    def cancelGesture(self) -> None:
        self._controller.cancel()

    @Slot(float, float)
    def resizeCanvas(self, width: float, height: float) -> None:
        """Follow the canvas item size; the raster only ever grows."""
        if width <= 0 or height <= 0:
            return
        self._canvas_size = (
            max(self._canvas_size[0], int(width)),
            max(self._canvas_size[1], int(height)),
        )
        raster = self._scene.raster
        if raster is not None and raster.ensure_size(*self._canvas_size):
            self.sceneChanged.emit()
