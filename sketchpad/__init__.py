"""Sketchpad raster drawing application built with PySide6 and QML.

The drawing core (scene store, gesture controller, renderer) is plain
Python over QPainter; the window is a thin QML layer on top of
:class:`SketchModel`.
"""

from .config import Backing, SketchpadConfig, parse_config
from .geometry import bounding_rectangle, circle_bounds
from .gestures import GestureController, GestureState, PointerEvent, PointerEventType
from .model import SketchModel
from .persistence import CanvasSaveError, ImageFormat, save_image
from .raster import Raster
from .rendering import render
from .scene import SceneStore
from .types import Color, Point, Rect, Shape, ShapeKind, Tool, ToolSettings
from .ui import create_sketchpad_window, main

__all__ = [
    "Backing",
    "CanvasSaveError",
    "Color",
    "GestureController",
    "GestureState",
    "ImageFormat",
    "Point",
    "PointerEvent",
    "PointerEventType",
    "Raster",
    "Rect",
    "SceneStore",
    "Shape",
    "ShapeKind",
    "SketchModel",
    "SketchpadConfig",
    "Tool",
    "ToolSettings",
    "bounding_rectangle",
    "circle_bounds",
    "create_sketchpad_window",
    "main",
    "parse_config",
    "render",
    "save_image",
]
