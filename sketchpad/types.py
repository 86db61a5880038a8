"""Data types for Sketchpad drawings.

This module contains the core value types shared by the scene store,
the gesture controller and the renderer.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


@dataclass(frozen=True)
class Point:
    """An integer pixel coordinate on the canvas."""

    x: int
    y: int


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle in canvas pixels."""

    x: int
    y: int
    width: int
    height: int


class Color(Enum):
    """Fixed drawing palette."""

    BLACK = ("#000000", "Black")
    RED = ("#ff0000", "Red")
    GREEN = ("#008000", "Green")
    BLUE = ("#0000ff", "Blue")
    YELLOW = ("#ffff00", "Yellow")

    @property
    def hex(self) -> str:
        return self.value[0]

    @property
    def label(self) -> str:
        return self.value[1]

    @classmethod
    def from_name(cls, name: str) -> "Color":
        try:
            return cls[name.strip().upper()]
        except KeyError:
            raise ValueError(f"Unknown color: {name}") from None


class ShapeKind(Enum):
    """Primitives the renderer knows how to stroke."""

    LINE = "line"
    RECTANGLE = "rectangle"
    CIRCLE = "circle"


class Tool(Enum):
    """Tools selectable from the toolbar."""

    PENCIL = "pencil"
    LINE = "line"
    RECTANGLE = "rectangle"
    CIRCLE = "circle"
    CLEAR = "clear"

    @property
    def shape_kind(self) -> Optional[ShapeKind]:
        """Shape drawn by a rubber-band tool, None for pencil and clear."""
        return _TOOL_SHAPES.get(self)

    @property
    def label(self) -> str:
        return self.value.capitalize()

    @classmethod
    def from_name(cls, name: str) -> "Tool":
        try:
            return cls(name.strip().lower())
        except ValueError:
            raise ValueError(f"Unknown tool: {name}") from None


_TOOL_SHAPES = {
    Tool.LINE: ShapeKind.LINE,
    Tool.RECTANGLE: ShapeKind.RECTANGLE,
    Tool.CIRCLE: ShapeKind.CIRCLE,
}


@dataclass(frozen=True)
class Shape:
    """One drawn primitive.

    ``anchor`` is the gesture start (first corner, circle center) and
    ``cursor`` the current or final pointer position (opposite corner,
    point on the circle).
    """

    kind: ShapeKind
    anchor: Point
    cursor: Point
    color: Color = Color.BLACK
    is_preview: bool = False


@dataclass(frozen=True)
class ToolSettings:
    """Tool and color captured when a gesture starts."""

    tool: Tool = Tool.PENCIL
    color: Color = Color.BLACK
