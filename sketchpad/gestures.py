"""Pointer gesture state machine.

The controller turns typed pointer events into scene store calls. It does
not know about any widget toolkit; the host feeds it ``PointerEvent``s and
supplies the current tool and color through a settings provider.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Callable, Optional

from .scene import SceneStore
from .types import Point, Tool, ToolSettings

logger = logging.getLogger(__name__)


class PointerEventType(Enum):
    DOWN = "down"
    MOVE = "move"
    UP = "up"
    CANCEL = "cancel"


@dataclass(frozen=True)
class PointerEvent:
    type: PointerEventType
    location: Point


class GestureState(Enum):
    IDLE = "idle"
    DRAWING = "drawing"


class GestureController:
    """Idle/Drawing state machine driving a :class:`SceneStore`.

    Settings are read once per gesture, on pointer down, so switching tool
    or color mid-drag only affects the next gesture.
    """

    def __init__(self, scene: SceneStore, settings_provider: Callable[[], ToolSettings]):
        self._scene = scene
        self._settings_provider = settings_provider
        self._state = GestureState.IDLE
        self._settings: Optional[ToolSettings] = None

    @property
    def state(self) -> GestureState:
        return self._state

    @property
    def active_settings(self) -> Optional[ToolSettings]:
        """Settings captured for the gesture in progress."""
        return self._settings

    def dispatch(self, event: PointerEvent) -> None:
        if event.type is PointerEventType.DOWN:
            self._on_down(event.location)
        elif self._state is GestureState.IDLE:
            logger.debug("Ignoring %s with no active gesture", event.type.value)
        elif event.type is PointerEventType.MOVE:
            self._scene.update_gesture(event.location)
        elif event.type is PointerEventType.UP:
            self._scene.end_gesture(event.location)
            self._state = GestureState.IDLE
            self._settings = None
            logger.debug("Gesture ended at (%d, %d)", event.location.x, event.location.y)
        elif event.type is PointerEventType.CANCEL:
            self._scene.cancel_gesture()
            self._state = GestureState.IDLE
            self._settings = None
            logger.debug("Gesture cancelled")

    def pointer_down(self, location: Point) -> None:
        self.dispatch(PointerEvent(PointerEventType.DOWN, location))

    def pointer_move(self, location: Point) -> None:
        self.dispatch(PointerEvent(PointerEventType.MOVE, location))

    def pointer_up(self, location: Point) -> None:
        self.dispatch(PointerEvent(PointerEventType.UP, location))

    def cancel(self) -> None:
        """Abandon the active gesture, e.g. when the host loses the pointer grab."""
        self.dispatch(PointerEvent(PointerEventType.CANCEL, Point(0, 0)))

    def _on_down(self, location: Point) -> None:
        if self._state is GestureState.DRAWING:
            logger.debug("Ignoring pointer down during an active gesture")
            return

        settings = self._settings_provider()
        if settings.tool is Tool.CLEAR:
            self._scene.clear()
            return

        self._scene.begin_gesture(settings, location)
        self._settings = settings
        self._state = GestureState.DRAWING
        logger.debug(
            "Gesture started: tool=%s color=%s at (%d, %d)",
            settings.tool.value,
            settings.color.name.lower(),
            location.x,
            location.y,
        )
