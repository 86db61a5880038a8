"""Constants for Sketchpad rendering and file export."""

from typing import Tuple


STROKE_WIDTH = 2
PREVIEW_DASH_LENGTH = 3
BACKGROUND_COLOR = "#ffffff"

DEFAULT_CANVAS_SIZE: Tuple[int, int] = (850, 600)

WINDOW_TITLE = "Sketchpad"
