"""QML UI definition for Sketchpad."""

from __future__ import annotations

from pathlib import Path

QML_DIR = Path(__file__).with_name("qml_ui")
SKETCHPAD_QML_PATH = QML_DIR / "SketchpadWindow.qml"

QML_MODULE_URI = "Sketchpad"
QML_MODULE_VERSION = (1, 0)


def load_sketchpad_qml() -> str:
    """Return the Sketchpad QML source as a string."""
    return SKETCHPAD_QML_PATH.read_text(encoding="utf-8")


__all__ = [
    "QML_DIR",
    "QML_MODULE_URI",
    "QML_MODULE_VERSION",
    "SKETCHPAD_QML_PATH",
    "load_sketchpad_qml",
]
