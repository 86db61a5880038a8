"""UI creation functions for Sketchpad."""

from __future__ import annotations

import logging
import sys
from typing import Optional, Sequence

from PySide6.QtCore import QUrl
from PySide6.QtQml import QQmlApplicationEngine, qmlRegisterType

from .canvas import SketchCanvas
from .config import configure_logging, parse_config
from .constants import WINDOW_TITLE
from .model import SketchModel
from .persistence import SAVE_NAME_FILTERS
from .qml import QML_MODULE_URI, QML_MODULE_VERSION, SKETCHPAD_QML_PATH

logger = logging.getLogger(__name__)

_types_registered = False


def register_qml_types() -> None:
    """Make ``SketchCanvas`` importable from QML; safe to call repeatedly."""
    global _types_registered
    if _types_registered:
        return
    major, minor = QML_MODULE_VERSION
    qmlRegisterType(SketchCanvas, QML_MODULE_URI, major, minor, "SketchCanvas")
    _types_registered = True


def create_sketchpad_window(sketch_model: SketchModel) -> QQmlApplicationEngine:
    """Create and return a QQmlApplicationEngine hosting the Sketchpad UI."""
    register_qml_types()
    width, height = sketch_model.canvas_size
    engine = QQmlApplicationEngine()
    context = engine.rootContext()
    context.setContextProperty("sketchModel", sketch_model)
    context.setContextProperty("saveNameFilters", SAVE_NAME_FILTERS)
    context.setContextProperty("windowTitle", WINDOW_TITLE)
    context.setContextProperty("canvasWidth", width)
    context.setContextProperty("canvasHeight", height)
    engine.load(QUrl.fromLocalFile(str(SKETCHPAD_QML_PATH)))
    return engine


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point for Sketchpad."""
    from PySide6.QtWidgets import QApplication

    if argv is None:
        argv = sys.argv
    try:
        config = parse_config(argv[1:])
    except ValueError as exc:
        print(f"sketchpad: {exc}", file=sys.stderr)
        return 2
    configure_logging(config.log_level)

    app = QApplication.instance()
    if app is None:
        app = QApplication(list(argv))

    sketch_model = SketchModel(config)
    engine = create_sketchpad_window(sketch_model)
    if not engine.rootObjects():
        logger.error("Failed to load %s", SKETCHPAD_QML_PATH)
        return 1

    if config.smoke:
        return 0

    logger.info("Sketchpad started with %s backing", config.backing.value)
    return app.exec()
