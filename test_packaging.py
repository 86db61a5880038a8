"""Packaging regression tests."""

import re
from pathlib import Path


def _pyproject() -> str:
    return Path(__file__).with_name("pyproject.toml").read_text(encoding="utf-8")


def test_qml_files_are_packaged():
    match = re.search(r"\[tool\.setuptools\.package-data\]\s*sketchpad\s*=\s*\[(.*?)\]", _pyproject(), flags=re.DOTALL)
    assert match is not None, "package-data for sketchpad is missing from pyproject.toml"
    patterns = re.findall(r'"([^"]+)"', match.group(1))
    qml_dir = Path(__file__).with_name("sketchpad")
    packaged = {path for pattern in patterns for path in qml_dir.glob(pattern)}
    assert qml_dir / "qml_ui" / "SketchpadWindow.qml" in packaged


def test_runtime_dependencies_declared():
    assert '"PySide6' in _pyproject()
