"""Tests for canvas image export."""

import pytest
from PySide6.QtCore import QUrl
from PySide6.QtGui import QColor, QImage

from sketchpad.persistence import (
    SAVE_NAME_FILTERS,
    CanvasSaveError,
    ImageFormat,
    format_for_filter,
    resolve_save_target,
    save_image,
)


@pytest.fixture
def image(app):
    img = QImage(40, 30, QImage.Format_RGB32)
    img.fill(QColor("#0000ff"))
    return img


class TestImageFormat:
    @pytest.mark.parametrize(
        "path,expected",
        [
            ("drawing.png", ImageFormat.PNG),
            ("DRAWING.PNG", ImageFormat.PNG),
            ("photo.jpg", ImageFormat.JPEG),
            ("photo.jpeg", ImageFormat.JPEG),
            ("bitmap.bmp", ImageFormat.BMP),
            ("notes.txt", None),
            ("noext", None),
        ],
    )
    def test_from_path(self, path, expected):
        assert ImageFormat.from_path(path) is expected

    def test_name_filters(self):
        assert SAVE_NAME_FILTERS == [
            "PNG files (*.png)",
            "JPEG files (*.jpg *.jpeg)",
            "BMP files (*.bmp)",
        ]


@pytest.mark.parametrize(
    "index,expected",
    [(0, ImageFormat.PNG), (1, ImageFormat.JPEG), (2, ImageFormat.BMP), (-1, None), (3, None)],
)
def test_format_for_filter(index, expected):
    assert format_for_filter(index) is expected


class TestResolveSaveTarget:
    def test_extension_decides(self):
        assert resolve_save_target("/tmp/a.bmp") == ("/tmp/a.bmp", ImageFormat.BMP)

    def test_unknown_extension_defaults_to_png(self):
        assert resolve_save_target("/tmp/a") == ("/tmp/a.png", ImageFormat.PNG)

    def test_explicit_format_wins(self):
        assert resolve_save_target("/tmp/a.png", ImageFormat.JPEG) == ("/tmp/a.png", ImageFormat.JPEG)

    def test_explicit_format_names_bare_path(self):
        assert resolve_save_target("/tmp/a", ImageFormat.BMP) == ("/tmp/a.bmp", ImageFormat.BMP)

    def test_file_url(self, tmp_path):
        target = tmp_path / "a.jpg"
        url = QUrl.fromLocalFile(str(target)).toString()
        assert resolve_save_target(url) == (str(target), ImageFormat.JPEG)

    def test_empty_path(self):
        with pytest.raises(CanvasSaveError):
            resolve_save_target("  ")


class TestSaveImage:
    @pytest.mark.parametrize("name", ["out.png", "out.jpg", "out.bmp"])
    def test_writes_readable_file(self, image, tmp_path, name):
        target = tmp_path / name
        written = save_image(image, str(target))
        assert written == str(target)

        loaded = QImage(written)
        assert not loaded.isNull()
        assert (loaded.width(), loaded.height()) == (40, 30)

    def test_png_round_trip_pixels(self, image, tmp_path):
        written = save_image(image, str(tmp_path / "blue.png"))
        assert QImage(written).pixelColor(5, 5) == QColor("#0000ff")

    def test_appends_png_suffix(self, image, tmp_path):
        written = save_image(image, str(tmp_path / "drawing"))
        assert written.endswith("drawing.png")
        assert (tmp_path / "drawing.png").exists()

    def test_missing_directory(self, image, tmp_path):
        with pytest.raises(CanvasSaveError, match="Directory does not exist"):
            save_image(image, str(tmp_path / "missing" / "out.png"))

    def test_null_image(self, tmp_path):
        with pytest.raises(CanvasSaveError, match="empty"):
            save_image(QImage(), str(tmp_path / "out.png"))

    def test_write_failure_is_reported(self, image, tmp_path):
        # A directory in place of the file cannot be opened for writing.
        blocker = tmp_path / "taken.png"
        blocker.mkdir()
        with pytest.raises(CanvasSaveError, match="Could not write PNG"):
            save_image(image, str(blocker))
