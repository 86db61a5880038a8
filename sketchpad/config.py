"""Runtime configuration from command-line flags and environment."""

from __future__ import annotations

import argparse
import logging
import os
from dataclasses import dataclass
from enum import Enum
from typing import Mapping, Optional, Sequence, Tuple

from .constants import DEFAULT_CANVAS_SIZE

LOG_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"


class Backing(Enum):
    """How committed content is kept between repaints."""

    RASTER = "raster"
    SHAPES = "shapes"


@dataclass(frozen=True)
class SketchpadConfig:
    backing: Backing = Backing.RASTER
    canvas_width: int = DEFAULT_CANVAS_SIZE[0]
    canvas_height: int = DEFAULT_CANVAS_SIZE[1]
    log_level: str = "WARNING"
    smoke: bool = False

    @property
    def canvas_size(self) -> Tuple[int, int]:
        return self.canvas_width, self.canvas_height


def parse_size(value: str) -> Tuple[int, int]:
    """Parse ``WIDTHxHEIGHT`` into a pair of positive ints."""
    parts = value.lower().split("x")
    if len(parts) != 2 or not all(p.strip().isdigit() for p in parts):
        raise ValueError(f"Invalid canvas size: {value}")
    width, height = (int(p) for p in parts)
    if width <= 0 or height <= 0:
        raise ValueError(f"Invalid canvas size: {value}")
    return width, height


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="sketchpad", description="Simple raster drawing application.")
    parser.add_argument(
        "--backing",
        choices=[b.value for b in Backing],
        help="Keep drawings in a raster or as a replayed shape list (default: raster).",
    )
    parser.add_argument("--size", help="Initial canvas size as WIDTHxHEIGHT (default: 850x600).")
    parser.add_argument("--log-level", dest="log_level", help="Logging level (default: WARNING).")
    parser.add_argument("--smoke", action="store_true", help="Build the window and exit.")
    return parser


def parse_config(
    argv: Optional[Sequence[str]] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> SketchpadConfig:
    """Build a :class:`SketchpadConfig`.

    Flags override ``SKETCHPAD_*`` environment variables. Arguments the
    parser does not know (Qt's own) are ignored.

    Raises:
        ValueError: on an unknown backing, size or log level.
    """
    if environ is None:
        environ = os.environ
    args, _unknown = _build_parser().parse_known_args(list(argv) if argv is not None else [])

    backing_name = args.backing or environ.get("SKETCHPAD_BACKING", Backing.RASTER.value)
    try:
        backing = Backing(backing_name.strip().lower())
    except ValueError:
        raise ValueError(f"Unknown backing: {backing_name}") from None

    size_value = args.size or environ.get("SKETCHPAD_CANVAS_SIZE")
    width, height = parse_size(size_value) if size_value else DEFAULT_CANVAS_SIZE

    log_level = (args.log_level or environ.get("SKETCHPAD_LOG_LEVEL", "WARNING")).upper()
    if not isinstance(logging.getLevelName(log_level), int):
        raise ValueError(f"Unknown log level: {log_level}")

    smoke = args.smoke or environ.get("SKETCHPAD_SMOKE") == "1"
    return SketchpadConfig(
        backing=backing,
        canvas_width=width,
        canvas_height=height,
        log_level=log_level,
        smoke=smoke,
    )


def configure_logging(level: str) -> None:
    logging.basicConfig(level=level, format=LOG_FORMAT)
