from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional, Tuple

from .codec import CodecRegistry
from .errors import IOFailure
from .geometry import BoundingBox, Placement, compute_rotated_bounds, rotate

DEFAULT_ANGLE = 30.0
DEFAULT_WORKERS = 1
DIAGNOSTIC_ANGLE = 45.0
DEFAULT_INPUT = str(Path(__file__).resolve().parent / "data" / "sample.pgm")
OUTPUT_SUFFIX = "_rotate"
ANGLE_ENV_VAR = "PGMROTATE_ANGLE"
WORKERS_ENV_VAR = "PGMROTATE_WORKERS"

logger = logging.getLogger(__name__)


@dataclass
class RotateSettings:
    angle: float = DEFAULT_ANGLE
    workers: int = DEFAULT_WORKERS
    diagnostic_angle: Optional[float] = DIAGNOSTIC_ANGLE

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "RotateSettings":
        if environ is None:
            environ = os.environ
        settings = cls()
        angle = environ.get(ANGLE_ENV_VAR)
        if angle:
            try:
                settings.angle = float(angle)
            except ValueError as exc:
                raise ValueError(f"{ANGLE_ENV_VAR} must be a number, got {angle!r}") from exc
        workers = environ.get(WORKERS_ENV_VAR)
        if workers:
            try:
                settings.workers = int(workers)
            except ValueError as exc:
                raise ValueError(f"{WORKERS_ENV_VAR} must be an integer, got {workers!r}") from exc
        return settings


@dataclass(frozen=True)
class RotationReport:
    input_path: str
    output_path: str
    source_size: Tuple[int, int]
    bounds: BoundingBox
    placement: Placement
    diagnostic_bounds: Optional[BoundingBox] = None


def default_output_path(input_path: str) -> str:
    """``photo.pgm`` -> ``photo_rotate.pgm``."""
    base, ext = os.path.splitext(input_path)
    return base + OUTPUT_SUFFIX + (ext or ".pgm")


class RotationJob:
    def __init__(self, settings: Optional[RotateSettings] = None, codecs: Optional[CodecRegistry] = None) -> None:
        self.settings = settings or RotateSettings()
        self.codecs = codecs or CodecRegistry()

    def run(self, input_path: str, output_path: Optional[str] = None) -> RotationReport:
        self._validate_input_path(input_path)
        if output_path is None:
            output_path = default_output_path(input_path)
        self.codecs.codec_for(output_path)

        src = self.codecs.load(input_path)
        angle = self.settings.angle
        bounds = compute_rotated_bounds(src.width, src.height, angle)
        placement = Placement.from_bounds(bounds)
        logger.debug("Bounds at %s degrees: %s -> %s", angle, bounds.min_corner, bounds.max_corner)

        diagnostic = self._diagnostic_bounds(src.width, src.height)

        dst = rotate(
            src,
            angle,
            placement.dest_width,
            placement.dest_height,
            placement.origin_offset_x,
            placement.origin_offset_y,
            workers=self.settings.workers,
        )
        self.codecs.save(dst, output_path)
        return RotationReport(
            input_path=input_path,
            output_path=output_path,
            source_size=(src.width, src.height),
            bounds=bounds,
            placement=placement,
            diagnostic_bounds=diagnostic,
        )

    def _diagnostic_bounds(self, width: int, height: int) -> Optional[BoundingBox]:
        # Reported only; never used to size the destination.
        if self.settings.diagnostic_angle is None:
            return None
        box = compute_rotated_bounds(width, height, self.settings.diagnostic_angle)
        logger.info(
            "Diagnostic bounds at %s degrees: offset (%.3f, %.3f), extent %.3f x %.3f",
            self.settings.diagnostic_angle,
            -box.min_corner[0],
            -box.min_corner[1],
            box.width,
            box.height,
        )
        return box

    @staticmethod
    def _validate_input_path(path: str) -> None:
        if not os.path.isfile(path):
            raise IOFailure(f"File not found: {path}")
