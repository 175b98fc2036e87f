from __future__ import annotations

import logging
import math
from concurrent.futures import ThreadPoolExecutor
from typing import List, Tuple

import numpy as np

from ..errors import InvalidSize
from ..raster import Raster
from .bounds import Placement, placement_for, rotation_terms

BACKGROUND = 0
DEFAULT_WORKERS = 1

logger = logging.getLogger(__name__)


def source_coordinate(
    dx: int,
    dy: int,
    angle: float,
    origin_offset_x: float,
    origin_offset_y: float,
) -> Tuple[int, int]:
    """Map one destination pixel back to its nearest source pixel."""
    cos_t, sin_t = rotation_terms(-angle)
    ux = dx - origin_offset_x
    uy = dy - origin_offset_y
    sx = ux * cos_t - uy * sin_t
    sy = ux * sin_t + uy * cos_t
    return int(math.floor(sx + 0.5)), int(math.floor(sy + 0.5))


def _resample_band(
    source: np.ndarray,
    dest: np.ndarray,
    row_start: int,
    row_stop: int,
    cos_t: float,
    sin_t: float,
    origin_offset_x: float,
    origin_offset_y: float,
) -> None:
    """Fill destination rows ``[row_start, row_stop)``.

    Reads only ``source`` and writes only its own rows of ``dest``.
    """
    height, width = source.shape
    dest_width = dest.shape[1]
    dy, dx = np.mgrid[row_start:row_stop, 0:dest_width]
    ux = dx - origin_offset_x
    uy = dy - origin_offset_y
    sx = np.floor(ux * cos_t - uy * sin_t + 0.5).astype(np.intp)
    sy = np.floor(ux * sin_t + uy * cos_t + 0.5).astype(np.intp)
    inside = (sx >= 0) & (sx < width) & (sy >= 0) & (sy < height)
    band = np.full(inside.shape, BACKGROUND, dtype=np.uint8)
    band[inside] = source[sy[inside], sx[inside]]
    dest[row_start:row_stop, :] = band


def _bands(height: int, workers: int) -> List[Tuple[int, int]]:
    count = max(1, min(workers, height))
    step = -(-height // count)
    return [(start, min(start + step, height)) for start in range(0, height, step)]


def rotate(
    src: Raster,
    angle: float,
    dest_width: int,
    dest_height: int,
    origin_offset_x: float,
    origin_offset_y: float,
    workers: int = DEFAULT_WORKERS,
) -> Raster:
    """Rotate ``src`` by ``angle`` degrees into a new raster.

    Every destination pixel is translated by the negated origin offset, mapped
    through the inverse rotation and rounded to the nearest source pixel.
    Pixels that land outside the source get ``BACKGROUND``.
    """
    if dest_width <= 0 or dest_height <= 0:
        raise InvalidSize(f"Invalid destination size {dest_width}x{dest_height}")
    if workers < 1:
        raise ValueError("workers must be at least 1")
    cos_t, sin_t = rotation_terms(-angle)
    source = src.view()
    dst = Raster.allocate(dest_width, dest_height)
    dest = dst.samples[:, :dest_width]
    bands = _bands(dest_height, workers)
    logger.debug(
        "Resampling %dx%d -> %dx%d at %s degrees in %d band(s)",
        src.width, src.height, dest_width, dest_height, angle, len(bands),
    )
    args = (cos_t, sin_t, origin_offset_x, origin_offset_y)
    if len(bands) == 1:
        _resample_band(source, dest, 0, dest_height, *args)
        return dst
    with ThreadPoolExecutor(max_workers=len(bands)) as executor:
        futures = [
            executor.submit(_resample_band, source, dest, start, stop, *args)
            for start, stop in bands
        ]
        for future in futures:
            future.result()
    return dst


def rotate_raster(src: Raster, angle: float, workers: int = DEFAULT_WORKERS) -> Tuple[Raster, Placement]:
    """Rotate ``src`` onto a canvas sized from its rotated bounding box."""
    placement = placement_for(src.width, src.height, angle)
    dst = rotate(
        src,
        angle,
        placement.dest_width,
        placement.dest_height,
        placement.origin_offset_x,
        placement.origin_offset_y,
        workers=workers,
    )
    return dst, placement
