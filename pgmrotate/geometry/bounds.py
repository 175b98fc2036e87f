from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Tuple

from ..errors import InvalidSize

# Relative distance below which an extent is treated as the nearest integer.
EXTENT_TOLERANCE = 1e-9

_QUARTER_TURNS = {
    0.0: (1.0, 0.0),
    90.0: (0.0, 1.0),
    180.0: (-1.0, 0.0),
    270.0: (0.0, -1.0),
}


def rotation_terms(angle: float) -> Tuple[float, float]:
    """Return ``(cos, sin)`` for an angle in degrees.

    The angle is reduced modulo 360 and quarter turns are exact, so 360
    degrees maps to exactly the same terms as 0.
    """
    angle = float(angle) % 360.0
    exact = _QUARTER_TURNS.get(angle)
    if exact is not None:
        return exact
    theta = math.radians(angle)
    return math.cos(theta), math.sin(theta)


def rotate_point(x: float, y: float, angle: float) -> Tuple[float, float]:
    """Rotate ``(x, y)`` about the origin by ``angle`` degrees."""
    cos_t, sin_t = rotation_terms(angle)
    return x * cos_t - y * sin_t, x * sin_t + y * cos_t


@dataclass(frozen=True)
class BoundingBox:
    min_corner: Tuple[float, float]
    max_corner: Tuple[float, float]

    @property
    def width(self) -> float:
        return self.max_corner[0] - self.min_corner[0]

    @property
    def height(self) -> float:
        return self.max_corner[1] - self.min_corner[1]


@dataclass(frozen=True)
class Placement:
    """Destination canvas size and the translation into it."""

    dest_width: int
    dest_height: int
    origin_offset_x: float
    origin_offset_y: float

    @classmethod
    def from_bounds(cls, box: BoundingBox) -> "Placement":
        """Canvas size is ``ceil`` of the box extents, offset is ``-min_corner``.

        An extent within ``EXTENT_TOLERANCE`` (relative) of an integer is
        taken as that integer, so trigonometric rounding noise does not add
        an empty row or column.
        """
        return cls(
            dest_width=_ceil_extent(box.width),
            dest_height=_ceil_extent(box.height),
            origin_offset_x=-box.min_corner[0],
            origin_offset_y=-box.min_corner[1],
        )

    @property
    def origin_offset(self) -> Tuple[float, float]:
        return self.origin_offset_x, self.origin_offset_y


def _ceil_extent(extent: float) -> int:
    nearest = round(extent)
    if abs(extent - nearest) <= EXTENT_TOLERANCE * max(1.0, abs(extent)):
        return int(nearest)
    return int(math.ceil(extent))


def compute_rotated_bounds(width: float, height: float, angle: float) -> BoundingBox:
    """Bounding box of a ``width`` x ``height`` rectangle rotated about (0, 0).

    The rectangle is rotated about its origin corner, not its centre, so the
    box also carries the translation needed to bring the rotated content back
    into non-negative coordinates (see ``Placement.origin_offset``).
    """
    if width <= 0 or height <= 0:
        raise InvalidSize(f"Invalid rectangle size {width}x{height}")
    corners = [
        rotate_point(x, y, angle)
        for x, y in ((0.0, 0.0), (width, 0.0), (0.0, height), (width, height))
    ]
    xs = [x for x, _ in corners]
    ys = [y for _, y in corners]
    return BoundingBox(min_corner=(min(xs), min(ys)), max_corner=(max(xs), max(ys)))


def placement_for(width: float, height: float, angle: float) -> Placement:
    return Placement.from_bounds(compute_rotated_bounds(width, height, angle))
