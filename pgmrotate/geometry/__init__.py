from .bounds import (
    BoundingBox,
    Placement,
    compute_rotated_bounds,
    placement_for,
    rotate_point,
    rotation_terms,
)
from .resample import BACKGROUND, rotate, rotate_raster, source_coordinate

__all__ = [
    "BACKGROUND",
    "BoundingBox",
    "Placement",
    "compute_rotated_bounds",
    "placement_for",
    "rotate",
    "rotate_point",
    "rotate_raster",
    "rotation_terms",
    "source_coordinate",
]
