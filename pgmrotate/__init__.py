"""Rotate 8-bit grayscale PGM images onto a canvas that fits the whole result."""

from .errors import ErrorKind, FormatError, InvalidSize, IOFailure, OutOfBounds, RasterError, ShapeMismatch
from .geometry import BoundingBox, Placement, compute_rotated_bounds, rotate, rotate_raster
from .raster import Raster

__version__ = "0.1.0"

__all__ = [
    "BoundingBox",
    "ErrorKind",
    "FormatError",
    "IOFailure",
    "InvalidSize",
    "OutOfBounds",
    "Placement",
    "Raster",
    "RasterError",
    "ShapeMismatch",
    "compute_rotated_bounds",
    "rotate",
    "rotate_raster",
]
