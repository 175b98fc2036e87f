from __future__ import annotations

from enum import Enum


class ErrorKind(Enum):
    INVALID_SIZE = "invalid_size"
    OUT_OF_BOUNDS = "out_of_bounds"
    SHAPE_MISMATCH = "shape_mismatch"
    FORMAT_ERROR = "format_error"
    IO_FAILURE = "io_failure"


class RasterError(Exception):
    """Base class for every error raised by the rotation pipeline."""

    kind: ErrorKind


class InvalidSize(RasterError, ValueError):
    kind = ErrorKind.INVALID_SIZE


class OutOfBounds(RasterError, IndexError):
    kind = ErrorKind.OUT_OF_BOUNDS


class ShapeMismatch(RasterError, ValueError):
    kind = ErrorKind.SHAPE_MISMATCH


class FormatError(RasterError, ValueError):
    kind = ErrorKind.FORMAT_ERROR


class IOFailure(RasterError, OSError):
    kind = ErrorKind.IO_FAILURE
