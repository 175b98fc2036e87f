from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np

from ..errors import InvalidSize, OutOfBounds, ShapeMismatch


@dataclass(frozen=True, eq=False)
class Raster:
    """Row-major 8-bit grayscale buffer with a row stride.

    ``samples`` holds ``height`` rows of ``stride`` bytes; only the first
    ``width`` columns of each row are image content.
    """

    samples: np.ndarray
    width: int

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        """Validate dimensions against the sample grid."""
        if self.width <= 0:
            raise InvalidSize("Width must be greater than zero")
        if self.samples.ndim != 2 or self.samples.shape[0] <= 0:
            raise InvalidSize("Height must be greater than zero")
        if self.samples.shape[1] < self.width:
            raise InvalidSize("Stride must not be smaller than width")
        if self.samples.dtype != np.uint8:
            raise InvalidSize(f"Expected uint8 samples, got {self.samples.dtype}")

    def __eq__(self, other: object) -> bool:
        # Content equality; stride padding is ignored.
        if not isinstance(other, Raster):
            return NotImplemented
        return self.size == other.size and bool(np.array_equal(self.view(), other.view()))

    __hash__ = None

    @property
    def height(self) -> int:
        return int(self.samples.shape[0])

    @property
    def stride(self) -> int:
        return int(self.samples.shape[1])

    @property
    def size(self) -> Tuple[int, int]:
        return self.width, self.height

    @classmethod
    def allocate(cls, width: int, height: int, stride: Optional[int] = None) -> "Raster":
        """Allocate a zero-filled raster."""
        if width <= 0 or height <= 0:
            raise InvalidSize(f"Invalid raster size {width}x{height}")
        if stride is None:
            stride = width
        if stride < width:
            raise InvalidSize(f"Stride {stride} is smaller than width {width}")
        return cls(np.zeros((height, stride), dtype=np.uint8), width)

    @classmethod
    def from_array(cls, array) -> "Raster":
        """Copy a 2-D array of 8-bit samples into a new raster."""
        data = np.array(array, dtype=np.uint8, copy=True)
        if data.ndim != 2 or data.size == 0:
            raise InvalidSize(f"Expected a non-empty 2-D array, got shape {data.shape}")
        return cls(np.ascontiguousarray(data), int(data.shape[1]))

    def _check(self, x: int, y: int) -> None:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise OutOfBounds(f"Pixel ({x}, {y}) outside {self.width}x{self.height} raster")

    def get(self, x: int, y: int) -> int:
        self._check(x, y)
        return int(self.samples[y, x])

    def set(self, x: int, y: int, value: int) -> None:
        self._check(x, y)
        if not 0 <= value <= 255:
            raise ValueError(f"Sample value {value} outside 0..255")
        self.samples[y, x] = value

    def copy_to(self, dst: "Raster") -> None:
        """Copy the visible content into ``dst``; strides may differ."""
        if dst.width != self.width or dst.height != self.height:
            raise ShapeMismatch(
                f"Cannot copy {self.width}x{self.height} raster into {dst.width}x{dst.height}"
            )
        dst.samples[:, : dst.width] = self.samples[:, : self.width]

    def copy(self) -> "Raster":
        """Return an independent raster with the same content and stride."""
        return Raster(self.samples.copy(), self.width)

    def view(self) -> np.ndarray:
        """Return a read-only ``(height, width)`` view of the content."""
        view = self.samples[:, : self.width]
        view.flags.writeable = False
        return view

    def to_array(self) -> np.ndarray:
        """Return a contiguous ``(height, width)`` copy of the content."""
        return np.ascontiguousarray(self.samples[:, : self.width])
