from __future__ import annotations

import logging

import numpy as np
from PIL import Image

from ..errors import FormatError, IOFailure
from ..raster import Raster
from .base import RasterCodec

logger = logging.getLogger(__name__)


class PgmCodec(RasterCodec):
    """Single-channel 8-bit PGM, read and written through Pillow's PPM plugin.

    Files with a ``maxval`` below 255 are scaled to the full 0..255 range on
    load (``maxval 15``: 3 -> 51, 15 -> 255). Files are always written with
    ``maxval 255``.
    """

    extensions = (".pgm", ".pnm")

    def load(self, path: str) -> Raster:
        image = self._open(path)
        if image.mode != "L":
            raise FormatError(f"{path}: expected 8-bit single-channel PGM, got mode {image.mode}")
        raster = Raster.from_array(np.asarray(image, dtype=np.uint8))
        logger.debug("Decoded %s (%dx%d)", path, raster.width, raster.height)
        return raster

    def save(self, raster: Raster, path: str) -> None:
        image = Image.fromarray(raster.to_array())
        try:
            image.save(path, format="PPM")
        except OSError as exc:
            raise IOFailure(f"Unable to write {path}: {exc}") from exc
        logger.debug("Encoded %s (%dx%d)", path, raster.width, raster.height)

    @staticmethod
    def _open(path: str) -> Image.Image:
        try:
            handle = open(path, "rb")
        except OSError as exc:
            raise IOFailure(f"Unable to open {path}: {exc}") from exc
        with handle:
            try:
                with Image.open(handle, formats=["PPM"]) as img:
                    img.load()
                    return img.copy()
            except (OSError, SyntaxError, ValueError) as exc:
                raise FormatError(f"{path}: not a valid PGM file ({exc})") from exc
