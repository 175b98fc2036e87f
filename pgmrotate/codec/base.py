from __future__ import annotations

from ..raster import Raster


class RasterCodec:
    extensions: tuple = ()

    def load(self, path: str) -> Raster:
        raise NotImplementedError

    def save(self, raster: Raster, path: str) -> None:
        raise NotImplementedError
