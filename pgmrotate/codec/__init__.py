from __future__ import annotations

import os
from typing import Dict, Optional, Set

from ..errors import FormatError
from ..raster import Raster
from .base import RasterCodec
from .pgm import PgmCodec


class CodecRegistry:
    def __init__(self, codecs: Optional[Dict[str, RasterCodec]] = None) -> None:
        if codecs is None:
            codecs = {}
            pgm_codec = PgmCodec()
            for ext in pgm_codec.extensions:
                codecs[ext] = pgm_codec
        self._codecs = codecs

    @property
    def supported_extensions(self) -> Set[str]:
        return set(self._codecs.keys())

    def codec_for(self, path: str) -> RasterCodec:
        ext = os.path.splitext(path)[1].lower()
        codec = self._codecs.get(ext)
        if not codec:
            supported = ", ".join(sorted(self._codecs))
            raise FormatError(f"Unsupported file extension: {ext or '(none)'} (supported: {supported})")
        return codec

    def load(self, path: str) -> Raster:
        return self.codec_for(path).load(path)

    def save(self, raster: Raster, path: str) -> None:
        self.codec_for(path).save(raster, path)


def load_raster(path: str) -> Raster:
    return CodecRegistry().load(path)


def save_raster(raster: Raster, path: str) -> None:
    CodecRegistry().save(raster, path)


__all__ = ["CodecRegistry", "PgmCodec", "RasterCodec", "load_raster", "save_raster"]
