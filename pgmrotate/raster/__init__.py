from .types import Raster

__all__ = ["Raster"]
