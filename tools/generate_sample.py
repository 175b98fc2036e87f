#!/usr/bin/env python3
"""Regenerate the bundled sample image used as the default CLI input."""
from pathlib import Path

import numpy as np

from pgmrotate.codec import save_raster
from pgmrotate.raster import Raster

ROOT = Path(__file__).resolve().parents[1]
OUT = ROOT / "pgmrotate" / "data" / "sample.pgm"
WIDTH = 64
HEIGHT = 48


def build_sample() -> np.ndarray:
    y, x = np.mgrid[0:HEIGHT, 0:WIDTH]
    data = (x * 3 + y * 2 + 16) % 256
    data[14:34, 20:44] = 250
    data[20:28, 28:36] = 8
    return data.astype(np.uint8)


def main() -> None:
    save_raster(Raster.from_array(build_sample()), str(OUT))
    print(f"Wrote {OUT}")


if __name__ == "__main__":
    main()
