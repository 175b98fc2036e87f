from __future__ import annotations

import os
import platform
from typing import List

import numpy
import PIL


def backend_info() -> List[str]:
    """Describe the libraries and CPU resources the resampler runs on."""
    return [
        f"Python Version: {platform.python_version()}",
        f"  numpy  Version: {numpy.__version__}",
        f"  Pillow Version: {PIL.__version__}",
        f"  CPU count: {os.cpu_count() or 1}",
    ]


def print_backend_info() -> None:
    for line in backend_info():
        print(line)
