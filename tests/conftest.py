import pytest

from pgmrotate.raster import Raster


def pgm_bytes(width, height, samples, maxval=255):
    header = f"P5\n{width} {height}\n{maxval}\n".encode("ascii")
    return header + bytes(samples)


@pytest.fixture
def write_pgm(tmp_path):
    def _write(name, width, height, samples):
        path = tmp_path / name
        path.write_bytes(pgm_bytes(width, height, samples))
        return str(path)

    return _write


@pytest.fixture
def small_raster():
    return Raster.from_array([[10, 20, 30, 40], [50, 60, 70, 80]])


@pytest.fixture
def numbered_raster():
    # Every sample is non-zero so background pixels can be told apart.
    rows = [[(x * 7 + y * 13) % 255 + 1 for x in range(9)] for y in range(6)]
    return Raster.from_array(rows)
