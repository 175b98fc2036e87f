import numpy as np
import pytest

from pgmrotate.errors import ErrorKind, InvalidSize, OutOfBounds, ShapeMismatch
from pgmrotate.raster import Raster


@pytest.mark.parametrize("width,height", [(0, 1), (1, 0), (-3, 4), (4, -1)])
def test_allocate_rejects_non_positive_size(width, height):
    with pytest.raises(InvalidSize) as info:
        Raster.allocate(width, height)
    assert info.value.kind is ErrorKind.INVALID_SIZE


def test_allocate_is_zero_filled_with_stride():
    raster = Raster.allocate(3, 2, stride=8)
    assert raster.size == (3, 2)
    assert raster.stride == 8
    assert raster.samples.shape == (2, 8)
    assert not raster.samples.any()


def test_allocate_rejects_stride_smaller_than_width():
    with pytest.raises(InvalidSize):
        Raster.allocate(5, 2, stride=4)


def test_get_and_set(small_raster):
    assert small_raster.get(0, 0) == 10
    assert small_raster.get(3, 1) == 80
    small_raster.set(2, 1, 255)
    assert small_raster.get(2, 1) == 255


@pytest.mark.parametrize("x,y", [(-1, 0), (4, 0), (0, 2), (0, -1)])
def test_access_outside_extent_fails(small_raster, x, y):
    with pytest.raises(OutOfBounds):
        small_raster.get(x, y)
    with pytest.raises(OutOfBounds):
        small_raster.set(x, y, 1)


def test_stride_padding_is_not_addressable():
    raster = Raster.allocate(2, 2, stride=4)
    with pytest.raises(OutOfBounds):
        raster.get(3, 0)


def test_set_rejects_values_outside_byte_range(small_raster):
    with pytest.raises(ValueError):
        small_raster.set(0, 0, 256)


def test_copy_to_between_different_strides(small_raster):
    dst = Raster.allocate(4, 2, stride=6)
    small_raster.copy_to(dst)
    assert dst.to_array().tolist() == [[10, 20, 30, 40], [50, 60, 70, 80]]
    assert not dst.samples[:, 4:].any()


def test_copy_to_shape_mismatch(small_raster):
    with pytest.raises(ShapeMismatch):
        small_raster.copy_to(Raster.allocate(2, 4))


def test_copy_is_independent(small_raster):
    other = small_raster.copy()
    other.set(0, 0, 99)
    assert small_raster.get(0, 0) == 10


def test_equality_compares_content(small_raster):
    assert small_raster == small_raster.copy()
    padded = Raster.allocate(4, 2, stride=7)
    small_raster.copy_to(padded)
    assert padded == small_raster
    padded.set(0, 0, 11)
    assert padded != small_raster
    assert small_raster != Raster.allocate(2, 4)
    assert small_raster != "raster"


def test_raster_is_unhashable(small_raster):
    with pytest.raises(TypeError):
        hash(small_raster)


def test_from_array_copies_input():
    data = np.array([[1, 2], [3, 4]], dtype=np.uint8)
    raster = Raster.from_array(data)
    data[0, 0] = 200
    assert raster.get(0, 0) == 1


@pytest.mark.parametrize("data", [[], [1, 2, 3], [[[1]]]])
def test_from_array_rejects_non_2d(data):
    with pytest.raises(InvalidSize):
        Raster.from_array(data)


def test_view_is_read_only(small_raster):
    view = small_raster.view()
    with pytest.raises(ValueError):
        view[0, 0] = 1
    small_raster.set(0, 0, 5)
    assert small_raster.get(0, 0) == 5
