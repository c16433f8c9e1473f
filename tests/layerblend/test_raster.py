import attrs
import numpy as np
import pytest

from layerblend import InvalidDimension, Raster, Size


def test_raster_fill() -> None:
    raster = Raster.fill(4, 3, (10, 20, 30))
    assert raster.size == Size(4, 3)
    assert raster.numpy().shape == (3, 4, 3)
    assert raster.numpy().dtype == np.uint8
    assert {pixel for _, pixel in raster.pixels()} == {(10, 20, 30)}


def test_raster_default_fill_is_black() -> None:
    assert Raster.fill(2, 2).get(1, 1) == (0, 0, 0)


def test_raster_get() -> None:
    data = np.zeros((2, 3, 3), dtype=np.uint8)
    data[1, 2] = (255, 128, 1)
    raster = Raster.from_array(data)
    assert raster.get(2, 1) == (255, 128, 1)
    assert raster[2, 1] == (255, 128, 1)
    assert all(isinstance(v, int) for v in raster.get(2, 1))

    with pytest.raises(IndexError):
        raster.get(3, 1)


@pytest.mark.parametrize("value", [-1, 256, 1000])
def test_raster_out_of_range_values(value: int) -> None:
    with pytest.raises(ValueError):
        Raster.from_array(np.full((1, 1, 3), value))


def test_raster_rejects_nan() -> None:
    with pytest.raises(ValueError):
        Raster.from_array(np.full((1, 1, 3), np.nan))


@pytest.mark.parametrize("shape", [(2, 2, 4), (2, 2), (0, 1, 3)])
def test_raster_invalid_shape(shape) -> None:
    with pytest.raises(InvalidDimension):
        Raster.from_array(np.zeros(shape, dtype=np.uint8))


def test_raster_invalid_dimension() -> None:
    with pytest.raises(InvalidDimension):
        Raster.fill(0, 1)


def test_raster_is_immutable() -> None:
    raster = Raster.fill(1, 1)
    with pytest.raises(attrs.exceptions.FrozenInstanceError):
        raster._data = np.zeros((1, 1, 3), dtype=np.uint8)  # type: ignore[misc]
    with pytest.raises(ValueError):
        raster._data[0, 0, 0] = 1


def test_raster_equality() -> None:
    assert Raster.fill(2, 1, (1, 2, 3)) == Raster.fill(2, 1, (1, 2, 3))
    assert Raster.fill(2, 1, (1, 2, 3)) != Raster.fill(2, 1, (1, 2, 4))
    assert repr(Raster.fill(2, 1)) == "Raster(size=2x1)"


def test_raster_hash() -> None:
    assert hash(Raster.fill(2, 2)) == hash(Raster.fill(2, 2))
    rasters = {Raster.fill(1, 1), Raster.fill(1, 1), Raster.fill(1, 1, (1, 2, 3))}
    assert len(rasters) == 2


@pytest.mark.parametrize("value", [254.7, 0.5, 1e-9])
def test_raster_rejects_fractional_values(value: float) -> None:
    with pytest.raises(ValueError):
        Raster.from_array(np.full((1, 1, 3), value))


def test_raster_accepts_integral_floats() -> None:
    raster = Raster.from_array(np.full((1, 1, 3), 254.0))
    assert raster.get(0, 0) == (254, 254, 254)
