import math

import numpy as np
import pytest

from layerblend import Layer, Raster, new_layer, to_discrete_pixel, to_raster
from layerblend.quantize import quantize_array

from .utils import random_layer


@pytest.mark.parametrize(
    "rgba, expected",
    [
        ((1.0, 1.0, 1.0, 1.0), (255, 255, 255)),
        ((1.0, 1.0, 1.0, 0.0), (255, 255, 255)),
        ((0.0, 0.0, 0.0, 1.0), (0, 0, 0)),
        ((0.5, 0.25, 0.75, 0.5), (127, 63, 191)),
        ((0.9999, 0.001, 0.5, 1.0), (254, 0, 127)),
    ],
)
def test_to_discrete_pixel(rgba, expected) -> None:
    assert to_discrete_pixel(rgba) == expected
    assert all(isinstance(v, int) for v in to_discrete_pixel(rgba))


@pytest.mark.parametrize(
    "rgba, expected",
    [
        ((1.5, -0.5, 0.5, 1.0), (255, 0, 127)),
        ((math.nan, math.inf, -math.inf, 1.0), (0, 255, 0)),
    ],
)
def test_to_discrete_pixel_clamp(rgba, expected) -> None:
    assert to_discrete_pixel(rgba) == expected


@pytest.mark.parametrize(
    "rgba, expected",
    [
        ((1.5, -0.5, 0.5, 1.0), (126, 128, 127)),
        ((math.nan, math.inf, -math.inf, 1.0), (0, 0, 0)),
        ((1.0, 0.0, 0.0, 1.0), (255, 0, 0)),
    ],
)
def test_to_discrete_pixel_wraparound(rgba, expected) -> None:
    assert to_discrete_pixel(rgba, clamp=False) == expected


@pytest.mark.parametrize("rgba", [(1.0, 1.0, 1.0), (1.0, 1.0, 1.0, 1.0, 1.0)])
def test_to_discrete_pixel_invalid(rgba) -> None:
    with pytest.raises(ValueError):
        to_discrete_pixel(rgba)


def test_quantize_array_keeps_shape() -> None:
    values = np.linspace(0.0, 1.0, 24).reshape((2, 3, 4))
    result = quantize_array(values)
    assert result.shape == (2, 3, 4)
    assert result.min() == 0
    assert result.max() == 255


def test_to_raster() -> None:
    layer = random_layer(5, 4, seed=7)
    raster = to_raster(layer)
    assert isinstance(raster, Raster)
    assert raster.size == layer.size
    for (x, y), rgba in layer.pixels():
        assert raster.get(x, y) == to_discrete_pixel(rgba)


def test_to_raster_new_layer_is_black() -> None:
    assert to_raster(new_layer(3, 3)) == Raster.fill(3, 3, (0, 0, 0))


def test_to_raster_wraparound() -> None:
    layer = Layer.fill(2, 2, (1.5, 0.0, 0.0, 1.0))
    assert to_raster(layer).get(0, 0) == (255, 0, 0)
    assert to_raster(layer, clamp=False).get(0, 0) == (126, 0, 0)
