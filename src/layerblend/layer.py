"""
Floating-point RGBA layers.

A :py:class:`Layer` is an immutable grid of ``(r, g, b, a)`` samples stored
as a read-only ``float64`` array of shape ``(height, width, 4)``. Channel
values are nominally in ``[0, 1]`` but are not clamped.

Example::

    from layerblend import new_layer

    layer = new_layer(4, 3)
    assert layer.get(0, 0) == (0.0, 0.0, 0.0, 0.0)
    red = layer.with_pixel(1, 2, (1.0, 0.0, 0.0, 1.0))
"""
import logging
from typing import TYPE_CHECKING, Any, Optional, Sequence

import numpy as np
from attrs import cmp_using, define, field

from layerblend.constants import RGBA_CHANNELS, Channel
from layerblend.grid import GridMixin, Size, readonly_array
from layerblend.validators import grid_shape

if TYPE_CHECKING:
    from PIL import Image

logger = logging.getLogger(__name__)

RGBA = tuple[float, float, float, float]


def _as_rgba(value: Sequence[float]) -> RGBA:
    rgba = tuple(float(v) for v in value)
    if len(rgba) != RGBA_CHANNELS:
        raise ValueError("Expected %d channels, got %d" % (RGBA_CHANNELS, len(rgba)))
    return rgba  # type: ignore[return-value]


def _as_float_grid(value: Any) -> np.ndarray:
    return readonly_array(value, np.float64)


@define(frozen=True, repr=False)
class Layer(GridMixin):
    """
    Immutable grid of RGBA pixels.

    Pixels are addressed by ``(x, y)`` with ``0 <= x < width`` and
    ``0 <= y < height``; the four channel values at each coordinate are
    always read in R, G, B, A order. Two layers compare equal when their
    sizes and every channel value match.
    """

    _data: np.ndarray = field(
        converter=_as_float_grid,
        validator=grid_shape(RGBA_CHANNELS),
        eq=cmp_using(eq=np.array_equal),
        hash=False,
    )

    @classmethod
    def from_array(cls, array: Any) -> "Layer":
        """Create a layer from a ``(height, width, 4)`` array-like."""
        return cls(array)

    @classmethod
    def fill(cls, width: int, height: int, rgba: Sequence[float]) -> "Layer":
        """Create a layer where every pixel is ``rgba``."""
        size = Size(width, height)
        data = np.empty((size.height, size.width, RGBA_CHANNELS), dtype=np.float64)
        data[:, :] = _as_rgba(rgba)
        return cls(data)

    @classmethod
    def frompil(cls, image: "Image.Image") -> "Layer":
        """Create a layer from a PIL image. See :py:func:`~layerblend.pil_io.layer_from_pil`."""
        from layerblend.pil_io import layer_from_pil

        return layer_from_pil(image)

    def numpy(self, channel: Optional[str] = None) -> np.ndarray:
        """
        Get a writable copy of the pixel data.

        :param channel: `None` for all channels, 'color' for RGB only, or
            'alpha' for the alpha channel alone.
        :return: :py:class:`numpy.ndarray` of shape ``(height, width, n)``.
        """
        if channel is None:
            return self._data.copy()
        if channel == 'color':
            return self._data[:, :, :Channel.ALPHA].copy()
        if channel == 'alpha':
            return self._data[:, :, Channel.ALPHA:].copy()
        raise ValueError("Unknown channel: %r" % channel)

    def with_pixel(self, x: int, y: int, rgba: Sequence[float]) -> "Layer":
        """Return a new layer with the pixel at ``(x, y)`` replaced."""
        return Layer(self._replace(x, y, _as_rgba(rgba)))

    def topil(self, clamp: bool = True) -> "Image.Image":
        """Get an ``RGBA`` PIL image. See :py:func:`~layerblend.pil_io.layer_to_pil`."""
        from layerblend.pil_io import layer_to_pil

        return layer_to_pil(self, clamp=clamp)

    @staticmethod
    def _to_pixel(values: np.ndarray) -> RGBA:
        r, g, b, a = (float(v) for v in values)
        return (r, g, b, a)


def new_layer(width: int, height: int) -> Layer:
    """
    Allocate a fully transparent black layer.

    The backing store is a flat buffer of ``width * height * 4`` zeros,
    grouped into one RGBA tuple per pixel.

    :raise InvalidDimension: if width or height is not a positive integer.
    """
    size = Size(width, height)
    flat = np.zeros(size.width * size.height * RGBA_CHANNELS, dtype=np.float64)
    logger.debug("Allocated %dx%d layer", size.width, size.height)
    return Layer(flat.reshape((size.height, size.width, RGBA_CHANNELS)))
