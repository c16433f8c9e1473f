"""
Discrete 8-bit RGB rasters.
"""
import logging
from typing import TYPE_CHECKING, Any, Sequence

import numpy as np
from attrs import cmp_using, define, field

from layerblend.constants import MAX_VALUE, RGB_CHANNELS
from layerblend.grid import GridMixin, Size, readonly_array
from layerblend.validators import grid_shape

if TYPE_CHECKING:
    from PIL import Image

logger = logging.getLogger(__name__)

Pixel = tuple[int, int, int]


def _as_byte_grid(value: Any) -> np.ndarray:
    array = np.asarray(value)
    if array.dtype != np.uint8 and array.size and (
        not np.all(np.isfinite(array))
        or array.min() < 0
        or array.max() > MAX_VALUE
        or not np.array_equal(array, np.floor(array))
    ):
        raise ValueError("Raster values must be integers in [0, %d]" % MAX_VALUE)
    return readonly_array(array, np.uint8)


@define(frozen=True, repr=False)
class Raster(GridMixin):
    """
    Immutable grid of discrete ``(r, g, b)`` pixels with no alpha.

    Stored as a read-only ``uint8`` array of shape ``(height, width, 3)``. Input
    values must be integral and within ``[0, 255]``.
    """

    _data: np.ndarray = field(
        converter=_as_byte_grid,
        validator=grid_shape(RGB_CHANNELS),
        eq=cmp_using(eq=np.array_equal),
        hash=False,
    )

    @classmethod
    def from_array(cls, array: Any) -> "Raster":
        """Create a raster from a ``(height, width, 3)`` array-like."""
        return cls(array)

    @classmethod
    def fill(cls, width: int, height: int, pixel: Sequence[int] = (0, 0, 0)) -> "Raster":
        """Create a raster where every pixel is ``pixel``."""
        size = Size(width, height)
        data = np.zeros((size.height, size.width, RGB_CHANNELS), dtype=np.int64)
        data[:, :] = tuple(pixel)
        return cls(data)

    def topil(self) -> "Image.Image":
        """Get an ``RGB`` PIL image. See :py:func:`~layerblend.pil_io.raster_to_pil`."""
        from layerblend.pil_io import raster_to_pil

        return raster_to_pil(self)

    @staticmethod
    def _to_pixel(values: np.ndarray) -> Pixel:
        r, g, b = (int(v) for v in values)
        return (r, g, b)
