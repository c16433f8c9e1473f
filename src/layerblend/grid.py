"""
Shared structure of dense pixel grids.
"""
import logging
from typing import Any, Iterator

import numpy as np
from attrs import define, field

from layerblend.validators import positive

logger = logging.getLogger(__name__)


@define(frozen=True)
class Size:
    """
    Width and height of a pixel grid.

    Both must be positive integers, otherwise
    :py:exc:`~layerblend.errors.InvalidDimension` is raised::

        width, height = Size(640, 480)
    """

    width: int = field(validator=positive())
    height: int = field(validator=positive())

    def __iter__(self) -> Iterator[int]:
        return iter((self.width, self.height))


def readonly_array(value: Any, dtype: Any) -> np.ndarray:
    """Copy ``value`` into a new array of ``dtype`` and lock it."""
    array = np.array(value, dtype=dtype)
    array.setflags(write=False)
    return array


class GridMixin(object):
    """
    Coordinate access for classes holding a ``(height, width, channels)``
    array in ``_data``.
    """

    _data: np.ndarray

    @property
    def width(self) -> int:
        """Number of columns."""
        return int(self._data.shape[1])

    @property
    def height(self) -> int:
        """Number of rows."""
        return int(self._data.shape[0])

    @property
    def size(self) -> Size:
        """:py:class:`Size` of the grid."""
        return Size(self.width, self.height)

    def get(self, x: int, y: int) -> tuple:
        """Return the pixel at column ``x`` and row ``y``."""
        self._check_bounds(x, y)
        return self._to_pixel(self._data[y, x])

    def __getitem__(self, key: tuple[int, int]) -> tuple:
        x, y = key
        return self.get(x, y)

    def pixels(self) -> Iterator[tuple[tuple[int, int], tuple]]:
        """Iterate over ``((x, y), pixel)`` in row-major order."""
        for y in range(self.height):
            for x in range(self.width):
                yield (x, y), self._to_pixel(self._data[y, x])

    def numpy(self) -> np.ndarray:
        """Return a writable copy of the ``(height, width, channels)`` array."""
        return self._data.copy()

    def _check_bounds(self, x: int, y: int) -> None:
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(
                "(%d, %d) is outside of %dx%d grid"
                % (x, y, self.width, self.height)
            )

    def _replace(self, x: int, y: int, pixel: tuple) -> np.ndarray:
        self._check_bounds(x, y)
        data = self.numpy()
        data[y, x] = pixel
        return data

    @staticmethod
    def _to_pixel(values: np.ndarray) -> tuple:
        raise NotImplementedError

    def __repr__(self) -> str:
        return "%s(size=%dx%d)" % (
            self.__class__.__name__,
            self.width,
            self.height,
        )
