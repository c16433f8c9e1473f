"""Utility functions for composite operations."""

import numpy as np
from numpy.typing import NDArray


def divide(a: NDArray[np.floating], b: NDArray[np.floating]) -> NDArray[np.floating]:
    """Division that leaves inf and nan in place instead of warning."""
    with np.errstate(divide="ignore", invalid="ignore"):
        return np.true_divide(a, b)


def degenerate(
    color: NDArray[np.floating],
    alpha: NDArray[np.floating],
    denominator: NDArray[np.floating],
) -> NDArray[np.bool_]:
    """Mask of pixels whose blend has no finite, well-defined result."""
    finite = np.all(np.isfinite(color), axis=-1) & np.isfinite(alpha[..., 0])
    return (denominator[..., 0] == 0) | ~finite
