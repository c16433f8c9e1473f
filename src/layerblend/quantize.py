"""
Conversion of floating-point samples to discrete 8-bit pixels.
"""
import logging
from typing import Sequence

import numpy as np

from layerblend.constants import MAX_VALUE, RGBA_CHANNELS, Channel
from layerblend.layer import Layer
from layerblend.raster import Pixel, Raster

logger = logging.getLogger(__name__)


def quantize_array(values: np.ndarray, clamp: bool = True) -> np.ndarray:
    """
    Map ``[0, 1]`` floats to ``floor(value * 255)`` integers.

    With ``clamp``, results are clipped to ``[0, 255]`` and nan becomes 0.
    Without it, results wrap around modulo 256 like an unsigned byte and
    non-finite values become 0.
    """
    with np.errstate(invalid="ignore", over="ignore"):
        scaled = np.floor(np.asarray(values, dtype=np.float64) * MAX_VALUE)
    if clamp:
        scaled = np.clip(np.nan_to_num(scaled, nan=0.0), 0, MAX_VALUE)
    else:
        scaled = np.mod(np.where(np.isfinite(scaled), scaled, 0.0), MAX_VALUE + 1)
    return scaled.astype(np.int64)


def to_discrete_pixel(rgba: Sequence[float], clamp: bool = True) -> Pixel:
    """
    Convert one RGBA sample to a discrete ``(r, g, b)`` pixel.

    Alpha is dropped. ``(1.0, 1.0, 1.0, a)`` maps to ``(255, 255, 255)``.

    :param rgba: four channel values.
    :param clamp: clip out-of-range channels instead of wrapping them.
    """
    values = np.asarray(rgba, dtype=np.float64)
    if values.shape != (RGBA_CHANNELS,):
        raise ValueError("Expected %d channels, got %r" % (RGBA_CHANNELS, values.shape))
    r, g, b = (int(v) for v in quantize_array(values[:Channel.ALPHA], clamp))
    return (r, g, b)


def to_raster(layer: Layer, clamp: bool = True) -> Raster:
    """Convert every pixel of ``layer`` with :py:func:`to_discrete_pixel`."""
    logger.debug("Quantizing %s (clamp=%s)" % (layer, clamp))
    return Raster(quantize_array(layer.numpy("color"), clamp))
