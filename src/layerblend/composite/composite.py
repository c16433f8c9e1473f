"""Two-layer compositing."""

import logging
from typing import Sequence, Union

import numpy as np

from layerblend.composite import utils
from layerblend.composite.blend import BLEND_FUNC
from layerblend.constants import RGBA_CHANNELS, BlendFormula
from layerblend.errors import DimensionMismatch, NumericDegenerate
from layerblend.layer import RGBA, Layer

logger = logging.getLogger(__name__)


def apply_layer(
    bottom: Layer,
    top: Layer,
    formula: Union[BlendFormula, str] = BlendFormula.SOURCE_OVER,
    strict: bool = False,
) -> Layer:
    """
    Composite ``top`` over ``bottom`` and return a new layer.

    Neither input is modified.

    Args:
        bottom: Backdrop layer
        top: Source layer, same size as ``bottom``
        formula: :py:class:`~layerblend.constants.BlendFormula` or its value
            (default: source-over)
        strict: If True, raise instead of replacing degenerate pixels

    Returns:
        :py:class:`~layerblend.layer.Layer` of the same size. Pixels where
        the blend denominator is zero, or where the result is not finite,
        are transparent black ``(0, 0, 0, 0)``.

    Raises:
        DimensionMismatch: If the layers differ in size
        NumericDegenerate: If ``strict`` and any pixel is degenerate

    Examples:
        >>> from layerblend import Layer, apply_layer
        >>> bottom = Layer.fill(2, 2, (1.0, 0.0, 0.0, 1.0))
        >>> top = Layer.fill(2, 2, (0.0, 0.0, 1.0, 0.5))
        >>> apply_layer(bottom, top).get(0, 0)
        (0.5, 0.0, 0.5, 1.0)
    """
    if bottom.size != top.size:
        raise DimensionMismatch(tuple(bottom.size), tuple(top.size))
    logger.debug("Compositing %s over %s" % (top, bottom))
    result = _composite(bottom.numpy(), top.numpy(), formula, strict)
    return Layer(result)


def apply_pixel(
    bottom: Sequence[float],
    top: Sequence[float],
    formula: Union[BlendFormula, str] = BlendFormula.SOURCE_OVER,
    strict: bool = False,
) -> RGBA:
    """Composite a single ``top`` RGBA sample over ``bottom``.

    Same rules as :py:func:`apply_layer`.
    """
    backdrop = np.asarray(bottom, dtype=np.float64)
    source = np.asarray(top, dtype=np.float64)
    if backdrop.shape != (RGBA_CHANNELS,) or source.shape != (RGBA_CHANNELS,):
        raise ValueError(
            "Expected %d channels, got %r and %r"
            % (RGBA_CHANNELS, backdrop.shape, source.shape)
        )
    r, g, b, a = (float(v) for v in _composite(backdrop, source, formula, strict))
    return (r, g, b, a)


def _composite(
    backdrop: np.ndarray,
    source: np.ndarray,
    formula: Union[BlendFormula, str],
    strict: bool,
) -> np.ndarray:
    blend_fn = BLEND_FUNC[BlendFormula(formula)]
    color, alpha, denominator = blend_fn(backdrop, source)
    mask = utils.degenerate(color, alpha, denominator)
    count = int(np.count_nonzero(mask))
    if count:
        if strict:
            raise NumericDegenerate(count)
        logger.debug("Replacing %d degenerate pixel(s)" % count)
    result = np.concatenate((color, alpha), axis=-1)
    return np.where(mask[..., np.newaxis], 0.0, result)
