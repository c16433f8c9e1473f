"""
Exceptions raised by layerblend.
"""
from typing import Optional


class LayerBlendError(ValueError):
    """Base class for layerblend errors."""


class InvalidDimension(LayerBlendError):
    """Width, height or array shape is not usable for a pixel grid."""


class DimensionMismatch(LayerBlendError):
    """Two layers passed to the compositor have different sizes."""

    def __init__(
        self,
        bottom: tuple[int, int],
        top: tuple[int, int],
        message: Optional[str] = None,
    ) -> None:
        self.bottom = bottom
        self.top = top
        super().__init__(
            message
            or "Layer sizes differ: bottom is %dx%d, top is %dx%d"
            % (bottom + top)
        )


class NumericDegenerate(LayerBlendError):
    """Blend denominator evaluated to zero in strict compositing."""

    def __init__(self, count: int) -> None:
        self.count = count
        super().__init__(
            "%d pixel(s) have a zero blend denominator" % count
        )
