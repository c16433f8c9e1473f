"""
Various constants for layerblend
"""
from enum import Enum, IntEnum

#: Number of channels in a :py:class:`~layerblend.layer.Layer` pixel.
RGBA_CHANNELS = 4

#: Number of channels in a :py:class:`~layerblend.raster.Raster` pixel.
RGB_CHANNELS = 3

#: Largest discrete channel value.
MAX_VALUE = 255


class Channel(IntEnum):
    """
    Channel index within a pixel.
    """
    RED = 0
    GREEN = 1
    BLUE = 2
    ALPHA = 3


class BlendFormula(Enum):
    """
    Source-over formula variants.

    .. py:attribute:: SOURCE_OVER

        Porter-Duff source-over on straight (non-premultiplied) alpha.

    .. py:attribute:: LEGACY

        The historical formula, which reads the top blue channel where the
        bottom alpha belongs in the denominator, and divides only the bottom
        contribution. Kept for pixel-exact parity with older renders.
    """
    SOURCE_OVER = 'source-over'
    LEGACY = 'legacy'
