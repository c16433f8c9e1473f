"""
Source-over formula implementations.

Each function takes backdrop (bottom) and source (top) arrays whose last
axis holds ``(r, g, b, a)``, and returns ``(color, alpha, denominator)``
where ``color`` has three channels and the other two have one. Any leading
shape works, so the same code blends a single pixel or a whole layer.
"""
import logging

from layerblend.composite import utils
from layerblend.constants import BlendFormula, Channel

logger = logging.getLogger(__name__)


def _split(pixels):
    return pixels[..., :Channel.ALPHA], pixels[..., Channel.ALPHA:]


def source_over(backdrop, source):
    """
    Porter-Duff source-over on straight alpha::

        a = As + Ab * (1 - As)
        C = (As * Cs + Ab * Cb * (1 - As)) / a
    """
    Cb, Ab = _split(backdrop)
    Cs, As = _split(source)
    alpha = As + Ab * (1.0 - As)
    color = utils.divide(As * Cs + Ab * Cb * (1.0 - As), alpha)
    return color, alpha, alpha


def legacy(backdrop, source):
    """
    The historical formula, reproduced literally::

        a = As + Bs * (1 - As)
        C = As * Cs + Ab * Cb * (1 - As) / a

    ``Bs`` is the blue channel of the source, and only the backdrop term is
    divided. A transparent source therefore does not leave the backdrop
    unchanged, and the operation is not associative.
    """
    Cb, Ab = _split(backdrop)
    Cs, As = _split(source)
    Bs = source[..., Channel.BLUE:Channel.BLUE + 1]
    denominator = As + Bs * (1.0 - As)
    color = As * Cs + utils.divide(Ab * Cb * (1.0 - As), denominator)
    return color, denominator, denominator


BLEND_FUNC = {
    BlendFormula.SOURCE_OVER: source_over,
    BlendFormula.LEGACY: legacy,
}
