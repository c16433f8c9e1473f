"""
PIL IO module.

In-memory conversion between layerblend grids and :py:class:`PIL.Image.Image`.
Encoding to and decoding from files is left to Pillow.
"""
import logging

import numpy as np
from PIL import Image

from layerblend.constants import MAX_VALUE
from layerblend.layer import Layer
from layerblend.quantize import quantize_array
from layerblend.raster import Raster

logger = logging.getLogger(__name__)


def raster_to_pil(raster: Raster) -> Image.Image:
    """Convert a :py:class:`~layerblend.raster.Raster` to an ``RGB`` image."""
    return Image.fromarray(raster.numpy())


def layer_to_pil(layer: Layer, clamp: bool = True) -> Image.Image:
    """
    Convert a :py:class:`~layerblend.layer.Layer` to an ``RGBA`` image.

    All four channels are quantized like
    :py:func:`~layerblend.quantize.to_discrete_pixel` does for color.
    """
    return Image.fromarray(quantize_array(layer.numpy(), clamp).astype(np.uint8))


def layer_from_pil(image: Image.Image) -> Layer:
    """Create a :py:class:`~layerblend.layer.Layer` from a PIL image of any mode."""
    if image.mode != "RGBA":
        logger.debug("Converting %s image to RGBA" % image.mode)
        image = image.convert("RGBA")
    return Layer(np.asarray(image, dtype=np.float64) / MAX_VALUE)
