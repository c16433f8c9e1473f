"""
layerblend: floating-point RGBA layers and source-over compositing.

Basic usage::

    from layerblend import Layer, apply_layer, new_layer, to_raster

    bottom = new_layer(64, 64)
    top = Layer.fill(64, 64, (1.0, 0.5, 0.0, 0.75))
    result = apply_layer(bottom, top)

    # Quantize to 8-bit RGB and hand over to Pillow
    to_raster(result).topil().save('output.png')

Architecture:

- :py:mod:`layerblend.layer`: RGBA layer store
- :py:mod:`layerblend.raster`: Discrete RGB raster store
- :py:mod:`layerblend.composite`: Source-over compositing
- :py:mod:`layerblend.quantize`: Conversion to discrete pixels
- :py:mod:`layerblend.pil_io`: Conversion to and from PIL images
"""

from layerblend.composite import apply_layer, apply_pixel
from layerblend.constants import BlendFormula, Channel
from layerblend.errors import (
    DimensionMismatch,
    InvalidDimension,
    LayerBlendError,
    NumericDegenerate,
)
from layerblend.grid import Size
from layerblend.layer import Layer, new_layer
from layerblend.quantize import to_discrete_pixel, to_raster
from layerblend.raster import Raster
from layerblend.version import __version__

__all__ = [
    "BlendFormula",
    "Channel",
    "DimensionMismatch",
    "InvalidDimension",
    "Layer",
    "LayerBlendError",
    "NumericDegenerate",
    "Raster",
    "Size",
    "__version__",
    "apply_layer",
    "apply_pixel",
    "new_layer",
    "to_discrete_pixel",
    "to_raster",
]
