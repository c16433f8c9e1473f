"""
Compositing of two layers.

Key modules:

- :py:mod:`layerblend.composite.composite`: :py:func:`apply_layer` and
  :py:func:`apply_pixel`
- :py:mod:`layerblend.composite.blend`: Formula implementations

Example usage::

    from layerblend import Layer
    from layerblend.composite import apply_layer

    bottom = Layer.fill(8, 8, (1.0, 1.0, 1.0, 1.0))
    top = Layer.fill(8, 8, (0.0, 0.0, 0.0, 0.25))
    result = apply_layer(bottom, top)

Alpha compositing is order sensitive: ``apply_layer(a, b)`` generally
differs from ``apply_layer(b, a)``.
"""

from layerblend.composite.composite import apply_layer, apply_pixel

__all__ = [
    "apply_layer",
    "apply_pixel",
]
