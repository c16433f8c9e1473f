"""
Validation functions for attrs.
"""
import numbers

import attr
import numpy as np

from layerblend.errors import InvalidDimension

__all__ = ['positive', 'grid_shape']


@attr.s(repr=False, slots=True, hash=True)
class _PositiveValidator(object):

    def __call__(self, inst, attr, value):
        if (
            isinstance(value, bool)
            or not isinstance(value, numbers.Integral)
            or value <= 0
        ):
            raise InvalidDimension(
                "'{name}' must be a positive integer, got {value!r}".format(
                    name=attr.name, value=value
                )
            )

    def __repr__(self):
        return "<positive validator>"


def positive():
    """
    A validator that raises :exc:`~layerblend.errors.InvalidDimension` if the
    initializer is called with anything but a positive integer.
    """
    return _PositiveValidator()


@attr.s(repr=False, slots=True, hash=True)
class _GridShapeValidator(object):
    channels = attr.ib()

    def __call__(self, inst, attr, value):
        if (
            not isinstance(value, np.ndarray)
            or value.ndim != 3
            or value.shape[2] != self.channels
            or value.shape[0] == 0
            or value.shape[1] == 0
        ):
            raise InvalidDimension(
                "'{name}' must have shape (height, width, {channels}), "
                "got {shape!r}".format(
                    name=attr.name,
                    channels=self.channels,
                    shape=getattr(value, 'shape', None),
                )
            )

    def __repr__(self):
        return "<grid_shape validator with {channels!r} channels>".format(
            channels=self.channels
        )


def grid_shape(channels):
    """
    A validator that raises :exc:`~layerblend.errors.InvalidDimension` unless
    the value is a non-empty ``(height, width, channels)`` array.
    """
    return _GridShapeValidator(channels)
