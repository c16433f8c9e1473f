"""Pytest configuration for layerblend tests."""

import pytest

from layerblend import Layer


@pytest.fixture
def opaque_red() -> Layer:
    return Layer.fill(3, 2, (1.0, 0.0, 0.0, 1.0))


@pytest.fixture
def translucent_blue() -> Layer:
    return Layer.fill(3, 2, (0.0, 0.0, 1.0, 0.5))
