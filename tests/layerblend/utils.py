import logging
from typing import Optional

import numpy as np

from layerblend import Layer

logging.basicConfig(level=logging.DEBUG)


def random_layer(
    width: int,
    height: int,
    seed: int = 0,
    alpha: Optional[float] = None,
    min_alpha: float = 0.0,
) -> Layer:
    """Layer of uniform random channels, with optionally fixed alpha."""
    rng = np.random.default_rng(seed)
    data = rng.uniform(0.0, 1.0, size=(height, width, 4))
    if alpha is None:
        data[:, :, 3] = rng.uniform(min_alpha, 1.0, size=(height, width))
    else:
        data[:, :, 3] = alpha
    return Layer(data)
