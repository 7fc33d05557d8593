"""Square — four straight sides, odd harmonics only.

Corners sit at (±size, ±size). Each side gets a quarter of the parameter
range, traversed counter-clockwise from the top-left corner.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from epicycles.engine.registry import generator
from epicycles.utils.geometry import interpolate_ring


@generator(kind="square", description="Odd harmonics, sharp corners need many terms")
def square(point_count: int, *, size: float = 1.0) -> NDArray[np.float64]:
    corners = np.array(
        [
            [-size, size],
            [-size, -size],
            [size, -size],
            [size, size],
        ]
    )
    return interpolate_ring(corners, point_count)
