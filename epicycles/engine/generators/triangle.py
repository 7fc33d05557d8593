"""Equilateral triangle with vertices at 90°, 210°, 330°."""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from epicycles.engine.registry import generator
from epicycles.utils.geometry import interpolate_ring, regular_vertices


@generator(kind="triangle", description="Odd harmonics, converges with few terms")
def triangle(point_count: int, *, size: float = 1.0) -> NDArray[np.float64]:
    return interpolate_ring(regular_vertices(3, radius=size), point_count)
