"""Archimedean spiral — open curve, NOT periodic.

The last sample sits on the outer rim while the first sits at the center, so
the implicit wraparound step jumps across the whole shape. Kept as a stress
case: its reconstruction approximates the curve instead of closing it.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from epicycles.engine.registry import generator
from epicycles.utils.geometry import sample_parameter


@generator(kind="spiral", description="Not strictly periodic, a handful of terms suffice", periodic=False)
def spiral(point_count: int, *, turns: float = 2.0, max_radius: float = 1.0) -> NDArray[np.float64]:
    t = sample_parameter(point_count)
    angle = 2 * np.pi * turns * t
    radius = max_radius * t
    return np.column_stack([radius * np.cos(angle), radius * np.sin(angle)])
