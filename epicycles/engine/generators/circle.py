"""Circle — a single pure harmonic (frequency 1)."""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from epicycles.engine.registry import generator
from epicycles.utils.geometry import sample_parameter


@generator(kind="circle", description="Constant dominant frequency, perfectly smooth")
def circle(point_count: int, *, radius: float = 1.0) -> NDArray[np.float64]:
    angle = 2 * np.pi * sample_parameter(point_count)
    return np.column_stack([radius * np.cos(angle), radius * np.sin(angle)])
