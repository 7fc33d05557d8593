"""Regular polygon with an arbitrary side count."""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from epicycles.engine.errors import InvalidParameter
from epicycles.engine.registry import generator
from epicycles.utils.geometry import interpolate_ring, regular_vertices

_MIN_SIDES = 3


@generator(kind="polygon", description="Regular polygon, generalizes triangle and square")
def polygon(
    point_count: int,
    *,
    sides: int = 6,
    size: float = 1.0,
    rotation: float = np.pi / 2,
) -> NDArray[np.float64]:
    if isinstance(sides, bool) or int(sides) != sides or sides < _MIN_SIDES:
        raise InvalidParameter("sides", sides, f"must be an integer >= {_MIN_SIDES}")
    return interpolate_ring(regular_vertices(int(sides), radius=size, rotation=rotation), point_count)
