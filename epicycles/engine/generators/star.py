"""Star — radius zig-zags linearly between outer and inner radius.

The full turn is cut into 2 × spikes sectors. Even sectors run from the outer
radius down to the inner one, odd sectors climb back up, so tips sit at
angles 2πj / spikes.
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from epicycles.engine.errors import InvalidParameter
from epicycles.engine.registry import generator
from epicycles.utils.geometry import sample_parameter, split_parameter


@generator(kind="star", description="Many harmonics, discontinuities at the tips")
def star(
    point_count: int,
    *,
    outer_radius: float = 1.0,
    inner_radius: float = 0.4,
    spikes: int = 5,
) -> NDArray[np.float64]:
    if isinstance(spikes, bool) or int(spikes) != spikes or spikes < 2:
        raise InvalidParameter("spikes", spikes, "must be an integer >= 2")

    sector, local = split_parameter(point_count, 2 * int(spikes))
    span = outer_radius - inner_radius
    radius = np.where(
        sector % 2 == 0,
        outer_radius - span * local,
        inner_radius + span * local,
    )
    angle = 2 * np.pi * sample_parameter(point_count)
    return np.column_stack([radius * np.cos(angle), radius * np.sin(angle)])
