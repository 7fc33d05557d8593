"""Letter "S" glyph — four sinusoidal pieces, one per quarter of the parameter."""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray

from epicycles.engine.registry import generator
from epicycles.utils.geometry import split_parameter


@generator(kind="letter_s", description="Complex curves, variable curvature needs 50+ terms")
def letter_s(point_count: int, *, size: float = 1.0) -> NDArray[np.float64]:
    quarter, u = split_parameter(point_count, 4)
    half_turn = u * np.pi

    # upper right bowl, center stroke, center bowl, lower left tail
    x = np.select(
        [quarter == 0, quarter == 1, quarter == 2],
        [
            0.5 - 0.5 * np.cos(half_turn),
            0.5 - 0.5 * u,
            0.5 * np.sin(half_turn),
        ],
        default=0.5 * np.sin(half_turn),
    )
    y = np.select(
        [quarter == 0, quarter == 1, quarter == 2],
        [
            0.5 + 0.3 * np.sin(half_turn),
            0.2 - 0.4 * u,
            -0.2 - 0.3 * np.cos(half_turn),
        ],
        default=-0.5 + 0.3 * np.sin(half_turn),
    )
    return size * np.column_stack([x, y])
