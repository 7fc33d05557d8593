"""Point preprocessing — center on the centroid and rescale to a canonical size.

scale = 1 / min(max_distance, factor × mean_distance)

The mean term caps the reference radius so that a single far-away outlier
cannot shrink an otherwise compact shape. For shapes without outliers
(circle, polygons, star) the max distance wins and the farthest point lands
on the unit circle.
"""

from __future__ import annotations

import logging
import math

import numpy as np
from numpy.typing import NDArray

from epicycles.engine.errors import InvalidParameter
from epicycles.utils.geometry import as_points, centroid, centroid_distances, freeze

logger = logging.getLogger(__name__)

# Below this the points are considered coincident and left unscaled.
_SPREAD_EPSILON = 1e-12


def preprocess(
    points: NDArray[np.float64] | list[tuple[float, float]],
    mean_distance_factor: float = 1.5,
) -> NDArray[np.float64]:
    """Center ``points`` on their centroid and normalize them. Same length and order."""
    pts = as_points(points)
    if len(pts) == 0:
        return freeze(np.empty((0, 2)))

    cx, cy = centroid(pts)
    centered = pts - np.array([cx, cy])

    distances = centroid_distances(pts)
    max_distance = float(np.max(distances))
    mean_distance = float(np.mean(distances))
    reference = min(max_distance, mean_distance_factor * mean_distance)

    if reference < _SPREAD_EPSILON:
        logger.warning("Preprocess: %d points have no spread, skipping scale", len(pts))
        return freeze(centered)

    scale = 1.0 / reference
    logger.debug(
        "Preprocess: center=(%.4f, %.4f) scale=%.4f (max=%.4f, mean=%.4f)",
        cx,
        cy,
        scale,
        max_distance,
        mean_distance,
    )
    return freeze(centered * scale)


# Point-count multipliers by named complexity level
COMPLEXITY_LEVELS = {
    "low": 0.5,
    "medium": 0.75,
    "high": 1.0,
    "ultra": 1.5,
}


def resample(
    points: NDArray[np.float64] | list[tuple[float, float]],
    level: str | float = "high",
) -> NDArray[np.float64]:
    """Change the point density of a sequence by a factor (or named level).

    factor <= 1 keeps every (1/factor)-th point by index. factor > 1 inserts
    the midpoint after each point except the last and truncates to
    ceil(N · factor).
    """
    factor = COMPLEXITY_LEVELS.get(level, 1.0) if isinstance(level, str) else float(level)
    if factor <= 0:
        raise InvalidParameter("factor", factor, "must be positive")

    pts = as_points(points)
    n_points = len(pts)
    if n_points == 0:
        return freeze(np.empty((0, 2)))

    target = math.ceil(n_points * factor)
    if target <= n_points:
        step = n_points / target
        index = np.floor(np.arange(target) * step).astype(np.int64)
        return freeze(pts[index].copy())

    mids = (pts[:-1] + pts[1:]) / 2
    dense = np.empty((2 * n_points - 1, 2))
    dense[0::2] = pts
    dense[1::2] = mids
    return freeze(dense[:target].copy())
