"""Leaf-node geometry helpers. No engine imports."""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray


def as_points(points: NDArray[np.float64] | list[tuple[float, float]]) -> NDArray[np.float64]:
    """Coerce a point collection into an Nx2 float64 array."""
    arr = np.asarray(points, dtype=np.float64)
    if arr.size == 0:
        return np.empty((0, 2))
    return arr.reshape(-1, 2)


def freeze(points: NDArray[np.float64]) -> NDArray[np.float64]:
    """Mark a point array read-only so downstream stages cannot mutate it."""
    points.setflags(write=False)
    return points


def to_complex(points: NDArray[np.float64]) -> NDArray[np.complex128]:
    """(x, y) rows → x + iy."""
    return points[:, 0] + 1j * points[:, 1]


def signed_area(points: NDArray[np.float64]) -> float:
    """Shoelace formula over the closed ring. Positive = CCW, Negative = CW."""
    if len(points) < 3:
        return 0.0
    x = points[:, 0]
    y = points[:, 1]
    return float(0.5 * np.sum(x * np.roll(y, -1) - np.roll(x, -1) * y))


def winding_direction(points: NDArray[np.float64]) -> int:
    """Return 1 for CCW, -1 for CW, 0 if degenerate."""
    sa = signed_area(points)
    if sa > 0:
        return 1
    elif sa < 0:
        return -1
    return 0


def centroid(points: NDArray[np.float64]) -> tuple[float, float]:
    """Compute centroid of a point set."""
    if len(points) == 0:
        return (0.0, 0.0)
    return (float(np.mean(points[:, 0])), float(np.mean(points[:, 1])))


def centroid_distances(points: NDArray[np.float64]) -> NDArray[np.float64]:
    """Distance from centroid to each boundary point."""
    cx, cy = centroid(points)
    return np.sqrt((points[:, 0] - cx) ** 2 + (points[:, 1] - cy) ** 2)


def step_lengths(points: NDArray[np.float64], closed: bool = True) -> NDArray[np.float64]:
    """Length of each step between consecutive points, including the wraparound step if closed."""
    if len(points) < 2:
        return np.array([])
    nxt = np.roll(points, -1, axis=0) if closed else points[1:]
    cur = points if closed else points[:-1]
    return np.sqrt(np.sum((nxt - cur) ** 2, axis=1))


def sample_parameter(point_count: int) -> NDArray[np.float64]:
    """t = i / N for i in [0, N). Never reaches 1, so the ring is not duplicated."""
    return np.arange(point_count, dtype=np.float64) / point_count


def split_parameter(point_count: int, segments: int) -> tuple[NDArray[np.int64], NDArray[np.float64]]:
    """Split t = i / N into ``segments`` equal pieces.

    Returns (segment index, local parameter in [0, 1)) per sample. Integer
    arithmetic keeps segment boundaries exact.
    """
    scaled = np.arange(point_count, dtype=np.int64) * segments
    index = scaled // point_count
    local = (scaled - index * point_count) / point_count
    return index, local


def interpolate_ring(vertices: NDArray[np.float64], point_count: int) -> NDArray[np.float64]:
    """Sample a closed polyline through ``vertices`` with equal parameter time per edge."""
    n_sides = len(vertices)
    index, local = split_parameter(point_count, n_sides)
    start = vertices[index]
    end = vertices[(index + 1) % n_sides]
    return start + local[:, None] * (end - start)


def regular_vertices(sides: int, radius: float = 1.0, rotation: float = np.pi / 2) -> NDArray[np.float64]:
    """Vertices of a regular polygon on a circle, counter-clockwise from ``rotation``."""
    angles = rotation + 2 * np.pi * np.arange(sides) / sides
    return np.column_stack([radius * np.cos(angles), radius * np.sin(angles)])
