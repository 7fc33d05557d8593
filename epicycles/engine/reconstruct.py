"""Epicycle reconstruction — chain rotating vectors for one instant of time.

Vector i rotates at its harmonic number: angle = frequency · time + phase.
Radii are scaled so the principal vector measures ``target_size`` render
units; every vector keeps its size relative to the principal one. With
integer frequencies the traced path repeats every 2π of time.
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any

import numpy as np
from numpy.typing import NDArray

from epicycles.engine.dft import FourierCoefficient
from epicycles.engine.errors import InvalidParameter
from epicycles.utils.geometry import step_lengths

DEFAULT_TARGET_SIZE = 300.0
ORIGIN = (0.0, 0.0)
FULL_TURN = 2 * math.pi


@dataclass(frozen=True)
class Epicycle:
    start: tuple[float, float]
    end: tuple[float, float]
    radius: float
    frequency: int
    # Instantaneous angle: frequency · time + phase
    angle: float
    amplitude: float
    # amplitude / principal amplitude, in (0, 1]
    normalized_amplitude: float

    def to_dict(self) -> dict[str, Any]:
        return {
            "start": list(self.start),
            "end": list(self.end),
            "radius": self.radius,
            "frequency": self.frequency,
            "angle": self.angle,
            "amplitude": self.amplitude,
            "normalized_amplitude": self.normalized_amplitude,
        }


@dataclass(frozen=True)
class ReconstructionResult:
    epicycles: tuple[Epicycle, ...] = field(default_factory=tuple)
    final_point: tuple[float, float] = ORIGIN


def check_max_count(max_count: int) -> None:
    if isinstance(max_count, bool) or not isinstance(max_count, (int, np.integer)):
        raise InvalidParameter("max_count", max_count, "must be an integer")
    if max_count <= 0:
        raise InvalidParameter("max_count", max_count, "must be positive")


def reconstruct(
    coefficients: Sequence[FourierCoefficient],
    time: float,
    max_count: int,
    target_size: float = DEFAULT_TARGET_SIZE,
) -> ReconstructionResult:
    """Chain the ``max_count`` leading vectors at ``time``.

    An empty coefficient set yields no epicycles and the origin as final point.
    """
    check_max_count(max_count)
    if not math.isfinite(time):
        raise InvalidParameter("time", time, "must be finite")
    if not coefficients:
        return ReconstructionResult()

    max_amplitude = coefficients[0].amplitude
    if max_amplitude <= 0:
        return ReconstructionResult()
    scale = target_size / max_amplitude

    count = min(max_count, len(coefficients))
    x, y = ORIGIN
    chain: list[Epicycle] = []
    for coeff in coefficients[:count]:
        angle = coeff.frequency * time + coeff.phase
        radius = coeff.amplitude * scale
        end_x = x + radius * math.cos(angle)
        end_y = y + radius * math.sin(angle)
        chain.append(
            Epicycle(
                start=(x, y),
                end=(end_x, end_y),
                radius=radius,
                frequency=coeff.frequency,
                angle=angle,
                amplitude=coeff.amplitude,
                normalized_amplitude=coeff.amplitude / max_amplitude,
            )
        )
        x, y = end_x, end_y

    return ReconstructionResult(epicycles=tuple(chain), final_point=(x, y))


def trace_path(
    coefficients: Sequence[FourierCoefficient],
    max_count: int,
    times: Sequence[float] | NDArray[np.float64],
    target_size: float = DEFAULT_TARGET_SIZE,
) -> NDArray[np.float64]:
    """Final point at each of ``times`` as an Nx2 array (vectorized reconstruct)."""
    check_max_count(max_count)
    t = np.asarray(times, dtype=np.float64)
    if not coefficients or coefficients[0].amplitude <= 0:
        return np.zeros((len(t), 2))

    leading = coefficients[: min(max_count, len(coefficients))]
    scale = target_size / coefficients[0].amplitude
    freq = np.array([c.frequency for c in leading], dtype=np.float64)
    phase = np.array([c.phase for c in leading], dtype=np.float64)
    radius = np.array([c.amplitude for c in leading], dtype=np.float64) * scale

    angles = np.outer(t, freq) + phase
    return np.column_stack(
        [
            np.sum(radius * np.cos(angles), axis=1),
            np.sum(radius * np.sin(angles), axis=1),
        ]
    )


def closure_gap(
    coefficients: Sequence[FourierCoefficient],
    point_count: int,
    max_count: int | None = None,
) -> float:
    """Wraparound step of the traced curve relative to its typical step.

    Traces the curve at the source sample times 2πn/N and compares the step
    from the last sample back to the first against the median step. A closed
    curve gives ≈ 1; an open curve such as the spiral jumps across the shape
    and gives a large ratio.
    """
    if point_count < 2 or not coefficients:
        return 0.0
    count = len(coefficients) if max_count is None else max_count
    times = FULL_TURN * np.arange(point_count) / point_count
    traced = trace_path(coefficients, count, times)
    steps = step_lengths(traced, closed=True)
    typical = float(np.median(steps[:-1]))
    if typical <= 0:
        return 0.0
    return float(steps[-1] / typical)
