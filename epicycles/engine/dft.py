"""Direct Discrete Fourier Transform of a closed 2D curve.

Each point (x, y) is read as the complex sample z[n] = x + iy and

    c[k] = (1/N) Σₙ z[n] · e^(−2πi·k·n/N),   k ∈ [0, N)

is evaluated by plain summation: O(N²) time, one row of twiddles (O(N)) in
memory at a time. Coefficients at or below the negligibility threshold are
discarded, the rest are ranked by descending amplitude. ``frequency`` keeps
the harmonic number k, so after ranking it no longer matches the position in
the list.
"""

from __future__ import annotations

import logging
import math
import time
from collections.abc import Iterator, Sequence
from dataclasses import dataclass
from typing import Any, overload

import numpy as np
from numpy.typing import NDArray

from epicycles.utils.geometry import as_points, to_complex

logger = logging.getLogger(__name__)

DEFAULT_THRESHOLD = 1e-6

# Number of leading terms reported in the energy distribution
_STATS_TOP_TERMS = 10


@dataclass(frozen=True)
class FourierCoefficient:
    """One rotating-vector term: amplitude = |value|, phase = arg(value)."""

    frequency: int
    amplitude: float
    phase: float
    value: complex

    @classmethod
    def from_complex(cls, frequency: int, value: complex) -> FourierCoefficient:
        value = complex(value)
        phase = math.atan2(value.imag, value.real)
        # atan2 yields −π for (negative, −0.0); fold it onto +π
        if phase <= -math.pi:
            phase += 2 * math.pi
        return cls(frequency=int(frequency), amplitude=abs(value), phase=phase, value=value)

    def to_dict(self) -> dict[str, Any]:
        return {
            "frequency": self.frequency,
            "amplitude": self.amplitude,
            "phase": self.phase,
            "real": self.value.real,
            "imag": self.value.imag,
        }


@dataclass(frozen=True)
class CoefficientSet(Sequence[FourierCoefficient]):
    """Ranked, filtered coefficients of one point sequence. Index 0 is the principal vector."""

    coefficients: tuple[FourierCoefficient, ...] = ()
    # Length N of the source point sequence
    point_count: int = 0

    @overload
    def __getitem__(self, index: int) -> FourierCoefficient: ...

    @overload
    def __getitem__(self, index: slice) -> tuple[FourierCoefficient, ...]: ...

    def __getitem__(self, index):
        return self.coefficients[index]

    def __len__(self) -> int:
        return len(self.coefficients)

    def __iter__(self) -> Iterator[FourierCoefficient]:
        return iter(self.coefficients)

    @property
    def principal(self) -> FourierCoefficient | None:
        return self.coefficients[0] if self.coefficients else None

    @property
    def amplitudes(self) -> NDArray[np.float64]:
        return np.array([c.amplitude for c in self.coefficients], dtype=np.float64)

    def top(self, count: int) -> CoefficientSet:
        """The ``count`` most significant terms (all of them if fewer exist)."""
        return CoefficientSet(self.coefficients[: max(count, 0)], self.point_count)


def dft_row(z: NDArray[np.complex128], k: int) -> complex:
    """Normalized c[k]. The twiddle exponent is reduced mod N before scaling by 2π/N."""
    n_samples = len(z)
    n = np.arange(n_samples, dtype=np.int64)
    angle = (-2 * np.pi / n_samples) * ((k * n) % n_samples)
    return complex(np.sum(z * np.exp(1j * angle)) / n_samples)


def compute_coefficients(
    points: NDArray[np.float64] | list[tuple[float, float]],
    threshold: float = DEFAULT_THRESHOLD,
) -> CoefficientSet:
    """DFT of ``points`` filtered at ``threshold`` and ranked by descending amplitude.

    Empty input yields an empty set.
    """
    pts = as_points(points)
    n_samples = len(pts)
    if n_samples == 0:
        logger.warning("DFT: empty point sequence, returning empty coefficient set")
        return CoefficientSet()

    t0 = time.perf_counter()
    z = to_complex(pts)

    kept: list[FourierCoefficient] = []
    for k in range(n_samples):
        coeff = FourierCoefficient.from_complex(k, dft_row(z, k))
        if coeff.amplitude > threshold:
            kept.append(coeff)

    # sorted() is stable: equal amplitudes stay in frequency order
    ranked = tuple(sorted(kept, key=lambda c: -c.amplitude))

    elapsed = (time.perf_counter() - t0) * 1000
    if ranked:
        logger.debug(
            "DFT: %d/%d coefficients kept in %.1fms (max=%.4f, min=%.6f)",
            len(ranked),
            n_samples,
            elapsed,
            ranked[0].amplitude,
            ranked[-1].amplitude,
        )
    else:
        logger.debug("DFT: no coefficient above %.1e for %d points", threshold, n_samples)
    return CoefficientSet(ranked, n_samples)


def coefficient_stats(coefficients: Sequence[FourierCoefficient]) -> dict[str, Any] | None:
    """Summary statistics and energy distribution of the leading terms. None if empty."""
    if not coefficients:
        return None

    amplitudes = np.array([c.amplitude for c in coefficients], dtype=np.float64)
    total_energy = float(np.sum(amplitudes**2))

    distribution = []
    for c in coefficients[:_STATS_TOP_TERMS]:
        share = c.amplitude**2 / total_energy * 100 if total_energy > 0 else 0.0
        distribution.append(
            {
                "frequency": c.frequency,
                "amplitude": c.amplitude,
                "energy_percent": round(share, 1),
            }
        )

    return {
        "total": len(coefficients),
        "max_amplitude": float(amplitudes[0]),
        "min_amplitude": float(amplitudes[-1]),
        "mean_amplitude": float(np.mean(amplitudes)),
        "total_energy": total_energy,
        "dominant_frequency": coefficients[0].frequency,
        "energy_distribution": distribution,
    }
