"""Engine configuration — numerical and presentation tuning constants."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class EngineConfig:
    """Tuning knobs shared by the DFT, reconstructor and animation clock."""

    # Coefficients at or below this amplitude are dropped as numerical noise
    negligibility_threshold: float = 1e-6

    # Radius (in render units) given to the principal vector
    target_visual_size: float = 300.0

    # Dual-criterion preprocessing: mean distance is inflated by this factor
    # before it competes with the max distance
    mean_distance_factor: float = 1.5

    # Trace ring buffer capacity (FIFO eviction)
    trace_max_points: int = 1000

    # Hold after a completed cycle before the trace is cleared
    cycle_hold_seconds: float = 1.0

    # Time-speed multiplier applied to wall-clock seconds
    default_speed: float = 0.8
