"""Tick-driven animation clock for epicycle playback.

Single-threaded: every state change happens inside ``tick()``, ``play()``,
``pause()`` or ``reset()`` on the caller's timeline. There is no display
callback and no background timer. Time comes from an injected clock, and the
post-cycle hold is a deadline checked on each tick, so the whole state machine
can be driven by a fake clock in tests.

Cycle life:
    playing ──time reaches 2π──▶ holding (time frozen at 0, trace kept)
    holding ──hold elapses─────▶ trace cleared, advancing again next tick
    holding ──pause()──────────▶ hold cancelled, trace kept, stopped
    stopped ──play()───────────▶ a fresh full hold if the cycle was complete
"""

from __future__ import annotations

import logging
import math
import time
from collections import deque
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from typing import NamedTuple

from epicycles.engine.config import EngineConfig
from epicycles.engine.dft import FourierCoefficient
from epicycles.engine.errors import InvalidParameter
from epicycles.engine.reconstruct import ReconstructionResult, check_max_count, reconstruct

logger = logging.getLogger(__name__)

FULL_TURN = 2 * math.pi


class CancellationToken:
    """Cooperative stop flag shared between the loop and whoever controls it."""

    def __init__(self) -> None:
        self._cancelled = False

    def cancel(self) -> None:
        self._cancelled = True

    @property
    def cancelled(self) -> bool:
        return self._cancelled


class HoldTimer:
    """Cancellable delayed action, fired by polling with the current time."""

    def __init__(self, deadline: float, action: Callable[[], None]) -> None:
        self.deadline = deadline
        self._action = action
        self._done = False

    @property
    def pending(self) -> bool:
        return not self._done

    def cancel(self) -> None:
        self._done = True

    def poll(self, now: float) -> bool:
        """Run the action if the deadline has passed. True if it fired on this call."""
        if self._done or now < self.deadline:
            return False
        self._done = True
        self._action()
        return True


class TracePoint(NamedTuple):
    x: float
    y: float
    # Cycle progress (0-100) when the point was traced
    progress: float


class TraceBuffer:
    """Bounded FIFO of traced points; the oldest points are evicted first."""

    def __init__(self, max_points: int = 1000) -> None:
        if max_points <= 0:
            raise InvalidParameter("max_points", max_points, "must be positive")
        self._points: deque[TracePoint] = deque(maxlen=max_points)

    @property
    def max_points(self) -> int:
        return self._points.maxlen or 0

    def append(self, point: TracePoint) -> None:
        self._points.append(point)

    def clear(self) -> None:
        self._points.clear()

    def snapshot(self) -> list[TracePoint]:
        return list(self._points)

    def __len__(self) -> int:
        return len(self._points)


@dataclass
class FrameState:
    time: float
    progress: float
    cycle_count: int
    drawing_complete: bool
    playing: bool
    result: ReconstructionResult
    trace: list[TracePoint] = field(default_factory=list)


class AnimationClock:
    """Accumulates animation time and produces one reconstructed frame per tick."""

    def __init__(
        self,
        coefficients: Sequence[FourierCoefficient],
        max_count: int,
        speed: float | None = None,
        config: EngineConfig | None = None,
    ) -> None:
        self.config = config or EngineConfig()
        self.coefficients = coefficients
        self.max_count = max_count
        self.speed = self.config.default_speed if speed is None else speed
        self.trace = TraceBuffer(self.config.trace_max_points)

        self.time = 0.0
        self.cycle_count = 0
        self.drawing_complete = False
        self.playing = False
        self._last_tick: float | None = None
        self._hold: HoldTimer | None = None

    # ── configuration ──

    @property
    def max_count(self) -> int:
        return self._max_count

    @max_count.setter
    def max_count(self, value: int) -> None:
        check_max_count(value)
        self._max_count = int(value)

    @property
    def speed(self) -> float:
        return self._speed

    @speed.setter
    def speed(self, value: float) -> None:
        if not math.isfinite(value) or value <= 0:
            raise InvalidParameter("speed", value, "must be a finite positive number")
        self._speed = float(value)

    def set_coefficients(self, coefficients: Sequence[FourierCoefficient]) -> None:
        """Swap in a new shape's coefficients. Playback restarts from scratch."""
        self.coefficients = coefficients
        self.reset()

    # ── controls ──

    @property
    def holding(self) -> bool:
        return self._hold is not None and self._hold.pending

    @property
    def progress(self) -> float:
        return self.time / FULL_TURN * 100

    def play(self, now: float) -> None:
        if self.playing:
            return
        self.playing = True
        self._last_tick = now
        if self.drawing_complete and not self.holding:
            # Hold was interrupted by a pause: show the finished curve again
            self._arm_hold(now)

    def pause(self) -> None:
        if not self.playing:
            return
        self.playing = False
        self._last_tick = None
        if self._hold is not None:
            self._hold.cancel()
            self._hold = None
            logger.debug("Cycle hold cancelled by pause")

    def toggle(self, now: float) -> None:
        if self.playing:
            self.pause()
        else:
            self.play(now)

    def reset(self) -> None:
        if self._hold is not None:
            self._hold.cancel()
            self._hold = None
        self.time = 0.0
        self.cycle_count = 0
        self.drawing_complete = False
        self.playing = False
        self._last_tick = None
        self.trace.clear()

    # ── frame production ──

    def tick(self, now: float) -> FrameState:
        """Advance to ``now`` and return the frame to render."""
        if not self.playing:
            return self._frame(self._reconstruct())

        delta = 0.0 if self._last_tick is None else max(0.0, now - self._last_tick)
        self._last_tick = now

        if self._hold is not None:
            self._hold.poll(now)
            return self._frame(self._reconstruct())

        advanced = self.time + delta * self.speed
        if advanced >= FULL_TURN:
            self.time = 0.0
            self.cycle_count += 1
            self.drawing_complete = True
            self._arm_hold(now)
            logger.info("Cycle %d complete", self.cycle_count)
        else:
            self.time = advanced

        result = self._reconstruct()
        x, y = result.final_point
        self.trace.append(TracePoint(x, y, self.progress))
        return self._frame(result)

    def _arm_hold(self, now: float) -> None:
        self._hold = HoldTimer(now + self.config.cycle_hold_seconds, self._end_hold)

    def _end_hold(self) -> None:
        self._hold = None
        self.trace.clear()
        self.drawing_complete = False
        logger.debug("Cycle hold elapsed, trace cleared")

    def _reconstruct(self) -> ReconstructionResult:
        return reconstruct(
            self.coefficients,
            self.time,
            self.max_count,
            target_size=self.config.target_visual_size,
        )

    def _frame(self, result: ReconstructionResult) -> FrameState:
        return FrameState(
            time=self.time,
            progress=self.progress,
            cycle_count=self.cycle_count,
            drawing_complete=self.drawing_complete,
            playing=self.playing,
            result=result,
            trace=self.trace.snapshot(),
        )


class AnimationLoop:
    """Explicit frame loop around an AnimationClock.

    ``clock`` returns the current time in seconds and ``sleep`` waits between
    frames; both are injected so tests can drive the loop without real time.
    """

    def __init__(
        self,
        animation: AnimationClock,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
        frame_interval: float = 1 / 60,
    ) -> None:
        self.animation = animation
        self.clock = clock
        self.sleep = sleep
        self.frame_interval = frame_interval

    def run(
        self,
        on_frame: Callable[[FrameState], None],
        token: CancellationToken,
        max_frames: int | None = None,
    ) -> int:
        """Tick until ``token`` is cancelled (or ``max_frames`` ticks). Returns frames produced."""
        frames = 0
        self.animation.play(self.clock())
        try:
            while not token.cancelled:
                if max_frames is not None and frames >= max_frames:
                    break
                on_frame(self.animation.tick(self.clock()))
                frames += 1
                if not token.cancelled:
                    self.sleep(self.frame_interval)
        finally:
            self.animation.pause()
        logger.debug("Animation loop stopped after %d frames", frames)
        return frames
