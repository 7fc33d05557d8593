"""Tests for the animation clock, hold timer and trace buffer."""

import math

import numpy as np
import pytest

from epicycles.engine.animation import (
    AnimationClock,
    AnimationLoop,
    CancellationToken,
    HoldTimer,
    TraceBuffer,
    TracePoint,
)
from epicycles.engine.config import EngineConfig
from epicycles.engine.dft import CoefficientSet
from epicycles.engine.errors import InvalidParameter


class FakeClock:
    """Manually advanced time source."""

    def __init__(self, now: float = 0.0) -> None:
        self.now = now
        self.slept: list[float] = []

    def __call__(self) -> float:
        return self.now

    def sleep(self, seconds: float) -> None:
        self.slept.append(seconds)
        self.now += seconds


@pytest.fixture
def clock(circle_coefficients):
    return AnimationClock(circle_coefficients, max_count=1, speed=1.0)


def test_trace_buffer_evicts_oldest():
    trace = TraceBuffer(1000)
    for i in range(1500):
        trace.append(TracePoint(float(i), 0.0, 0.0))
    points = trace.snapshot()
    assert len(points) == 1000
    assert points[0].x == 500.0
    assert points[-1].x == 1499.0


def test_trace_buffer_rejects_non_positive_size():
    with pytest.raises(InvalidParameter):
        TraceBuffer(0)


def test_hold_timer_fires_once():
    fired = []
    timer = HoldTimer(5.0, lambda: fired.append(True))
    assert not timer.poll(4.9)
    assert timer.poll(5.0)
    assert not timer.poll(6.0)
    assert fired == [True]
    assert not timer.pending


def test_hold_timer_cancel():
    fired = []
    timer = HoldTimer(1.0, lambda: fired.append(True))
    timer.cancel()
    assert not timer.poll(2.0)
    assert fired == []


def test_tick_while_stopped_does_not_advance(clock):
    frame = clock.tick(3.0)
    assert frame.time == 0.0
    assert not frame.playing
    assert len(clock.trace) == 0


def test_time_advances_by_speed(circle_coefficients):
    anim = AnimationClock(circle_coefficients, max_count=1, speed=0.5)
    anim.play(0.0)
    anim.tick(0.0)
    frame = anim.tick(2.0)
    assert frame.time == pytest.approx(1.0)
    assert frame.progress == pytest.approx(100 / (2 * math.pi))
    x, y = frame.result.final_point
    assert x == pytest.approx(300 * math.cos(1.0), abs=1e-3)
    assert y == pytest.approx(300 * math.sin(1.0), abs=1e-3)


def test_cycle_wrap_holds_then_clears_trace(clock):
    clock.play(0.0)
    clock.tick(0.0)
    frame = clock.tick(7.0)
    assert frame.time == 0.0
    assert frame.cycle_count == 1
    assert frame.drawing_complete
    assert clock.holding
    assert len(frame.trace) == 2

    frame = clock.tick(7.5)
    assert frame.time == 0.0
    assert len(frame.trace) == 2

    frame = clock.tick(8.0)
    assert not clock.holding
    assert frame.trace == []
    assert not frame.drawing_complete

    frame = clock.tick(8.5)
    assert frame.time == pytest.approx(0.5)
    assert len(frame.trace) == 1


def test_pause_during_hold_keeps_trace(clock):
    clock.play(0.0)
    clock.tick(0.0)
    clock.tick(7.0)
    clock.pause()
    assert not clock.holding
    assert len(clock.trace) == 2

    # Long pause: nothing happens while stopped
    clock.tick(50.0)
    assert len(clock.trace) == 2

    clock.play(100.0)
    assert clock.holding
    clock.tick(100.5)
    assert len(clock.trace) == 2
    frame = clock.tick(101.0)
    assert frame.trace == []


def test_toggle(clock):
    clock.toggle(0.0)
    assert clock.playing
    clock.toggle(1.0)
    assert not clock.playing


def test_reset(clock):
    clock.play(0.0)
    clock.tick(0.0)
    clock.tick(7.0)
    clock.reset()
    assert clock.time == 0.0
    assert clock.cycle_count == 0
    assert not clock.drawing_complete
    assert not clock.playing
    assert not clock.holding
    assert len(clock.trace) == 0


def test_set_coefficients_restarts(clock, square_coefficients):
    clock.play(0.0)
    clock.tick(0.0)
    clock.tick(1.0)
    clock.set_coefficients(square_coefficients)
    assert clock.time == 0.0
    assert len(clock.trace) == 0
    assert clock.coefficients is square_coefficients


def test_empty_coefficients_stay_at_origin():
    anim = AnimationClock(CoefficientSet(), max_count=5)
    anim.play(0.0)
    frame = anim.tick(1.0)
    assert frame.result.final_point == (0.0, 0.0)
    assert frame.result.epicycles == ()


@pytest.mark.parametrize("bad", [0, -1, 2.5, True])
def test_invalid_max_count(circle_coefficients, bad):
    with pytest.raises(InvalidParameter):
        AnimationClock(circle_coefficients, max_count=bad)


@pytest.mark.parametrize("bad", [0, -0.5, math.nan, math.inf])
def test_invalid_speed(clock, bad):
    with pytest.raises(InvalidParameter):
        clock.speed = bad


def test_numpy_integer_max_count(circle_coefficients):
    anim = AnimationClock(circle_coefficients, max_count=np.int64(3))
    assert anim.max_count == 3
    assert type(anim.max_count) is int


def test_trace_size_from_config(circle_coefficients):
    anim = AnimationClock(circle_coefficients, max_count=1, config=EngineConfig(trace_max_points=3))
    anim.play(0.0)
    for t in range(10):
        anim.tick(t * 0.1)
    assert len(anim.trace) == 3
    assert anim.speed == pytest.approx(0.8)


def test_loop_runs_max_frames(clock):
    fake = FakeClock()
    loop = AnimationLoop(clock, clock=fake, sleep=fake.sleep, frame_interval=0.5)
    frames = []
    count = loop.run(frames.append, CancellationToken(), max_frames=4)
    assert count == 4
    assert len(frames) == 4
    assert frames[-1].time == pytest.approx(1.5)
    assert not clock.playing


def test_loop_stops_on_cancel(clock):
    fake = FakeClock()
    token = CancellationToken()
    loop = AnimationLoop(clock, clock=fake, sleep=fake.sleep, frame_interval=0.1)

    def on_frame(frame):
        if len(fake.slept) == 2:
            token.cancel()

    assert loop.run(on_frame, token) == 3
    assert len(fake.slept) == 2
    assert not clock.playing
