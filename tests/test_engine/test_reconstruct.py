"""Tests for epicycle reconstruction."""

import math

import numpy as np
import pytest

from epicycles.engine.dft import CoefficientSet, FourierCoefficient
from epicycles.engine.errors import InvalidParameter
from epicycles.engine.preprocess import preprocess
from epicycles.engine.reconstruct import closure_gap, reconstruct, trace_path
from epicycles.engine.registry import generate
from tests.conftest import PERIODIC_SHAPES, coefficients_for


def _coeff(frequency: int, amplitude: float, phase: float = 0.0) -> FourierCoefficient:
    return FourierCoefficient.from_complex(frequency, amplitude * complex(math.cos(phase), math.sin(phase)))


def test_empty_coefficients_give_origin():
    result = reconstruct(CoefficientSet(), time=1.0, max_count=10)
    assert result.epicycles == ()
    assert result.final_point == (0.0, 0.0)


@pytest.mark.parametrize("max_count", [0, -1, True, 2.5])
def test_rejects_bad_max_count(max_count):
    with pytest.raises(InvalidParameter):
        reconstruct([_coeff(1, 1.0)], time=0.0, max_count=max_count)


@pytest.mark.parametrize("time", [math.inf, -math.inf, math.nan])
def test_rejects_non_finite_time(time):
    with pytest.raises(InvalidParameter):
        reconstruct([_coeff(1, 1.0)], time=time, max_count=1)


def test_quarter_turn_of_principal_vector(circle_coefficients):
    result = reconstruct(circle_coefficients, time=math.pi / 2, max_count=1)
    assert len(result.epicycles) == 1
    x, y = result.final_point
    assert x == pytest.approx(0.0, abs=1e-6)
    assert y == pytest.approx(300.0)


def test_target_size_sets_principal_radius(circle_coefficients):
    result = reconstruct(circle_coefficients, time=0.0, max_count=1, target_size=50.0)
    assert result.epicycles[0].radius == pytest.approx(50.0)
    assert result.final_point == pytest.approx((50.0, 0.0), abs=1e-6)


def test_frequency_sets_rotation_speed():
    coeffs = [_coeff(2, 1.0), _coeff(7, 0.5, math.pi)]
    result = reconstruct(coeffs, time=math.pi / 4, max_count=1)
    assert result.epicycles[0].angle == pytest.approx(math.pi / 2)
    assert result.final_point == pytest.approx((0.0, 300.0), abs=1e-9)


def test_chain_links_end_to_start(square_coefficients):
    result = reconstruct(square_coefficients, time=1.234, max_count=25)
    chain = result.epicycles
    assert len(chain) == 25
    assert chain[0].start == (0.0, 0.0)
    for prev, cur in zip(chain, chain[1:]):
        assert cur.start == prev.end
    assert result.final_point == chain[-1].end


def test_epicycle_fields(square_coefficients):
    result = reconstruct(square_coefficients, time=0.5, max_count=10)
    principal = square_coefficients[0].amplitude
    for epicycle, coeff in zip(result.epicycles, square_coefficients):
        assert epicycle.frequency == coeff.frequency
        assert epicycle.amplitude == coeff.amplitude
        assert epicycle.angle == pytest.approx(coeff.frequency * 0.5 + coeff.phase)
        assert epicycle.radius == pytest.approx(coeff.amplitude * 300.0 / principal)
        assert epicycle.normalized_amplitude == pytest.approx(coeff.amplitude / principal)
        dx = epicycle.end[0] - epicycle.start[0]
        dy = epicycle.end[1] - epicycle.start[1]
        assert math.hypot(dx, dy) == pytest.approx(epicycle.radius)
    assert result.epicycles[0].normalized_amplitude == 1.0


def test_max_count_larger_than_set(circle_coefficients):
    result = reconstruct(circle_coefficients, time=0.0, max_count=10_000)
    assert len(result.epicycles) == len(circle_coefficients)


@pytest.mark.parametrize("kind,params", PERIODIC_SHAPES)
def test_full_period_closes(kind, params):
    coeffs = coefficients_for(kind, 400, **params)
    start = reconstruct(coeffs, time=0.0, max_count=len(coeffs)).final_point
    end = reconstruct(coeffs, time=2 * math.pi, max_count=len(coeffs)).final_point
    assert end == pytest.approx(start, abs=1e-6)


@pytest.mark.parametrize("kind,params", PERIODIC_SHAPES)
def test_all_terms_reproduce_samples(kind, params):
    points = preprocess(generate(kind, 200, **params))
    coeffs = coefficients_for(kind, 200, **params)
    scale = 300.0 / coeffs[0].amplitude
    times = 2 * math.pi * np.arange(200) / 200
    traced = trace_path(coeffs, len(coeffs), times)
    assert np.allclose(traced / scale, points, atol=1e-4)


def test_trace_path_matches_reconstruct(star_coefficients):
    times = [0.0, 0.3, 2.0, 5.9]
    traced = trace_path(star_coefficients, 35, times)
    for t, row in zip(times, traced):
        expected = reconstruct(star_coefficients, t, 35).final_point
        assert tuple(row) == pytest.approx(expected, abs=1e-6)


def test_trace_path_empty():
    assert trace_path(CoefficientSet(), 5, [0.0, 1.0]).shape == (2, 2)


@pytest.mark.parametrize("kind,params", PERIODIC_SHAPES)
def test_periodic_shapes_close(kind, params):
    coeffs = coefficients_for(kind, 400, **params)
    assert closure_gap(coeffs, coeffs.point_count) < 3.0


def test_spiral_does_not_close(spiral_coefficients):
    gap = closure_gap(spiral_coefficients, spiral_coefficients.point_count)
    assert gap > 20.0


def test_closure_gap_degenerate():
    assert closure_gap(CoefficientSet(), 100) == 0.0
