"""Shared test fixtures."""

from __future__ import annotations

import pytest

from epicycles.engine.dft import CoefficientSet, compute_coefficients
from epicycles.engine.preprocess import preprocess
from epicycles.engine.registry import generate

# Point counts used by the catalog defaults
CIRCLE_POINTS = 800
SQUARE_POINTS = 1000
SPIRAL_POINTS = 1200

# Shapes whose sampled boundary closes on itself
PERIODIC_SHAPES = [
    ("circle", {}),
    ("square", {}),
    ("triangle", {}),
    ("star", {}),
    ("polygon", {"sides": 5}),
]


def coefficients_for(kind: str, point_count: int, **params) -> CoefficientSet:
    return compute_coefficients(preprocess(generate(kind, point_count, **params)))


@pytest.fixture(scope="session")
def circle_coefficients() -> CoefficientSet:
    return coefficients_for("circle", CIRCLE_POINTS, radius=1.0)


@pytest.fixture(scope="session")
def square_coefficients() -> CoefficientSet:
    return coefficients_for("square", SQUARE_POINTS)


@pytest.fixture(scope="session")
def spiral_coefficients() -> CoefficientSet:
    return coefficients_for("spiral", SPIRAL_POINTS)


@pytest.fixture(scope="session")
def star_coefficients() -> CoefficientSet:
    return coefficients_for("star", 600)
