"""Tests for the shape pipeline and coefficient cache."""

import pytest

from epicycles.engine.cache import CoefficientCache, make_key
from epicycles.engine.config import EngineConfig
from epicycles.engine.dft import CoefficientSet
from epicycles.engine.errors import InvalidParameter, InvalidShape
from epicycles.engine.pipeline import ShapePipeline, create_pipeline


def test_run_shape_circle():
    pipeline = create_pipeline()
    coeffs = pipeline.run_shape("circle")
    assert coeffs.point_count == 800
    assert coeffs[0].frequency == 1
    assert 0.95 <= coeffs[0].amplitude <= 1.05


def test_results_are_cached():
    pipeline = ShapePipeline()
    first = pipeline.run("square", 200)
    second = pipeline.run("square", 200)
    assert first is second
    assert pipeline.cache.hits == 1
    assert pipeline.cache.misses == 1


def test_default_params_share_a_cache_entry():
    pipeline = ShapePipeline()
    assert pipeline.run("circle", 64) is pipeline.run("circle", 64, radius=1.0)


def test_different_params_recompute():
    pipeline = ShapePipeline()
    a = pipeline.run("polygon", 120, sides=5)
    b = pipeline.run("polygon", 120, sides=6)
    assert a is not b
    assert len(pipeline.cache) == 2


def test_errors_are_not_cached():
    pipeline = ShapePipeline()
    with pytest.raises(InvalidParameter):
        pipeline.run("circle", 0)
    with pytest.raises(InvalidShape):
        pipeline.run("heart", 100)
    with pytest.raises(InvalidShape):
        pipeline.run_shape("heart")
    with pytest.raises(InvalidParameter):
        pipeline.run("polygon", 100, sides=2)
    assert len(pipeline.cache) == 0


def test_threshold_from_config():
    pipeline = ShapePipeline(config=EngineConfig(negligibility_threshold=0.01))
    coeffs = pipeline.run("square", 200)
    assert all(c.amplitude > 0.01 for c in coeffs)


def test_cache_evicts_least_recently_used():
    cache = CoefficientCache(max_entries=2)
    a, b, c = (make_key("circle", n, {}) for n in (10, 20, 30))
    cache.get_or_compute(a, CoefficientSet)
    cache.get_or_compute(b, CoefficientSet)
    cache.get_or_compute(a, CoefficientSet)
    cache.get_or_compute(c, CoefficientSet)
    assert a in cache
    assert b not in cache
    assert c in cache
    assert len(cache) == 2
    cache.clear()
    assert len(cache) == 0


def test_make_key_ignores_param_order():
    assert make_key("star", 10, {"a": 1, "b": 2}) == make_key("star", 10, {"b": 2, "a": 1})


def test_settings_feed_engine_config(monkeypatch):
    from epicycles.config import Settings

    monkeypatch.setenv("TRACE_MAX_POINTS", "250")
    monkeypatch.setenv("NEGLIGIBILITY_THRESHOLD", "0.001")
    config = Settings().engine_config()
    assert config.trace_max_points == 250
    assert config.negligibility_threshold == 0.001
    assert config.target_visual_size == 300.0
