"""FastAPI dependency injection."""

from __future__ import annotations

from functools import lru_cache

from epicycles.config import Settings, settings
from epicycles.engine.catalog import ShapeCatalog, get_catalog
from epicycles.engine.pipeline import ShapePipeline


def get_settings() -> Settings:
    return settings


def get_shape_catalog() -> ShapeCatalog:
    return get_catalog()


@lru_cache(maxsize=1)
def get_pipeline() -> ShapePipeline:
    # One pipeline per process so the coefficient cache is shared across requests
    return ShapePipeline(catalog=get_catalog(), config=settings.engine_config())
