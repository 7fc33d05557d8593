"""Shape pipeline orchestrator — generate → preprocess → DFT, with caching."""

from __future__ import annotations

import logging
import time
from typing import Any

from epicycles.engine.cache import CoefficientCache, make_key
from epicycles.engine.catalog import ShapeCatalog, get_catalog
from epicycles.engine.config import EngineConfig
from epicycles.engine.dft import CoefficientSet, compute_coefficients
from epicycles.engine.preprocess import preprocess
from epicycles.engine.registry import GeneratorRegistry, get_registry
from epicycles.utils.geometry import winding_direction

logger = logging.getLogger(__name__)


class ShapePipeline:
    """Turns a shape selection into a ranked coefficient set."""

    def __init__(
        self,
        registry: GeneratorRegistry | None = None,
        catalog: ShapeCatalog | None = None,
        config: EngineConfig | None = None,
        cache: CoefficientCache | None = None,
    ) -> None:
        self.registry = registry or get_registry()
        self.catalog = catalog or get_catalog()
        self.config = config or EngineConfig()
        self.cache = cache if cache is not None else CoefficientCache()

    def run(self, kind: str, point_count: int, **params: Any) -> CoefficientSet:
        """Coefficients for an explicit generator selection (cached)."""
        spec = self.registry.get(kind)
        resolved = spec.resolve_params(params)
        key = make_key(kind, point_count, resolved)
        return self.cache.get_or_compute(key, lambda: self._compute(kind, point_count, resolved))

    def run_shape(self, key: str) -> CoefficientSet:
        """Coefficients for a catalog shape at its default parameters (cached)."""
        d = self.catalog[key]
        return self.run(d.kind, d.point_count, **d.params)

    def _compute(self, kind: str, point_count: int, params: dict[str, Any]) -> CoefficientSet:
        start = time.perf_counter()

        t0 = time.perf_counter()
        raw = self.registry.generate(kind, point_count, **params)
        logger.debug(
            "  generate %s: %d points (winding %d) in %.1fms",
            kind,
            len(raw),
            winding_direction(raw),
            (time.perf_counter() - t0) * 1000,
        )

        t0 = time.perf_counter()
        points = preprocess(raw, mean_distance_factor=self.config.mean_distance_factor)
        logger.debug("  preprocess %s in %.1fms", kind, (time.perf_counter() - t0) * 1000)

        coefficients = compute_coefficients(points, threshold=self.config.negligibility_threshold)

        total = (time.perf_counter() - start) * 1000
        logger.info(
            "Pipeline %s: %d points -> %d coefficients in %.0fms",
            kind,
            point_count,
            len(coefficients),
            total,
        )
        return coefficients


def create_pipeline(config: EngineConfig | None = None) -> ShapePipeline:
    """Factory function for creating a pipeline instance."""
    return ShapePipeline(config=config)
