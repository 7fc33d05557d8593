"""Shape generator registry — every generator is a standalone function registered via decorator.

Usage:
    @generator(kind="circle", description="Unit circle, single harmonic")
    def circle(point_count: int, *, radius: float = 1.0) -> NDArray[np.float64]:
        t = sample_parameter(point_count)
        return np.column_stack([radius * np.cos(2 * np.pi * t), radius * np.sin(2 * np.pi * t)])

Adding a new shape = creating one file in ``engine/generators`` with the decorator.
Keyword-only arguments of the function are its shape parameters; their
defaults are the shape's default parameters.
"""

from __future__ import annotations

import importlib
import inspect
import logging
import pkgutil
from dataclasses import dataclass, field
from typing import Any, Callable

import numpy as np
from numpy.typing import NDArray

from epicycles.engine.errors import InvalidParameter, InvalidShape
from epicycles.utils.geometry import freeze

logger = logging.getLogger(__name__)

GeneratorFn = Callable[..., NDArray[np.float64]]


@dataclass
class GeneratorSpec:
    kind: str
    fn: GeneratorFn
    defaults: dict[str, Any] = field(default_factory=dict)
    description: str = ""
    periodic: bool = True

    def resolve_params(self, params: dict[str, Any]) -> dict[str, Any]:
        unknown = set(params) - set(self.defaults)
        if unknown:
            raise InvalidParameter(
                "params",
                sorted(unknown),
                f"not accepted by {self.kind!r} (accepts: {', '.join(sorted(self.defaults)) or 'none'})",
            )
        return {**self.defaults, **params}


class GeneratorRegistry:
    """Registry of shape generators, keyed by shape kind."""

    def __init__(self) -> None:
        self._generators: dict[str, GeneratorSpec] = {}

    def register(self, spec: GeneratorSpec) -> None:
        if spec.kind in self._generators:
            raise ValueError(f"Duplicate generator kind: {spec.kind}")
        self._generators[spec.kind] = spec
        logger.debug("Registered generator %s", spec.kind)

    def get(self, kind: str) -> GeneratorSpec:
        try:
            return self._generators[kind]
        except KeyError:
            raise InvalidShape(kind, list(self._generators)) from None

    def kinds(self) -> list[str]:
        return sorted(self._generators)

    def all(self) -> list[GeneratorSpec]:
        return [self._generators[k] for k in self.kinds()]

    def generate(self, kind: str, point_count: int, **params: Any) -> NDArray[np.float64]:
        """Run the generator for ``kind``. Returns a read-only Nx2 array of exactly ``point_count`` rows."""
        spec = self.get(kind)
        if isinstance(point_count, bool) or not isinstance(point_count, (int, np.integer)):
            raise InvalidParameter("point_count", point_count, "must be an integer")
        if point_count <= 0:
            raise InvalidParameter("point_count", point_count, "must be positive")

        points = spec.fn(int(point_count), **spec.resolve_params(params))
        points = np.ascontiguousarray(points, dtype=np.float64)
        if points.shape != (point_count, 2):
            raise RuntimeError(
                f"Generator {kind!r} returned shape {points.shape}, expected ({point_count}, 2)"
            )
        return freeze(points)

    @property
    def count(self) -> int:
        return len(self._generators)


# Module-level singleton
_registry = GeneratorRegistry()
_loaded = False


def get_registry() -> GeneratorRegistry:
    load_generators()
    return _registry


def load_generators() -> None:
    """Import every module in ``engine.generators`` so @generator decorators fire."""
    global _loaded
    if _loaded:
        return
    _loaded = True

    package = importlib.import_module("epicycles.engine.generators")
    for _, module_name, _ in pkgutil.iter_modules(package.__path__):
        importlib.import_module(f"{package.__name__}.{module_name}")
    logger.debug("Loaded %d generators", _registry.count)


def generator(*, kind: str, description: str = "", periodic: bool = True):
    """Decorator to register a shape generator function."""

    def decorator(fn: GeneratorFn) -> GeneratorFn:
        sig = inspect.signature(fn)
        defaults = {
            name: p.default
            for name, p in sig.parameters.items()
            if p.kind is inspect.Parameter.KEYWORD_ONLY and p.default is not inspect.Parameter.empty
        }
        _registry.register(
            GeneratorSpec(
                kind=kind,
                fn=fn,
                defaults=defaults,
                description=description,
                periodic=periodic,
            )
        )
        return fn

    return decorator


def generate(kind: str, point_count: int, **params: Any) -> NDArray[np.float64]:
    """Generate ``point_count`` points tracing the shape ``kind`` once."""
    return get_registry().generate(kind, point_count, **params)
