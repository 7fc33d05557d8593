"""Shape catalog — static, read-only table of selectable shapes.

Built once at import time and never mutated. Callers (pipeline, API) receive
the catalog by injection; ``get_catalog()`` returns the process-wide instance.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

import numpy as np
from numpy.typing import NDArray

from epicycles.engine.errors import InvalidParameter, InvalidShape
from epicycles.engine.registry import GeneratorRegistry, get_registry

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ShapeDescriptor:
    key: str
    name: str
    description: str
    # Generator kind in the registry
    kind: str
    point_count: int
    params: Mapping[str, Any] = field(default_factory=dict)
    recommended_epicycles: int = 30
    min_epicycles: int = 5
    max_epicycles: int = 100
    complexity: str = "simple"
    harmonics: str = ""
    characteristics: tuple[str, ...] = ()
    color: str = "#00ff88"

    @property
    def epicycle_range(self) -> dict[str, int]:
        return {
            "min": self.min_epicycles,
            "optimal": self.recommended_epicycles,
            "max": self.max_epicycles,
        }

    def to_dict(self) -> dict[str, Any]:
        return {
            "key": self.key,
            "name": self.name,
            "description": self.description,
            "kind": self.kind,
            "point_count": self.point_count,
            "params": dict(self.params),
            "epicycles": self.epicycle_range,
            "complexity": self.complexity,
            "harmonics": self.harmonics,
            "characteristics": list(self.characteristics),
            "color": self.color,
        }


_DESCRIPTORS: tuple[ShapeDescriptor, ...] = (
    ShapeDescriptor(
        key="circle",
        name="Circle",
        description="Constant dominant frequency, perfectly smooth",
        kind="circle",
        point_count=800,
        params=MappingProxyType({"radius": 1.0}),
        recommended_epicycles=1,
        min_epicycles=1,
        max_epicycles=5,
        complexity="simple",
        harmonics="fundamental",
        characteristics=("symmetric", "smooth", "constant frequency"),
        color="#3b82f6",
    ),
    ShapeDescriptor(
        key="square",
        name="Square",
        description="Odd harmonics, sharp corners need more terms",
        kind="square",
        point_count=1000,
        params=MappingProxyType({"size": 1.0}),
        recommended_epicycles=20,
        min_epicycles=15,
        max_epicycles=35,
        complexity="medium",
        harmonics="odd, emphasis on smoothing",
        characteristics=("sharp corners", "abrupt turns", "needs smoothing"),
        color="#ef4444",
    ),
    ShapeDescriptor(
        key="triangle",
        name="Triangle",
        description="Odd harmonics, improves quickly with few terms",
        kind="triangle",
        point_count=900,
        params=MappingProxyType({"size": 1.0}),
        recommended_epicycles=10,
        min_epicycles=5,
        max_epicycles=20,
        complexity="simple",
        harmonics="odd (1, 3, 5, ...)",
        characteristics=("angular", "fast convergence", "odd harmonics"),
        color="#10b981",
    ),
    ShapeDescriptor(
        key="star",
        name="Star",
        description="Many harmonics, discontinuities at the tips",
        kind="star",
        point_count=1200,
        params=MappingProxyType({"outer_radius": 1.0, "inner_radius": 0.4}),
        recommended_epicycles=35,
        min_epicycles=25,
        max_epicycles=50,
        complexity="high",
        harmonics="many, with discontinuities",
        characteristics=("detailed tips", "discontinuities", "many frequencies"),
        color="#f59e0b",
    ),
    ShapeDescriptor(
        key="letter_s",
        name="Letter S",
        description="Complex curves, variable curvature needs 50+ terms",
        kind="letter_s",
        point_count=1000,
        params=MappingProxyType({"size": 1.0}),
        recommended_epicycles=50,
        min_epicycles=40,
        max_epicycles=80,
        complexity="high",
        harmonics="smooth curves with variable curvature",
        characteristics=("complex curves", "variable curvature", "high fidelity required"),
        color="#8b5cf6",
    ),
    ShapeDescriptor(
        key="spiral",
        name="Spiral",
        description="Not strictly periodic, 5-8 epicycles work well",
        kind="spiral",
        point_count=1200,
        params=MappingProxyType({"turns": 2.0, "max_radius": 1.0}),
        recommended_epicycles=6,
        min_epicycles=5,
        max_epicycles=10,
        complexity="simple",
        harmonics="approximation of a non-periodic curve",
        characteristics=("non-periodic", "continuous stroke", "efficient"),
        color="#06b6d4",
    ),
    ShapeDescriptor(
        key="hexagon",
        name="Hexagon",
        description="Regular polygon, harmonics spaced by the side count",
        kind="polygon",
        point_count=900,
        params=MappingProxyType({"sides": 6, "size": 1.0}),
        recommended_epicycles=12,
        min_epicycles=6,
        max_epicycles=30,
        complexity="medium",
        harmonics="1 and every 6th harmonic around it",
        characteristics=("angular", "six-fold symmetry"),
        color="#ec4899",
    ),
)


class ShapeCatalog(Mapping[str, ShapeDescriptor]):
    """Immutable key → ShapeDescriptor mapping, validated against the generator registry."""

    def __init__(
        self,
        descriptors: tuple[ShapeDescriptor, ...] | list[ShapeDescriptor],
        registry: GeneratorRegistry | None = None,
    ) -> None:
        self.registry = registry or get_registry()
        entries: dict[str, ShapeDescriptor] = {}
        for d in descriptors:
            if d.key in entries:
                raise ValueError(f"Duplicate catalog key: {d.key}")
            # Fails fast on unknown kinds or parameters
            self.registry.get(d.kind).resolve_params(dict(d.params))
            if not d.min_epicycles <= d.recommended_epicycles <= d.max_epicycles:
                raise ValueError(f"Catalog entry {d.key!r}: recommended epicycles outside [min, max]")
            entries[d.key] = d
        self._entries = MappingProxyType(entries)
        logger.debug("Shape catalog built with %d entries", len(entries))

    def __getitem__(self, key: str) -> ShapeDescriptor:
        try:
            return self._entries[key]
        except KeyError:
            raise InvalidShape(key, list(self._entries)) from None

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def get(self, key: str, default: ShapeDescriptor | None = None) -> ShapeDescriptor | None:
        return self._entries.get(key, default)

    def lookup(self, key: str) -> ShapeDescriptor:
        """Like ``catalog[key]`` — raises InvalidShape for unknown keys."""
        return self[key]

    def points_for(self, key: str) -> NDArray[np.float64]:
        """Raw (unpreprocessed) points of a catalog shape at its default parameters."""
        d = self[key]
        return self.registry.generate(d.kind, d.point_count, **d.params)

    def recommended_epicycles(self, key: str) -> int:
        return self[key].recommended_epicycles

    def epicycle_range(self, key: str) -> dict[str, int]:
        return self[key].epicycle_range

    def resolve_epicycle_count(self, key: str, auto: bool, manual: int | None = None) -> int:
        """Concrete epicycle count: the recommendation when ``auto``, else ``manual``."""
        descriptor = self[key]
        if auto:
            return descriptor.recommended_epicycles
        if manual is None or isinstance(manual, bool) or manual <= 0:
            raise InvalidParameter("max_count", manual, "must be a positive integer when auto is off")
        return int(manual)


_catalog: ShapeCatalog | None = None


def get_catalog() -> ShapeCatalog:
    global _catalog
    if _catalog is None:
        _catalog = ShapeCatalog(_DESCRIPTORS)
    return _catalog
