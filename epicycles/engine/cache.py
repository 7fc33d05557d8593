"""In-memory coefficient cache keyed by (shape kind, point count, parameters).

Coefficient sets are immutable, so a hit can be shared between callers. The
DFT is O(N²); recomputation happens only when the shape selection changes,
never per frame.
"""

from __future__ import annotations

import logging
from collections import OrderedDict
from collections.abc import Callable, Mapping
from typing import Any

from epicycles.engine.dft import CoefficientSet

logger = logging.getLogger(__name__)

CacheKey = tuple[str, int, tuple[tuple[str, Any], ...]]


def make_key(kind: str, point_count: int, params: Mapping[str, Any]) -> CacheKey:
    return (kind, point_count, tuple(sorted(params.items())))


class CoefficientCache:
    """Bounded LRU memo of coefficient sets."""

    def __init__(self, max_entries: int = 32) -> None:
        self.max_entries = max_entries
        self._entries: OrderedDict[CacheKey, CoefficientSet] = OrderedDict()
        self.hits = 0
        self.misses = 0

    def get_or_compute(self, key: CacheKey, compute: Callable[[], CoefficientSet]) -> CoefficientSet:
        cached = self._entries.get(key)
        if cached is not None:
            self._entries.move_to_end(key)
            self.hits += 1
            return cached

        self.misses += 1
        value = compute()
        self._entries[key] = value
        if len(self._entries) > self.max_entries:
            evicted, _ = self._entries.popitem(last=False)
            logger.debug("Coefficient cache evicted %s", evicted)
        return value

    def clear(self) -> None:
        self._entries.clear()

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __len__(self) -> int:
        return len(self._entries)
