"""Engine error taxonomy.

All errors are raised synchronously by the call that received the bad input.
Empty point sequences and empty coefficient sets are NOT errors: they are
valid degenerate inputs with documented empty/origin results.
"""

from __future__ import annotations


class EpicycleError(ValueError):
    """Base class for all engine errors."""


class InvalidShape(EpicycleError):
    """Unknown shape identifier passed to a generator or catalog lookup."""

    def __init__(self, kind: str, known: list[str] | None = None) -> None:
        self.kind = kind
        self.known = sorted(known or [])
        msg = f"Unknown shape: {kind!r}"
        if self.known:
            msg += f" (known: {', '.join(self.known)})"
        super().__init__(msg)


class InvalidParameter(EpicycleError):
    """Out-of-range numeric parameter (point count, epicycle count, side count, ...)."""

    def __init__(self, name: str, value: object, reason: str) -> None:
        self.name = name
        self.value = value
        super().__init__(f"Invalid {name}={value!r}: {reason}")
