"""Protocols (interfaces) consumed by the core layer.

The value generator reads time and randomness only through these
capabilities.  Core code depends ONLY on these protocols, never on
concrete implementations, so generation can be made fully
deterministic in tests by injecting fixed sources.
"""

from __future__ import annotations

from typing import Protocol


class Clock(Protocol):
    """Source of wall-clock time."""

    def now_ms(self) -> int:
        """Return the current Unix time in whole milliseconds."""
        ...  # pragma: no cover


class RandomSource(Protocol):
    """Source of random bytes.

    Implementations must be safe to call from several threads at once,
    or be instantiated per caller.
    """

    def random_bytes(self, count: int) -> bytes:
        """Return exactly *count* fresh random bytes."""
        ...  # pragma: no cover
