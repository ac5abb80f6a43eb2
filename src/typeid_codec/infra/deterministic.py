"""Deterministic clock and random sources for tests and reproducible runs.

Never use :class:`SeededRandomSource` for identifiers that leave a test:
its output is fully predictable from the seed.
"""

from __future__ import annotations

import random


class FixedClock:
    """Clock frozen at a given millisecond until :meth:`advance` is called."""

    def __init__(self, now_ms: int = 0) -> None:
        self._now_ms: int = now_ms

    def now_ms(self) -> int:
        return self._now_ms

    def advance(self, milliseconds: int = 1) -> None:
        self._now_ms += milliseconds


class SeededRandomSource:
    """Pseudo-random bytes from a seeded :class:`random.Random`."""

    def __init__(self, seed: int = 0) -> None:
        self._rng = random.Random(seed)

    def random_bytes(self, count: int) -> bytes:
        return self._rng.randbytes(count)
