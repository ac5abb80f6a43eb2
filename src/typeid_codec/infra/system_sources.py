"""Production clock and random sources.

* :class:`SystemClock` reads ``time.time_ns()`` and truncates to whole
  milliseconds.
* :class:`SecureRandomSource` draws from :mod:`secrets`, the OS CSPRNG,
  which is safe to share between threads.
"""

from __future__ import annotations

import secrets
import time


class SystemClock:
    """:class:`~typeid_codec.core.protocols.Clock` backed by the wall clock."""

    def now_ms(self) -> int:
        return time.time_ns() // 1_000_000


class SecureRandomSource:
    """:class:`~typeid_codec.core.protocols.RandomSource` backed by :mod:`secrets`."""

    def random_bytes(self, count: int) -> bytes:
        return secrets.token_bytes(count)
