"""Infrastructure layer: time and randomness from the host system.

Concrete implementations of the :mod:`typeid_codec.core.protocols`
capabilities live here, both the production sources and deterministic
stand-ins for tests.

Rules
-----
* No imports from ``cli``.
* No user-facing output.
"""

from typeid_codec.infra.deterministic import FixedClock, SeededRandomSource
from typeid_codec.infra.system_sources import SecureRandomSource, SystemClock

__all__: list[str] = [
    "FixedClock",
    "SecureRandomSource",
    "SeededRandomSource",
    "SystemClock",
]
