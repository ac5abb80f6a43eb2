"""UUIDv7-shaped 128-bit value generation.

Layout of a generated value (big-endian)::

    bytes 0-5   48-bit Unix timestamp in milliseconds
    byte  6     0111 version nibble + 4 random bits
    byte  7     8 random bits
    byte  8     10 variant bits + 6 random bits
    bytes 9-15  56 random bits

There is no per-millisecond counter.  Two values created in the same
millisecond differ only in their random bits, so their relative order
is arbitrary; callers that need a strict total order must add their own
sequence.
"""

from __future__ import annotations

from typeid_codec.core.hexcodec import coerce_value, inspect_value
from typeid_codec.core.protocols import Clock, RandomSource

RANDOM_LENGTH: int = 10

_TIMESTAMP_MASK: int = (1 << 48) - 1
_VERSION_7: int = 0x70
_VARIANT_RFC4122: int = 0x80


class ValueGenerator:
    """Produce version-7 values from injected time and randomness.

    Parameters
    ----------
    clock:
        Any object satisfying the :class:`Clock` protocol.
    random_source:
        Any object satisfying the :class:`RandomSource` protocol.  Ten
        bytes are drawn per call; nothing is cached between calls.
    """

    def __init__(self, clock: Clock, random_source: RandomSource) -> None:
        self._clock: Clock = clock
        self._random: RandomSource = random_source

    def generate(self) -> bytes:
        """Return a fresh 16-byte value."""
        timestamp = self._clock.now_ms() & _TIMESTAMP_MASK
        rand = self._random.random_bytes(RANDOM_LENGTH)
        if len(rand) != RANDOM_LENGTH:
            raise ValueError(
                f"random source returned {len(rand)} bytes, "
                f"expected {RANDOM_LENGTH}"
            )

        value = bytearray(timestamp.to_bytes(6, "big"))
        value.append((rand[0] & 0x0F) | _VERSION_7)
        value.append(rand[1])
        value.append((rand[2] & 0x3F) | _VARIANT_RFC4122)
        value.extend(rand[3:])
        return bytes(value)


def is_uuid7(value: object) -> bool:
    """Strict check for self-generated values.

    True when *value* (any shape ``create`` accepts: bytes-like or
    :class:`uuid.UUID`) is 16 bytes with version nibble ``0111`` and
    variant bits ``10``.  The codec itself accepts any 16 bytes.
    """
    if inspect_value(value) is not None:
        return False
    raw = coerce_value(value)
    return (raw[6] & 0xF0) == _VERSION_7 and (raw[8] & 0xC0) == _VARIANT_RFC4122


def timestamp_ms(value: bytes) -> int:
    """Read the 48-bit millisecond timestamp from a version-7 value."""
    return int.from_bytes(value[:6], "big")
