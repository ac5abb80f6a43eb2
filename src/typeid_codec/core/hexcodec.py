"""Conversions between 128-bit values and their hex / UUID spellings.

Also hosts :func:`coerce_value`, the outer-boundary normalisation that
turns the value shapes accepted by the public API into plain ``bytes``.
"""

from __future__ import annotations

import re
import uuid
from typing import Any

from typeid_codec.core.base32 import VALUE_LENGTH
from typeid_codec.core.models import Diagnostic, ErrorKind

_HEX_RE = re.compile(
    r"[0-9a-f]{32}"
    r"|[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}",
    re.IGNORECASE,
)


def value_to_hex(value: bytes) -> str:
    """Return 32 lowercase hex characters for a 16-byte value."""
    return coerce_value(value).hex()


def hex_to_value(text: str) -> bytes:
    """Parse a hex UUID into 16 bytes.

    Accepts 32 hex digits either bare or in the canonical 8-4-4-4-12
    hyphenated grouping, in any letter case.

    Raises
    ------
    InvalidHexError
        For anything else.
    """
    if not isinstance(text, str) or _HEX_RE.fullmatch(text) is None:
        raise Diagnostic(
            kind=ErrorKind.INVALID_HEX,
            message=f"Not a 128-bit hex value: {text!r}",
            value=text,
            hint="Expected 32 hex digits, optionally grouped as 8-4-4-4-12.",
        ).to_exception()
    return bytes.fromhex(text.replace("-", ""))


def inspect_value(value: Any) -> Diagnostic | None:
    """Return a :class:`Diagnostic` if *value* cannot be used as a value."""
    if isinstance(value, uuid.UUID):
        return None
    if not isinstance(value, (bytes, bytearray, memoryview)):
        return Diagnostic(
            kind=ErrorKind.INVALID_VALUE_TYPE,
            message=(
                "Value must be bytes or uuid.UUID, "
                f"got {type(value).__name__}"
            ),
            value=value,
        )
    # nbytes, not len(): a memoryview over wider items counts elements.
    size = memoryview(value).nbytes
    if size != VALUE_LENGTH:
        return Diagnostic(
            kind=ErrorKind.INVALID_VALUE_LENGTH,
            message=f"Value must be exactly {VALUE_LENGTH} bytes, got {size}",
            value=bytes(value),
        )
    return None


def coerce_value(value: Any) -> bytes:
    """Normalise *value* to an immutable 16-byte ``bytes``.

    Raises
    ------
    InvalidValueTypeError
        If *value* is neither bytes-like nor a :class:`uuid.UUID`.
    InvalidValueLengthError
        If a bytes-like *value* is not 16 bytes long.
    """
    diagnostic = inspect_value(value)
    if diagnostic is not None:
        raise diagnostic.to_exception()
    if isinstance(value, uuid.UUID):
        return value.bytes
    return bytes(value)
