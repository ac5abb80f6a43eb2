"""Domain models for typeid-codec.

All models are **frozen** dataclasses: immutable value objects with no
I/O.  :class:`Diagnostic` is the tagged failure value produced by every
non-raising validation path; :meth:`Diagnostic.to_exception` maps it onto
the :mod:`typeid_codec.exceptions` hierarchy for the raising paths.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from enum import Enum
from typing import Any

from typeid_codec import exceptions


# ---------------------------------------------------------------------------
# Error kinds
# ---------------------------------------------------------------------------

class ErrorKind(str, Enum):
    """Every way a TypeID, prefix, suffix or value can be rejected."""

    INVALID_INPUT_TYPE = "invalid_input_type"
    INVALID_LENGTH = "invalid_length"
    INVALID_CASE = "invalid_case"
    LEADING_UNDERSCORE = "leading_underscore"
    INVALID_PREFIX_TYPE = "invalid_prefix_type"
    PREFIX_TOO_LONG = "prefix_too_long"
    INVALID_PREFIX_FORMAT = "invalid_prefix_format"
    INVALID_SUFFIX_LENGTH = "invalid_suffix_length"
    INVALID_SUFFIX_ALPHABET = "invalid_suffix_alphabet"
    SUFFIX_OVERFLOW = "suffix_overflow"
    INVALID_VALUE_TYPE = "invalid_value_type"
    INVALID_VALUE_LENGTH = "invalid_value_length"
    INVALID_HEX = "invalid_hex"
    DECODE_FAILURE = "decode_failure"


_EXCEPTIONS: dict[ErrorKind, type[exceptions.TypeIdError]] = {
    ErrorKind.INVALID_INPUT_TYPE: exceptions.InvalidInputTypeError,
    ErrorKind.INVALID_LENGTH: exceptions.InvalidLengthError,
    ErrorKind.INVALID_CASE: exceptions.InvalidCaseError,
    ErrorKind.LEADING_UNDERSCORE: exceptions.LeadingUnderscoreError,
    ErrorKind.INVALID_PREFIX_TYPE: exceptions.InvalidPrefixTypeError,
    ErrorKind.PREFIX_TOO_LONG: exceptions.PrefixTooLongError,
    ErrorKind.INVALID_PREFIX_FORMAT: exceptions.InvalidPrefixFormatError,
    ErrorKind.INVALID_SUFFIX_LENGTH: exceptions.InvalidSuffixLengthError,
    ErrorKind.INVALID_SUFFIX_ALPHABET: exceptions.InvalidSuffixAlphabetError,
    ErrorKind.SUFFIX_OVERFLOW: exceptions.SuffixOverflowError,
    ErrorKind.INVALID_VALUE_TYPE: exceptions.InvalidValueTypeError,
    ErrorKind.INVALID_VALUE_LENGTH: exceptions.InvalidValueLengthError,
    ErrorKind.INVALID_HEX: exceptions.InvalidHexError,
    ErrorKind.DECODE_FAILURE: exceptions.DecodeFailureError,
}


# ---------------------------------------------------------------------------
# Diagnostic
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Diagnostic:
    """Why a piece of input was rejected.

    Returned (never raised) by ``inspect_*`` helpers and by
    :func:`~typeid_codec.core.typeid_format.explain`.
    """

    kind: ErrorKind
    """Machine-readable failure category."""

    message: str
    """Human-readable description of the failure."""

    value: Any
    """The offending input (whole string, prefix, suffix or value)."""

    position: int | None = None
    """Index of the offending symbol, for alphabet and overflow failures."""

    symbol: str | None = None
    """The offending suffix symbol itself, for alphabet and overflow failures."""

    pattern: str | None = None
    """The grammar that was violated, for format failures."""

    hint: str | None = None
    """Optional guidance forwarded to the raised exception."""

    def as_dict(self) -> dict[str, Any]:
        """Return a plain mapping, omitting fields that do not apply."""
        data: dict[str, Any] = {
            "type": self.kind.value,
            "message": self.message,
            "value": self.value,
        }
        if self.position is not None:
            data["position"] = self.position
        if self.symbol is not None:
            data["symbol"] = self.symbol
        if self.pattern is not None:
            data["pattern"] = self.pattern
        return data

    def to_exception(self) -> exceptions.TypeIdError:
        """Build the :class:`TypeIdError` subclass matching :attr:`kind`."""
        error_class = _EXCEPTIONS[self.kind]
        return error_class(self.message, hint=self.hint, diagnostic=self)


# ---------------------------------------------------------------------------
# Parsed identifier
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ParsedTypeId:
    """A TypeID split into its components.

    ``typeid`` is always ``prefix + "_" + suffix`` (or just ``suffix``
    when the prefix is empty), and ``value`` is the 16-byte big-endian
    decoding of ``suffix``.
    """

    prefix: str
    suffix: str
    value: bytes
    typeid: str

    def __str__(self) -> str:
        return self.typeid

    @property
    def uuid(self) -> uuid.UUID:
        return uuid.UUID(bytes=self.value)

    @property
    def hex(self) -> str:
        return self.value.hex()

    @property
    def timestamp_ms(self) -> int:
        """Milliseconds stored in the leading 48 bits (UUIDv7 layout)."""
        return int.from_bytes(self.value[:6], "big")

    def as_dict(self) -> dict[str, Any]:
        return {
            "prefix": self.prefix,
            "suffix": self.suffix,
            "uuid": self.value,
            "typeid": self.typeid,
        }
