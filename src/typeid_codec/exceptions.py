"""Custom exception hierarchy for typeid-codec.

Every error raised by the library inherits from :class:`TypeIdError`.
Validation failures additionally carry the
:class:`~typeid_codec.core.models.Diagnostic` that produced them, so a
caller catching the exception sees exactly what :func:`explain` would
have returned for the same input.

Hierarchy
---------
TypeIdError
├── InvalidInputTypeError
├── InvalidLengthError
├── InvalidCaseError
├── LeadingUnderscoreError
├── InvalidPrefixTypeError
├── PrefixTooLongError
├── InvalidPrefixFormatError
├── InvalidSuffixLengthError
├── InvalidSuffixAlphabetError
├── SuffixOverflowError
├── InvalidValueTypeError
├── InvalidValueLengthError
├── InvalidHexError
├── DecodeFailureError
└── EnvironmentError
"""

from __future__ import annotations

from typing import Any


class TypeIdError(Exception):
    """Base exception for all typeid-codec errors.

    Every user-visible error condition maps to a subclass of this
    exception so that the CLI error boundary can render a clean message
    without leaking internal stack traces.
    """

    def __init__(
        self,
        message: str,
        *,
        hint: str | None = None,
        diagnostic: Any = None,
    ) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""
        self.diagnostic: Any = diagnostic
        """The :class:`Diagnostic` describing the failure, when known."""


# --- Whole-string checks ---------------------------------------------------

class InvalidInputTypeError(TypeIdError):
    """Raised when the input to parse is not a string."""


class InvalidLengthError(TypeIdError):
    """Raised when a TypeID string is shorter than 26 or longer than 90."""


class InvalidCaseError(TypeIdError):
    """Raised when a TypeID string contains uppercase characters."""


class LeadingUnderscoreError(TypeIdError):
    """Raised when a TypeID string starts with the separator."""


# --- Prefix ----------------------------------------------------------------

class InvalidPrefixTypeError(TypeIdError):
    """Raised when a prefix is not a string."""


class PrefixTooLongError(TypeIdError):
    """Raised when a prefix exceeds 63 characters."""


class InvalidPrefixFormatError(TypeIdError):
    """Raised when a prefix does not match the prefix grammar."""


# --- Suffix ----------------------------------------------------------------

class InvalidSuffixLengthError(TypeIdError):
    """Raised when a suffix is not exactly 26 characters long."""


class InvalidSuffixAlphabetError(TypeIdError):
    """Raised when a suffix contains a symbol outside the base32 alphabet."""


class SuffixOverflowError(TypeIdError):
    """Raised when a suffix encodes a value wider than 128 bits."""


class DecodeFailureError(TypeIdError):
    """Raised when a syntactically valid suffix still fails to decode."""


# --- 128-bit values --------------------------------------------------------

class InvalidValueTypeError(TypeIdError):
    """Raised when a value is neither bytes-like nor a ``uuid.UUID``."""


class InvalidValueLengthError(TypeIdError):
    """Raised when a value is not exactly 16 bytes long."""


class InvalidHexError(TypeIdError):
    """Raised when a hex UUID string cannot be converted to 16 bytes."""


# --- Environment / tooling -------------------------------------------------

class EnvironmentError(TypeIdError):
    """Raised when an optional runtime dependency is required but missing."""
