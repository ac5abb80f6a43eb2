"""Assembling, splitting and parsing whole TypeID strings.

Parsing is a linear state machine; each state has exactly one check and
the first failing check ends the run with a :class:`Diagnostic`::

    START → TYPE_OK → LENGTH_OK → CASE_OK → NO_LEADING_UNDERSCORE
          → SPLIT → PREFIX_OK → SUFFIX_OK → DECODED

There is no backtracking.  :func:`inspect` returns the terminal result,
:func:`parse` raises on failure and :func:`explain` returns only the
diagnostic.
"""

from __future__ import annotations

from enum import Enum

from typeid_codec.core import base32
from typeid_codec.core.models import Diagnostic, ErrorKind, ParsedTypeId
from typeid_codec.core.prefix import inspect_prefix
from typeid_codec.exceptions import TypeIdError

SEPARATOR: str = "_"
MIN_LENGTH: int = base32.SUFFIX_LENGTH
MAX_LENGTH: int = 90


class ParseState(Enum):
    START = "start"
    TYPE_OK = "type_ok"
    LENGTH_OK = "length_ok"
    CASE_OK = "case_ok"
    NO_LEADING_UNDERSCORE = "no_leading_underscore"
    SPLIT = "split"
    PREFIX_OK = "prefix_ok"
    SUFFIX_OK = "suffix_ok"
    DECODED = "decoded"


# ---------------------------------------------------------------------------
# Assembly
# ---------------------------------------------------------------------------

def assemble(prefix: str, suffix: str) -> str:
    """Join *prefix* and *suffix*; an empty prefix yields the bare suffix."""
    if not prefix:
        return suffix
    return f"{prefix}{SEPARATOR}{suffix}"


def split(typeid: str) -> tuple[str, str]:
    """Split on the **last** separator.

    Prefixes may contain underscores but the base32 alphabet never does,
    so the final underscore is always the prefix boundary.  A string
    without any underscore is a bare suffix.
    """
    prefix, separator, suffix = typeid.rpartition(SEPARATOR)
    if not separator:
        return "", typeid
    return prefix, suffix


# ---------------------------------------------------------------------------
# State machine
# ---------------------------------------------------------------------------

class _TypeIdParser:
    """Single-use run of the parse state machine over one input."""

    def __init__(self, text: object) -> None:
        self.text = text
        self.state = ParseState.START
        self.prefix = ""
        self.suffix = ""

    def run(self) -> ParsedTypeId | Diagnostic:
        steps = (
            (self._check_type, ParseState.TYPE_OK),
            (self._check_length, ParseState.LENGTH_OK),
            (self._check_case, ParseState.CASE_OK),
            (self._check_leading_underscore, ParseState.NO_LEADING_UNDERSCORE),
            (self._split, ParseState.SPLIT),
            (self._check_prefix, ParseState.PREFIX_OK),
            (self._check_suffix, ParseState.SUFFIX_OK),
        )
        for step, next_state in steps:
            diagnostic = step()
            if diagnostic is not None:
                return diagnostic
            self.state = next_state
        return self._decode()

    def _check_type(self) -> Diagnostic | None:
        if isinstance(self.text, str):
            return None
        return Diagnostic(
            kind=ErrorKind.INVALID_INPUT_TYPE,
            message=f"TypeID must be a string, got {type(self.text).__name__}",
            value=self.text,
        )

    def _check_length(self) -> Diagnostic | None:
        length = len(self.text)  # type: ignore[arg-type]
        if MIN_LENGTH <= length <= MAX_LENGTH:
            return None
        return Diagnostic(
            kind=ErrorKind.INVALID_LENGTH,
            message=(
                f"TypeID must be {MIN_LENGTH}-{MAX_LENGTH} characters, "
                f"got {length}"
            ),
            value=self.text,
        )

    def _check_case(self) -> Diagnostic | None:
        text: str = self.text  # type: ignore[assignment]
        if text == text.lower():
            return None
        return Diagnostic(
            kind=ErrorKind.INVALID_CASE,
            message="TypeID must be all lowercase",
            value=text,
            hint=f"Did you mean {text.lower()!r}?",
        )

    def _check_leading_underscore(self) -> Diagnostic | None:
        text: str = self.text  # type: ignore[assignment]
        if not text.startswith(SEPARATOR):
            return None
        return Diagnostic(
            kind=ErrorKind.LEADING_UNDERSCORE,
            message="TypeID cannot start with an underscore",
            value=text,
        )

    def _split(self) -> None:
        self.prefix, self.suffix = split(self.text)  # type: ignore[arg-type]

    def _check_prefix(self) -> Diagnostic | None:
        return inspect_prefix(self.prefix)

    def _check_suffix(self) -> Diagnostic | None:
        return base32.inspect_suffix(self.suffix)

    def _decode(self) -> ParsedTypeId | Diagnostic:
        try:
            value = base32.decode(self.suffix)
        except (TypeIdError, ValueError) as exc:
            return Diagnostic(
                kind=ErrorKind.DECODE_FAILURE,
                message=f"Failed to decode suffix: {exc}",
                value=self.suffix,
            )
        self.state = ParseState.DECODED
        return ParsedTypeId(
            prefix=self.prefix,
            suffix=self.suffix,
            value=value,
            typeid=assemble(self.prefix, self.suffix),
        )


# ---------------------------------------------------------------------------
# Public entry points
# ---------------------------------------------------------------------------

def inspect(text: object) -> ParsedTypeId | Diagnostic:
    """Run the full parse sequence; never raises for malformed input."""
    return _TypeIdParser(text).run()


def parse(text: object) -> ParsedTypeId:
    """Parse *text* into a :class:`ParsedTypeId`.

    Raises
    ------
    TypeIdError
        The subclass matching the first failed check, with the
        :class:`Diagnostic` attached as ``exc.diagnostic``.
    """
    result = inspect(text)
    if isinstance(result, Diagnostic):
        raise result.to_exception()
    return result


def explain(text: object) -> Diagnostic | None:
    """Return why *text* is not a valid TypeID, or ``None`` if it is."""
    result = inspect(text)
    if isinstance(result, Diagnostic):
        return result
    return None


def is_valid_typeid(text: object) -> bool:
    return isinstance(inspect(text), ParsedTypeId)
