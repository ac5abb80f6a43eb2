"""Validation of the optional TypeID type prefix.

Grammar: the empty string, or 1-63 characters where the first and last
are lowercase ASCII letters and the interior may also contain
underscores (consecutive underscores included).

Rules are applied in a fixed order and the first failure wins:

1. not a ``str``        → ``invalid_prefix_type``
2. longer than 63 chars → ``prefix_too_long``
3. grammar mismatch     → ``invalid_prefix_format``
"""

from __future__ import annotations

import re
from enum import Enum
from typing import Any, cast

from typeid_codec.core.models import Diagnostic, ErrorKind

MAX_PREFIX_LENGTH: int = 63

PREFIX_PATTERN: str = r"^([a-z]([a-z_]{0,61}[a-z])?)?$"

_PREFIX_RE = re.compile(PREFIX_PATTERN)


def normalize_prefix(prefix: Any) -> Any:
    """Map outer-API prefix spellings onto a plain string.

    ``None`` means "no prefix" and a string-valued :class:`~enum.Enum`
    member stands for its value.  Anything else is returned unchanged so
    that :func:`inspect_prefix` reports it.
    """
    if prefix is None:
        return ""
    if isinstance(prefix, Enum) and isinstance(prefix.value, str):
        return prefix.value
    return prefix


def inspect_prefix(prefix: object) -> Diagnostic | None:
    """Return a :class:`Diagnostic` for an invalid prefix, else ``None``."""
    if not isinstance(prefix, str):
        return Diagnostic(
            kind=ErrorKind.INVALID_PREFIX_TYPE,
            message=f"Prefix must be a string, got {type(prefix).__name__}",
            value=prefix,
        )

    if len(prefix) > MAX_PREFIX_LENGTH:
        return Diagnostic(
            kind=ErrorKind.PREFIX_TOO_LONG,
            message=(
                f"Prefix must be at most {MAX_PREFIX_LENGTH} characters, "
                f"got {len(prefix)}"
            ),
            value=prefix,
        )

    # fullmatch so a trailing newline cannot slip past "$".
    if _PREFIX_RE.fullmatch(prefix) is None:
        return Diagnostic(
            kind=ErrorKind.INVALID_PREFIX_FORMAT,
            message=f"Prefix {prefix!r} does not match {PREFIX_PATTERN}",
            value=prefix,
            pattern=PREFIX_PATTERN,
            hint=(
                "Use lowercase letters a-z and underscores; the prefix "
                "cannot start or end with an underscore."
            ),
        )
    return None


def validate_prefix(prefix: object) -> str:
    """Return *prefix* unchanged if valid.

    Raises
    ------
    InvalidPrefixTypeError, PrefixTooLongError, InvalidPrefixFormatError
        According to the first rule that fails.
    """
    diagnostic = inspect_prefix(prefix)
    if diagnostic is not None:
        raise diagnostic.to_exception()
    return cast(str, prefix)


def is_valid_prefix(prefix: object) -> bool:
    return inspect_prefix(prefix) is None
