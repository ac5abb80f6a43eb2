"""Core TypeID service: composes generator, codec and parser.

This is the object the public API and the CLI layer talk to.  It depends
on a :class:`~typeid_codec.core.generator.ValueGenerator` injected at
construction time, keeping the core free of any clock or OS imports.

Guarantees
----------
* Pure orchestration: no I/O, no ``print()``.
* Only :class:`~typeid_codec.exceptions.TypeIdError` subclasses escape
  the raising methods; ``try_parse`` and ``explain`` never raise for
  malformed input.
"""

from __future__ import annotations

import logging
from typing import Any

from typeid_codec.core import base32, typeid_format
from typeid_codec.core.generator import ValueGenerator
from typeid_codec.core.hexcodec import coerce_value
from typeid_codec.core.models import Diagnostic, ParsedTypeId
from typeid_codec.core.prefix import normalize_prefix, validate_prefix

logger = logging.getLogger(__name__)


class TypeIdService:
    """Stateless facade over the TypeID codec.

    Parameters
    ----------
    generator:
        Source of fresh values for :meth:`create` when no value is given.
    """

    def __init__(self, generator: ValueGenerator) -> None:
        self._generator: ValueGenerator = generator

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    def create(self, prefix: Any = None, value: Any = None) -> str:
        """Build a TypeID string.

        Parameters
        ----------
        prefix:
            A string, a string-valued Enum member, or ``None`` for no
            prefix.
        value:
            16 bytes or a :class:`uuid.UUID`.  A fresh version-7 value is
            generated when omitted.

        Raises
        ------
        InvalidPrefixTypeError, PrefixTooLongError, InvalidPrefixFormatError
            If the prefix is rejected.
        InvalidValueTypeError, InvalidValueLengthError
            If an explicit value has the wrong shape.
        """
        checked_prefix = validate_prefix(normalize_prefix(prefix))
        if value is None:
            raw = self._generator.generate()
        else:
            raw = coerce_value(value)
        typeid = typeid_format.assemble(checked_prefix, base32.encode(raw))
        logger.debug("Created %s", typeid)
        return typeid

    def encode(self, value: Any, prefix: Any = None) -> str:
        """Encode an existing 16-byte value under *prefix*."""
        return self.create(prefix, coerce_value(value))

    # ------------------------------------------------------------------
    # Parsing
    # ------------------------------------------------------------------

    def try_parse(self, typeid: object) -> ParsedTypeId | Diagnostic:
        """Parse without raising; failures come back as a :class:`Diagnostic`."""
        result = typeid_format.inspect(typeid)
        if isinstance(result, Diagnostic):
            logger.debug("Rejected %r: %s", typeid, result.kind.value)
        return result

    def parse(self, typeid: object) -> ParsedTypeId:
        """Parse *typeid*, raising the matching :class:`TypeIdError` on failure."""
        result = self.try_parse(typeid)
        if isinstance(result, Diagnostic):
            raise result.to_exception()
        return result

    def explain(self, typeid: object) -> Diagnostic | None:
        """Return the first validation failure for *typeid*, or ``None``."""
        result = self.try_parse(typeid)
        return result if isinstance(result, Diagnostic) else None

    def validate(self, typeid: object) -> bool:
        return isinstance(self.try_parse(typeid), ParsedTypeId)

    def decode(self, typeid: object) -> bytes:
        """Return the 16-byte value behind *typeid*."""
        return self.parse(typeid).value

    def components(self, typeid: object) -> dict[str, Any]:
        """Return ``prefix``, ``suffix``, ``uuid`` and ``typeid`` as a dict."""
        return self.parse(typeid).as_dict()
