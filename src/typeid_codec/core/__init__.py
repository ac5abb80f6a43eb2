"""Core / service layer: pure codec logic and data transformations.

Rules
-----
* No ``print()`` calls.
* No clock, filesystem or OS randomness access; those arrive through
  :mod:`~typeid_codec.core.protocols`.
* No imports from ``cli`` or ``infra``.
"""

from typeid_codec.core.generator import ValueGenerator, is_uuid7
from typeid_codec.core.models import Diagnostic, ErrorKind, ParsedTypeId
from typeid_codec.core.protocols import Clock, RandomSource
from typeid_codec.core.typeid_service import TypeIdService

__all__: list[str] = [
    "Clock",
    "Diagnostic",
    "ErrorKind",
    "ParsedTypeId",
    "RandomSource",
    "TypeIdService",
    "ValueGenerator",
    "is_uuid7",
]
