"""Module-level TypeID API.

Each function delegates to a shared :class:`TypeIdService` wired to the
system clock and the OS CSPRNG.  The service is stateless, so these
functions are safe to call from any thread.

Usage::

    >>> import typeid_codec
    >>> tid = typeid_codec.create("user")
    >>> typeid_codec.parse(tid).prefix
    'user'
"""

from __future__ import annotations

from typing import Any

from typeid_codec.core.generator import ValueGenerator, is_uuid7
from typeid_codec.core.hexcodec import hex_to_value, value_to_hex
from typeid_codec.core.models import Diagnostic, ParsedTypeId
from typeid_codec.core.typeid_service import TypeIdService
from typeid_codec.infra.system_sources import SecureRandomSource, SystemClock

__all__: list[str] = [
    "components",
    "create",
    "decode",
    "default_service",
    "encode",
    "explain",
    "hex_to_value",
    "is_uuid7",
    "parse",
    "try_parse",
    "validate",
    "value_to_hex",
]


def _build_default_service() -> TypeIdService:
    return TypeIdService(ValueGenerator(SystemClock(), SecureRandomSource()))


default_service: TypeIdService = _build_default_service()


def create(prefix: Any = None, value: Any = None) -> str:
    """Create a TypeID, generating a fresh UUIDv7 when *value* is omitted."""
    return default_service.create(prefix, value)


def parse(typeid: object) -> ParsedTypeId:
    return default_service.parse(typeid)


def try_parse(typeid: object) -> ParsedTypeId | Diagnostic:
    return default_service.try_parse(typeid)


def explain(typeid: object) -> Diagnostic | None:
    """Return ``None`` for a valid TypeID, otherwise the first failure."""
    return default_service.explain(typeid)


def validate(typeid: object) -> bool:
    return default_service.validate(typeid)


def encode(value: Any, prefix: Any = None) -> str:
    return default_service.encode(value, prefix)


def decode(typeid: object) -> bytes:
    return default_service.decode(typeid)


def components(typeid: object) -> dict[str, Any]:
    return default_service.components(typeid)
