"""typeid-codec: type-prefixed, sortable, globally unique identifiers.

A TypeID joins an optional lowercase type prefix to a 26-character
base32 encoding of a 128-bit (UUIDv7) value, e.g.
``user_01h5fskfsk4fpeqwnsyz5hj55t``.
"""

from typeid_codec.api import (
    components,
    create,
    decode,
    encode,
    explain,
    hex_to_value,
    is_uuid7,
    parse,
    try_parse,
    validate,
    value_to_hex,
)
from typeid_codec.core.models import Diagnostic, ErrorKind, ParsedTypeId
from typeid_codec.exceptions import TypeIdError
from typeid_codec.version import __version__

__all__: list[str] = [
    "Diagnostic",
    "ErrorKind",
    "ParsedTypeId",
    "TypeIdError",
    "__version__",
    "components",
    "create",
    "decode",
    "encode",
    "explain",
    "hex_to_value",
    "is_uuid7",
    "parse",
    "try_parse",
    "validate",
    "value_to_hex",
]
