"""Base32 transform between a 128-bit value and a 26-character suffix.

The 16 input bytes are read as the low 128 bits of a 130-bit number
(two implicit leading zero bits) and cut into 26 five-bit groups, most
significant first.  Each group indexes :data:`ALPHABET`, a lowercase
Crockford-style symbol set without ``i``, ``l``, ``o`` and ``u``.

Both directions stream bits through a small accumulator (never wider
than 12 bits), so no big-integer intermediate is needed.
"""

from __future__ import annotations

from typeid_codec.core.models import Diagnostic, ErrorKind

ALPHABET: str = "0123456789abcdefghjkmnpqrstvwxyz"
"""Index → symbol mapping; a fixed process-wide constant."""

SUFFIX_LENGTH: int = 26
VALUE_LENGTH: int = 16

# The two implicit zero bits leave only 3 significant bits in the first
# group, so the leading symbol can be at most ``7``.
MAX_LEADING_VALUE: int = 7

_INVALID: int = -1

_DECODE_TABLE: tuple[int, ...] = tuple(ALPHABET.find(chr(code)) for code in range(128))


def _symbol_value(char: str) -> int:
    code = ord(char)
    if code >= 128:
        return _INVALID
    return _DECODE_TABLE[code]


# ---------------------------------------------------------------------------
# Encoding
# ---------------------------------------------------------------------------

def encode(value: bytes) -> str:
    """Encode exactly 16 bytes as a 26-character suffix.

    Raises
    ------
    ValueError
        If *value* is not 16 bytes long.  Callers at the public API
        boundary normalise values first, so this only fires on misuse.
    """
    if len(value) != VALUE_LENGTH:
        raise ValueError(f"expected {VALUE_LENGTH} bytes, got {len(value)}")

    symbols: list[str] = []
    accumulator = 0
    # Start with the two implicit leading zero bits already "pending".
    pending_bits = 2
    for byte in value:
        accumulator = (accumulator << 8) | byte
        pending_bits += 8
        while pending_bits >= 5:
            pending_bits -= 5
            symbols.append(ALPHABET[(accumulator >> pending_bits) & 0x1F])
        accumulator &= (1 << pending_bits) - 1
    return "".join(symbols)


# ---------------------------------------------------------------------------
# Validation
# ---------------------------------------------------------------------------

def inspect_suffix(suffix: str) -> Diagnostic | None:
    """Check *suffix* without raising.

    Checks run in order: length, alphabet (first offending position
    wins), then the leading-symbol overflow rule.  Returns ``None`` when
    the suffix is decodable.
    """
    if len(suffix) != SUFFIX_LENGTH:
        return Diagnostic(
            kind=ErrorKind.INVALID_SUFFIX_LENGTH,
            message=(
                f"Suffix must be exactly {SUFFIX_LENGTH} characters, "
                f"got {len(suffix)}"
            ),
            value=suffix,
        )

    for position, char in enumerate(suffix):
        if _symbol_value(char) == _INVALID:
            return Diagnostic(
                kind=ErrorKind.INVALID_SUFFIX_ALPHABET,
                message=(
                    f"Suffix contains invalid character {char!r} "
                    f"at position {position}"
                ),
                value=suffix,
                position=position,
                symbol=char,
                hint=f"Allowed characters: {ALPHABET}",
            )

    first = suffix[0]
    if _symbol_value(first) > MAX_LEADING_VALUE:
        return Diagnostic(
            kind=ErrorKind.SUFFIX_OVERFLOW,
            message=(
                f"Suffix starts with {first!r}; the first character must be "
                f"0-{MAX_LEADING_VALUE} to fit in 128 bits"
            ),
            value=suffix,
            position=0,
            symbol=first,
        )
    return None


def is_valid_suffix(suffix: object) -> bool:
    return isinstance(suffix, str) and inspect_suffix(suffix) is None


# ---------------------------------------------------------------------------
# Decoding
# ---------------------------------------------------------------------------

def decode(suffix: str) -> bytes:
    """Decode a 26-character suffix into 16 big-endian bytes.

    Raises
    ------
    InvalidSuffixLengthError
        If *suffix* is not 26 characters long.
    InvalidSuffixAlphabetError
        If a symbol falls outside :data:`ALPHABET`.
    SuffixOverflowError
        If the leading symbol is greater than ``7``.
    """
    diagnostic = inspect_suffix(suffix)
    if diagnostic is not None:
        raise diagnostic.to_exception()

    output = bytearray()
    accumulator = 0
    pending_bits = 0
    for index, char in enumerate(suffix):
        accumulator = (accumulator << 5) | _symbol_value(char)
        # The first group only carries 3 significant bits.
        pending_bits += 3 if index == 0 else 5
        if pending_bits >= 8:
            pending_bits -= 8
            output.append((accumulator >> pending_bits) & 0xFF)
            accumulator &= (1 << pending_bits) - 1

    # 3 + 25 * 5 == 128 bits
    return bytes(output).rjust(VALUE_LENGTH, b"\x00")
