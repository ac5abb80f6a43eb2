"""Tests for domain models (core/models.py).

All models are frozen dataclasses: these tests verify immutability,
equality semantics, the derived views and the exception mapping.
"""

from __future__ import annotations

import uuid

import pytest

from typeid_codec import exceptions
from typeid_codec.core.models import Diagnostic, ErrorKind, ParsedTypeId

VALUE = bytes.fromhex("01890a5dac96774bbcceb302099a8057")


# ---------------------------------------------------------------------------
# Fixtures: reusable model instances
# ---------------------------------------------------------------------------

def _make_parsed(**overrides: object) -> ParsedTypeId:
    """Factory with sensible defaults for concise tests."""
    defaults: dict[str, object] = {
        "prefix": "prefix",
        "suffix": "01h455vb4pex5vsknk084sn02q",
        "value": VALUE,
        "typeid": "prefix_01h455vb4pex5vsknk084sn02q",
    }
    defaults.update(overrides)
    return ParsedTypeId(**defaults)  # type: ignore[arg-type]


def _make_diagnostic(**overrides: object) -> Diagnostic:
    defaults: dict[str, object] = {
        "kind": ErrorKind.INVALID_LENGTH,
        "message": "too short",
        "value": "abc",
    }
    defaults.update(overrides)
    return Diagnostic(**defaults)  # type: ignore[arg-type]


# ---------------------------------------------------------------------------
# ParsedTypeId
# ---------------------------------------------------------------------------

class TestParsedTypeId:
    def test_fields_accessible(self) -> None:
        p = _make_parsed()
        assert p.prefix == "prefix"
        assert p.suffix == "01h455vb4pex5vsknk084sn02q"
        assert p.value == VALUE

    def test_str_is_typeid(self) -> None:
        assert str(_make_parsed()) == "prefix_01h455vb4pex5vsknk084sn02q"

    def test_uuid_view(self) -> None:
        assert _make_parsed().uuid == uuid.UUID("01890a5d-ac96-774b-bcce-b302099a8057")
        assert _make_parsed().uuid.version == 7

    def test_hex_view(self) -> None:
        assert _make_parsed().hex == "01890a5dac96774bbcceb302099a8057"

    def test_timestamp(self) -> None:
        assert _make_parsed().timestamp_ms == 0x01890A5DAC96

    def test_as_dict(self) -> None:
        assert _make_parsed().as_dict() == {
            "prefix": "prefix",
            "suffix": "01h455vb4pex5vsknk084sn02q",
            "uuid": VALUE,
            "typeid": "prefix_01h455vb4pex5vsknk084sn02q",
        }

    def test_frozen(self) -> None:
        p = _make_parsed()
        with pytest.raises(AttributeError):
            p.prefix = "other"  # type: ignore[misc]

    def test_equality(self) -> None:
        assert _make_parsed() == _make_parsed()
        assert _make_parsed() != _make_parsed(prefix="x")


# ---------------------------------------------------------------------------
# Diagnostic
# ---------------------------------------------------------------------------

class TestDiagnostic:
    def test_as_dict_minimal(self) -> None:
        assert _make_diagnostic().as_dict() == {
            "type": "invalid_length",
            "message": "too short",
            "value": "abc",
        }

    def test_as_dict_with_position_and_pattern(self) -> None:
        data = _make_diagnostic(position=3, pattern="^x$").as_dict()
        assert data["position"] == 3
        assert data["pattern"] == "^x$"

    def test_as_dict_with_symbol(self) -> None:
        data = _make_diagnostic(position=0, symbol="8").as_dict()
        assert data["symbol"] == "8"
        assert "symbol" not in _make_diagnostic().as_dict()

    def test_frozen(self) -> None:
        d = _make_diagnostic()
        with pytest.raises(AttributeError):
            d.message = "changed"  # type: ignore[misc]

    @pytest.mark.parametrize("kind", list(ErrorKind))
    def test_every_kind_maps_to_an_exception(self, kind: ErrorKind) -> None:
        exc = _make_diagnostic(kind=kind).to_exception()
        assert isinstance(exc, exceptions.TypeIdError)
        assert exc.diagnostic.kind is kind
        assert str(exc) == "too short"

    def test_hint_forwarded(self) -> None:
        exc = _make_diagnostic(hint="try lowercase").to_exception()
        assert exc.hint == "try lowercase"

    def test_specific_mapping(self) -> None:
        exc = _make_diagnostic(kind=ErrorKind.SUFFIX_OVERFLOW).to_exception()
        assert isinstance(exc, exceptions.SuffixOverflowError)
