"""Tests for the version-7 value generator (core/generator.py).

Time and randomness are injected, so byte layouts are asserted exactly.
A single test uses the real system sources to check uniqueness.
"""

from __future__ import annotations

import uuid

import pytest

from typeid_codec.core.generator import ValueGenerator, is_uuid7, timestamp_ms
from typeid_codec.infra.deterministic import FixedClock, SeededRandomSource
from typeid_codec.infra.system_sources import SecureRandomSource, SystemClock


class ConstantRandomSource:
    """Random source that always returns the same byte."""

    def __init__(self, byte: int) -> None:
        self.byte = byte
        self.calls: list[int] = []

    def random_bytes(self, count: int) -> bytes:
        self.calls.append(count)
        return bytes([self.byte]) * count


class ShortRandomSource:
    def random_bytes(self, count: int) -> bytes:
        return bytes(count - 1)


# ---------------------------------------------------------------------------
# Layout
# ---------------------------------------------------------------------------

class TestLayout:
    def test_timestamp_in_first_six_bytes(self, fixed_clock: FixedClock) -> None:
        value = ValueGenerator(fixed_clock, ConstantRandomSource(0)).generate()
        assert value[:6] == fixed_clock.now_ms().to_bytes(6, "big")
        assert timestamp_ms(value) == fixed_clock.now_ms()

    def test_all_zero_randomness(self, fixed_clock: FixedClock) -> None:
        value = ValueGenerator(fixed_clock, ConstantRandomSource(0x00)).generate()
        assert value[6] == 0x70
        assert value[7] == 0x00
        assert value[8] == 0x80
        assert value[9:] == bytes(7)

    def test_all_one_randomness(self, fixed_clock: FixedClock) -> None:
        value = ValueGenerator(fixed_clock, ConstantRandomSource(0xFF)).generate()
        assert value[6] == 0x7F
        assert value[7] == 0xFF
        assert value[8] == 0xBF
        assert value[9:] == b"\xff" * 7

    def test_length_is_sixteen(self, seeded_generator: ValueGenerator) -> None:
        assert len(seeded_generator.generate()) == 16

    def test_draws_ten_random_bytes_per_call(self, fixed_clock: FixedClock) -> None:
        source = ConstantRandomSource(0x42)
        generator = ValueGenerator(fixed_clock, source)
        generator.generate()
        generator.generate()
        assert source.calls == [10, 10]

    def test_timestamp_truncated_to_48_bits(self) -> None:
        clock = FixedClock((1 << 48) + 5)
        value = ValueGenerator(clock, ConstantRandomSource(0)).generate()
        assert timestamp_ms(value) == 5

    def test_short_random_source_rejected(self, fixed_clock: FixedClock) -> None:
        with pytest.raises(ValueError, match="random source"):
            ValueGenerator(fixed_clock, ShortRandomSource()).generate()


# ---------------------------------------------------------------------------
# Determinism and uniqueness
# ---------------------------------------------------------------------------

class TestDeterminism:
    def test_same_seed_same_values(self, fixed_clock: FixedClock) -> None:
        first = ValueGenerator(fixed_clock, SeededRandomSource(7))
        second = ValueGenerator(fixed_clock, SeededRandomSource(7))
        assert [first.generate() for _ in range(5)] == [
            second.generate() for _ in range(5)
        ]

    def test_same_millisecond_values_differ(
        self, seeded_generator: ValueGenerator,
    ) -> None:
        values = [seeded_generator.generate() for _ in range(100)]
        assert len(set(values)) == 100
        assert len({v[:6] for v in values}) == 1

    def test_clock_advance_is_reflected(self, fixed_clock: FixedClock) -> None:
        generator = ValueGenerator(fixed_clock, SeededRandomSource(1))
        before = generator.generate()
        fixed_clock.advance(3)
        after = generator.generate()
        assert timestamp_ms(after) - timestamp_ms(before) == 3
        assert after > before

    def test_system_sources_produce_distinct_values(self) -> None:
        generator = ValueGenerator(SystemClock(), SecureRandomSource())
        values = [generator.generate() for _ in range(100)]
        assert len(set(values)) == 100
        assert all(is_uuid7(v) for v in values)


# ---------------------------------------------------------------------------
# is_uuid7
# ---------------------------------------------------------------------------

class TestIsUuid7:
    def test_generated_values_pass(self, seeded_generator: ValueGenerator) -> None:
        assert all(is_uuid7(seeded_generator.generate()) for _ in range(20))

    def test_nil_fails(self) -> None:
        assert not is_uuid7(bytes(16))

    def test_wrong_version_fails(self) -> None:
        value = bytearray(16)
        value[6] = 0x40
        value[8] = 0x80
        assert not is_uuid7(bytes(value))

    def test_wrong_variant_fails(self) -> None:
        value = bytearray(16)
        value[6] = 0x70
        value[8] = 0xC0
        assert not is_uuid7(bytes(value))

    @pytest.mark.parametrize("value", [b"", bytes(15), bytes(17), "x" * 16, None])
    def test_wrong_shape_fails(self, value: object) -> None:
        assert not is_uuid7(value)

    def test_accepts_uuid_object(self, seeded_generator: ValueGenerator) -> None:
        assert is_uuid7(uuid.UUID(bytes=seeded_generator.generate()))

    def test_accepts_memoryview(self, seeded_generator: ValueGenerator) -> None:
        assert is_uuid7(memoryview(seeded_generator.generate()))

    def test_uuid4_object_fails(self) -> None:
        assert not is_uuid7(uuid.UUID("9b2d6a5e-3f1c-4c1e-8f0a-2b6d1c9e7a10"))


# ---------------------------------------------------------------------------
# Infra sources
# ---------------------------------------------------------------------------

class TestSources:
    def test_system_clock_is_milliseconds(self) -> None:
        now = SystemClock().now_ms()
        # Between 2020 and 2100.
        assert 1_577_836_800_000 < now < 4_102_444_800_000

    def test_secure_random_length(self) -> None:
        assert len(SecureRandomSource().random_bytes(10)) == 10

    def test_fixed_clock_advance(self) -> None:
        clock = FixedClock(100)
        clock.advance()
        assert clock.now_ms() == 101
