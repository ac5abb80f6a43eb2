"""Shared pytest fixtures and configuration for the typeid-codec test suite.

Guidelines
----------
* Generator tests use injected clock and random sources, never the
  real wall clock when asserting on bytes.
* Core tests must be pure: no side effects.
* CLI tests call ``main(argv)`` and read stdout/stderr via ``capsys``.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest

from typeid_codec.core.generator import ValueGenerator
from typeid_codec.core.typeid_service import TypeIdService
from typeid_codec.infra.deterministic import FixedClock, SeededRandomSource

FIXED_MS: int = 0x0188_E2A4_B5C6
"""An arbitrary 2023-era Unix timestamp in milliseconds."""


@pytest.fixture
def fixed_clock() -> FixedClock:
    return FixedClock(FIXED_MS)


@pytest.fixture
def seeded_generator(fixed_clock: FixedClock) -> ValueGenerator:
    return ValueGenerator(fixed_clock, SeededRandomSource(1234))


@pytest.fixture
def service(seeded_generator: ValueGenerator) -> TypeIdService:
    return TypeIdService(seeded_generator)


@pytest.fixture(autouse=True)
def _reset_cli_logging() -> Iterator[None]:
    """Drop handlers the CLI attaches so tests do not leak into each other."""
    yield
    logger = logging.getLogger("typeid_codec")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
