"""CLI console helpers with optional Rich support.

This module intentionally avoids module-level imports of optional UI
dependencies so bootstrap paths (``--help``, ``--version``) and plain
output remain functional even when Rich is not installed.

Messages and errors go to stderr through :data:`console`; command
results go to stdout through :func:`emit` so they can be piped.
"""

from __future__ import annotations

import re
import sys
from typing import Any

from typeid_codec.exceptions import EnvironmentError

_STYLE_WORDS: str = r"(?:bold|dim|red|yellow)"
_MARKUP_RE = re.compile(rf"\[/?{_STYLE_WORDS}(?: {_STYLE_WORDS})*\]")


def _load_rich_console_class() -> type[Any]:
	"""Return ``rich.console.Console`` class or raise ``EnvironmentError``."""
	try:
		from rich.console import Console
	except ModuleNotFoundError as exc:
		raise EnvironmentError(
			"rich is not installed. Install with: pip install rich",
		) from exc
	return Console


def get_rich_console() -> Any:
	"""Create a Rich console instance targeting stderr."""
	console_class = _load_rich_console_class()
	return console_class(stderr=True)


def escape(text: str) -> str:
	"""Escape Rich markup in user-supplied *text* when Rich is present."""
	try:
		from rich.markup import escape as rich_escape
	except ModuleNotFoundError:
		return text
	return rich_escape(text)


def strip_markup(text: str) -> str:
	"""Drop the console style tags this package emits, for plain output."""
	return _MARKUP_RE.sub("", text)


def emit(line: str) -> None:
	"""Write a command result line to stdout, unstyled."""
	print(line, file=sys.stdout)


class _ConsoleProxy:
	"""Minimal ``print``-compatible proxy with Rich fallback."""

	def print(self, *objects: object) -> None:
		"""Render with Rich when available, else plain stderr print."""
		try:
			rich_console = get_rich_console()
		except EnvironmentError:
			plain = (strip_markup(o) if isinstance(o, str) else o for o in objects)
			print(*plain, file=sys.stderr)
			return
		rich_console.print(*objects)


console = _ConsoleProxy()
