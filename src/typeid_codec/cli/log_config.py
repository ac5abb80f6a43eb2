"""Logging setup for the command-line entry point.

The library modules only create loggers; handlers are attached here,
once, when the CLI starts.  Rich's handler is used when available.
"""

from __future__ import annotations

import logging

_LEVELS: tuple[int, ...] = (logging.WARNING, logging.INFO, logging.DEBUG)

LOG_FORMAT: str = "%(levelname)s %(name)s: %(message)s"


def level_for_verbosity(verbosity: int) -> int:
    """Map the number of ``-v`` flags onto a logging level."""
    return _LEVELS[max(0, min(verbosity, len(_LEVELS) - 1))]


def _build_handler() -> logging.Handler:
    try:
        from rich.logging import RichHandler
    except ModuleNotFoundError:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        return handler
    from typeid_codec.cli.console import get_rich_console

    return RichHandler(console=get_rich_console(), show_path=False)


def configure_logging(verbosity: int) -> None:
    """Attach a stderr handler to the ``typeid_codec`` logger."""
    root = logging.getLogger("typeid_codec")
    root.setLevel(level_for_verbosity(verbosity))
    if not root.handlers:
        root.addHandler(_build_handler())
