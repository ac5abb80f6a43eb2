"""CLI application entry point and command routing for typeid-codec.

This module is the **sole error boundary** for the command line.  It
catches :class:`~typeid_codec.exceptions.TypeIdError`,
``KeyboardInterrupt``, and any unexpected ``Exception``, rendering
user-friendly messages and returning well-defined exit codes.

Architecture notes
------------------
* No codec logic lives here; all work is delegated to
  :class:`~typeid_codec.core.typeid_service.TypeIdService`.
* Results are written to stdout; messages and errors to stderr.
"""

from __future__ import annotations

import argparse
import logging
import sys
import uuid

from typeid_codec.cli import exit_codes
from typeid_codec.cli.console import console, emit, escape
from typeid_codec.cli.log_config import configure_logging
from typeid_codec.core.typeid_service import TypeIdService
from typeid_codec.exceptions import TypeIdError
from typeid_codec.version import __version__

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _positive_int(text: str) -> int:
    try:
        number = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an integer: {text!r}") from None
    if number < 1:
        raise argparse.ArgumentTypeError("must be at least 1")
    return number


def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    Sub-commands:
    * ``typeid-codec new [PREFIX] [-n COUNT]``
    * ``typeid-codec parse TYPEID [--json]``
    * ``typeid-codec explain TYPEID``
    * ``typeid-codec encode UUID [-p PREFIX]``
    * ``typeid-codec decode TYPEID``
    """
    parser = argparse.ArgumentParser(
        prog="typeid-codec",
        description="Generate, parse and validate TypeID identifiers.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase log output (repeat for debug).",
    )
    commands = parser.add_subparsers(dest="command", metavar="COMMAND")

    new = commands.add_parser("new", help="Generate new TypeIDs.")
    new.add_argument("prefix", nargs="?", default="", help="Type prefix.")
    new.add_argument(
        "-n",
        "--count",
        type=_positive_int,
        default=1,
        help="Number of identifiers to generate.",
    )

    parse = commands.add_parser("parse", help="Show the components of a TypeID.")
    parse.add_argument("typeid")
    parse.add_argument(
        "--json",
        action="store_true",
        help="Print the components as one JSON object on stdout.",
    )

    explain = commands.add_parser(
        "explain", help="Report why a TypeID is invalid."
    )
    explain.add_argument("typeid")

    encode = commands.add_parser("encode", help="Convert a UUID to a TypeID.")
    encode.add_argument("uuid", help="32 hex digits, hyphens optional.")
    encode.add_argument("-p", "--prefix", default="", help="Type prefix.")

    decode = commands.add_parser("decode", help="Convert a TypeID to a UUID.")
    decode.add_argument("typeid")

    return parser


# ---------------------------------------------------------------------------
# Service wiring
# ---------------------------------------------------------------------------

def _build_service() -> TypeIdService:
    """Instantiate the service with the system clock and CSPRNG."""
    from typeid_codec.core.generator import ValueGenerator
    from typeid_codec.infra.system_sources import SecureRandomSource, SystemClock

    return TypeIdService(ValueGenerator(SystemClock(), SecureRandomSource()))


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _handle_new(service: TypeIdService, prefix: str, count: int) -> int:
    for _ in range(count):
        emit(service.create(prefix))
    logger.info("Generated %d identifier(s)", count)
    return exit_codes.SUCCESS


def _handle_parse(service: TypeIdService, typeid: str, as_json: bool) -> int:
    from typeid_codec.cli.render import render_parsed

    render_parsed(service.parse(typeid), as_json=as_json)
    return exit_codes.SUCCESS


def _handle_explain(service: TypeIdService, typeid: str) -> int:
    from typeid_codec.cli.render import render_diagnostic

    diagnostic = service.explain(typeid)
    if diagnostic is None:
        emit("valid")
        return exit_codes.SUCCESS
    render_diagnostic(diagnostic)
    return exit_codes.GENERAL_ERROR


def _handle_encode(service: TypeIdService, hex_value: str, prefix: str) -> int:
    from typeid_codec.core.hexcodec import hex_to_value

    emit(service.encode(hex_to_value(hex_value), prefix))
    return exit_codes.SUCCESS


def _handle_decode(service: TypeIdService, typeid: str) -> int:
    emit(str(uuid.UUID(bytes=service.decode(typeid))))
    return exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the typeid-codec CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.  Accepting *argv* enables deterministic testing without
        monkeypatching.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return exit_codes.SUCCESS

    configure_logging(args.verbose)
    service = _build_service()

    if args.command == "new":
        return _handle_new(service, args.prefix, args.count)
    if args.command == "parse":
        return _handle_parse(service, args.typeid, args.json)
    if args.command == "explain":
        return _handle_explain(service, args.typeid)
    if args.command == "encode":
        return _handle_encode(service, args.uuid, args.prefix)
    return _handle_decode(service, args.typeid)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point.

    This function wraps :func:`main` and guarantees the process never
    exits with a raw stack trace during normal usage.
    """
    try:
        code = main()
        sys.exit(code)
    except TypeIdError as exc:
        console.print(f"[bold red]Error:[/bold red] {escape(str(exc))}")
        if exc.hint:
            console.print(f"[yellow]Hint:[/yellow] {escape(exc.hint)}")
        sys.exit(exit_codes.GENERAL_ERROR)
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {escape(str(exc))}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
