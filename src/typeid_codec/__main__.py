"""Allow ``python -m typeid_codec`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m typeid_codec`` behaves identically to the
``typeid-codec`` console script.
"""

from __future__ import annotations

from typeid_codec.cli.app import cli

if __name__ == "__main__":
    cli()
