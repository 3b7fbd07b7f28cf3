"""Interface for ``python -m utopia``."""

from __future__ import annotations

import json
import sys
from argparse import ArgumentParser, FileType
from typing import TYPE_CHECKING

from ._version import version
from .log import configure_logging
from .mappings import deep_merge


if TYPE_CHECKING:
    from collections.abc import Sequence


__all__ = ["main"]


def _build_parser() -> ArgumentParser:
    parser = ArgumentParser(prog="utopia", description="Extensions to Python's collection primitives.")
    _ = parser.add_argument("-v", "--version", action="version", version=version)
    _ = parser.add_argument("--log-level", default=None, help="enable library logging at this level")

    commands = parser.add_subparsers(dest="command")
    merge = commands.add_parser("merge", help="deep-merge JSON documents left to right and print the result")
    _ = merge.add_argument("documents", nargs="+", type=FileType("r", encoding="utf-8"))
    _ = merge.add_argument("--indent", type=int, default=2)
    return parser


def main(args: Sequence[str] | None = None) -> None:
    """Argument parser for the CLI."""
    parser = _build_parser()
    options = parser.parse_args(args)

    if options.log_level:
        configure_logging(options.log_level)

    if options.command == "merge":
        documents = []
        for handle in options.documents:
            with handle:
                documents.append(json.load(handle))
        json.dump(deep_merge(*documents), sys.stdout, indent=options.indent)
        _ = sys.stdout.write("\n")


if __name__ == "__main__":
    main()
