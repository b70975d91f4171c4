"""Command-line interface for gpl2clr.

Usage:
    gpl2clr palette.gpl                  # Writes palette.clr next to the input
    gpl2clr palette.gpl out.clr --install  # Writes out.clr and installs it
"""

from __future__ import annotations

import argparse
import sys
from typing import Optional

from .converter import convert_gpl_to_clr
from .errors import ArgumentError, MissingGPLPathError, UnrecognizedOptionError

HELP_OPTION = "--help"
FLAG_OPTIONS = ("--install", "--verbose", "--dry-run", HELP_OPTION)
OPTION_PREFIX = "--"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gpl2clr",
        description="Convert a GIMP palette (.gpl) into a macOS color list (.clr).",
        add_help=False,
        allow_abbrev=False,
    )
    parser.add_argument(
        "gpl_path",
        nargs="?",
        default=None,
        metavar="gpl-file-path",
        help="Path to the input GPL file (required).",
    )
    parser.add_argument(
        "clr_path",
        nargs="?",
        default=None,
        metavar="clr-file-path",
        help=(
            "Optional path to save the .clr file. Defaults to input path with "
            ".clr suffix."
        ),
    )
    parser.add_argument(
        "--install",
        action="store_true",
        help="Install .clr file to ~/Library/Colors",
    )
    parser.add_argument(
        "--verbose", action="store_true", help="Enable verbose activity output"
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Simulate the process without creating or installing files.",
    )
    parser.add_argument(
        HELP_OPTION, action="store_true", help="Display this help message."
    )
    return parser


def parse_args(
    argv: list[str] | None = None, parser: Optional[argparse.ArgumentParser] = None
) -> argparse.Namespace:
    """Parse command-line arguments.

    Raises
    ------
        UnrecognizedOptionError: For an unknown option or a third positional
        MissingGPLPathError: If no input path was given
    """
    if parser is None:
        parser = build_parser()
    if argv is None:
        argv = sys.argv[1:]

    # Options and positionals may be mixed in any order. Only exact flag names
    # count as options; any other token is a positional, even `-x`.
    options: list[str] = []
    positionals: list[str] = []
    for token in argv:
        if token in FLAG_OPTIONS:
            options.append(token)
        elif token.startswith(OPTION_PREFIX):
            raise UnrecognizedOptionError(token)
        elif len(positionals) == 2:
            raise UnrecognizedOptionError(token)
        else:
            positionals.append(token)

    args = parser.parse_args(options)
    args.gpl_path, args.clr_path = (positionals + [None, None])[:2]
    if not args.gpl_path:
        raise MissingGPLPathError()
    return args


def main(argv: Optional[list[str]] = None) -> int:
    if argv is None:
        argv = sys.argv[1:]
    parser = build_parser()

    # --help wins over everything else on the command line
    if HELP_OPTION in argv:
        parser.print_help()
        return 0

    try:
        args = parse_args(argv, parser)
    except MissingGPLPathError as e:
        print(e)
        parser.print_help()
        return 1
    except ArgumentError as e:
        print(e)
        parser.print_help()
        return 2

    convert_gpl_to_clr(
        args.gpl_path,
        clr_path=args.clr_path,
        install=args.install,
        verbose=args.verbose,
        dry_run=args.dry_run,
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
