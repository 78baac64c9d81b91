#!/usr/bin/env python3
"""
Assembly Formatter - Command Line Interface

Usage:
    python3 -m asmfmt boot.asm lib/*.asm
    python3 -m asmfmt -ii 4 -ci 32 boot.asm
    cat boot.asm | python3 -m asmfmt - > boot.fmt.asm
    python3 -m asmfmt --check src/*.asm
"""

import argparse
import sys

from . import __version__
from .config import load_config
from .errors import ConfigError
from .formatter import Formatter
from .printer import FormatConfig


def build_parser() -> argparse.ArgumentParser:
    """Create the command-line argument parser."""
    parser = argparse.ArgumentParser(
        prog="asmfmt",
        description="Align labels, instructions and comments in assembly source",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Files are rewritten in place. Use "-" to read stdin and write stdout.

Examples:
  %(prog)s boot.asm lib/*.asm
  %(prog)s -ii 4 -ci 32 boot.asm
  %(prog)s --check src/*.asm
        """,
    )

    parser.add_argument(
        "files",
        nargs="*",
        metavar="file",
        help="Assembly source files to format",
    )

    parser.add_argument(
        "-ii",
        "--instruction-indent",
        type=_non_negative_int,
        metavar="N",
        help="Indentation for instructions in spaces (default: 8)",
    )

    parser.add_argument(
        "-ci",
        "--comment-column",
        type=_non_negative_int,
        metavar="N",
        help="Indentation for comments in spaces (default: 40)",
    )

    parser.add_argument(
        "--config",
        type=str,
        metavar="FILE",
        help="YAML file with instruction_indent and comment_column settings",
    )

    parser.add_argument(
        "--check",
        action="store_true",
        help="Do not write files; exit with 1 if any file needs formatting",
    )

    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose output",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    return parser


def _non_negative_int(value: str) -> int:
    """argparse type for non-negative integers."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer: {value!r}")
    if number < 0:
        raise argparse.ArgumentTypeError(f"must not be negative: {value}")
    return number


def resolve_config(args: argparse.Namespace) -> FormatConfig:
    """
    Combine defaults, the config file and command-line flags.

    Flags take precedence over the config file.

    Raises:
        ConfigError: If the config file is invalid
    """
    config = FormatConfig()
    if args.config:
        config = load_config(args.config, config)

    return FormatConfig(
        instruction_indent=(
            args.instruction_indent
            if args.instruction_indent is not None
            else config.instruction_indent
        ),
        comment_column=(
            args.comment_column
            if args.comment_column is not None
            else config.comment_column
        ),
    )


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if not args.files:
        parser.print_help(sys.stderr)
        return 0

    try:
        config = resolve_config(args)
    except ConfigError as e:
        parser.error(str(e))

    formatter = Formatter(config, verbose=args.verbose, check=args.check)
    report = formatter.format_files(args.files)

    if args.check and report.changed:
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
