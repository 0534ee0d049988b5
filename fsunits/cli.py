"""
FSUnits CLI Tools

Command-line front end for the quantity formatter, the quantity parser and the path helpers:

    fsunits [-n | -h | -H] [-v] format [--bytes] [--narrow] VALUE...
    fsunits parse [--bytes] [--max N] TEXT...
    fsunits basename PATH...
    fsunits dirname PATH...
"""

# Standard library -----------------------------------------------------------------------------------------------------
import argparse
import logging
import sys
from collections.abc import Sequence

# Local ----------------------------------------------------------------------------------------------------------------
from .config import add_number_format_options, resolve_display_mode
from .display import NumberPrinter
from .numeric import parse_number
from .path import basename, dirname
from .units import FieldWidth, UINT64_MAX

logger = logging.getLogger(__name__)

PROG = "fsunits"


# Methods --------------------------------------------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser, -h is taken by the number format flags so help is --help only."""
    parser = argparse.ArgumentParser(
        prog=PROG,
        description="Format and parse filesystem quantities, split paths.",
        add_help=False,
    )
    parser.add_argument("--help", action="help", help="show this help message and exit")
    parser.add_argument("-v", "--verbose", action="store_true", help="log debug messages to stderr")
    add_number_format_options(parser)

    commands = parser.add_subparsers(dest="command", required=True)

    fmt = commands.add_parser("format", help="print counters in the selected number format")
    fmt.add_argument("values", nargs="+", metavar="VALUE", help="counter value, '-' for no value")
    fmt.add_argument("--bytes", dest="bytes_flag", action="store_true", help="values are byte sizes")
    fmt.add_argument("--narrow", action="store_true", help="use the 32-bit field width")
    fmt.add_argument("--prefix", default=None, help="text printed before each value")
    fmt.add_argument("--suffix", default=None, help="text printed after each value")
    fmt.set_defaults(handler=_run_format)

    parse = commands.add_parser("parse", help="parse quantities such as 1.5k, 2Gi or 10MiB")
    parse.add_argument("texts", nargs="+", metavar="TEXT")
    parse.add_argument("--bytes", dest="bytes_flag", action="store_true", help="accept the B unit marker")
    parse.add_argument("--max", dest="max_value", type=int, default=UINT64_MAX, help="largest accepted value")
    parse.set_defaults(handler=_run_parse)

    base = commands.add_parser("basename", help="print the final component of each path")
    base.add_argument("paths", nargs="+", metavar="PATH")
    base.set_defaults(handler=_run_basename)

    dir_ = commands.add_parser("dirname", help="print the directory part of each path")
    dir_.add_argument("paths", nargs="+", metavar="PATH")
    dir_.set_defaults(handler=_run_dirname)

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """
    Run the fsunits command and return its exit status.

    Errors from the formatter, parser and path helpers are reported on stderr as
    "fsunits: <message>" and give exit status 1.
    """
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(name)s: %(levelname)s: %(message)s",
    )

    try:
        args.handler(args)
    except (TypeError, ValueError) as e:
        logger.debug("%s failed", args.command, exc_info=True)
        print(f"{PROG}: {e}", file=sys.stderr)
        return 1
    return 0


# Private Methods ------------------------------------------------------------------------------------------------------

def _run_format(args: argparse.Namespace) -> None:
    printer = NumberPrinter(resolve_display_mode(args.display_mode))
    width = FieldWidth.NARROW if args.narrow else FieldWidth.WIDE
    for value in args.values:
        has_value = value != "-"
        number = _to_int(value) if has_value else None
        printer.print(
            number,
            prefix=args.prefix,
            suffix=args.suffix,
            width=width,
            bytes_flag=args.bytes_flag,
            has_value=has_value,
        )
        print()


def _run_parse(args: argparse.Namespace) -> None:
    for text in args.texts:
        print(parse_number(text, args.max_value, args.bytes_flag))


def _run_basename(args: argparse.Namespace) -> None:
    for path in args.paths:
        print(basename(path))


def _run_dirname(args: argparse.Namespace) -> None:
    for path in args.paths:
        print(dirname(path))


def _to_int(value: str) -> int:
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"invalid counter value: {value!r}") from None
