"""CLI entry point for mailman: parse and print a post-tonal expression."""

from __future__ import annotations

import argparse
import logging
import sys

from post_office import __version__
from post_office.errors import PostalError
from post_office.expression import format_expression, parse_expression
from post_office.pitch_class import PitchClass

# Net verbosity (-v minus -q) → log level.
_LOG_LEVELS = {
    -2: logging.CRITICAL + 1,
    -1: logging.ERROR,
    0: logging.WARNING,
    1: logging.INFO,
    2: logging.DEBUG,
}


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        prog="mailman",
        description="Parse a post-tonal expression and print it in integer notation",
    )
    parser.add_argument(
        "expression",
        help="A post-tonal expression. Use curly braces ({}) for unordered "
             "collections and square brackets ([]) for ordered collections. "
             "A lone e or E means 11; write the note E as En.",
    )
    parser.add_argument(
        "-z", "--zero",
        default="C",
        help="Which note pitch class 0 refers to (default: C)",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="count",
        default=0,
        help="More log output (repeat for debug)",
    )
    parser.add_argument(
        "-q", "--quiet",
        action="count",
        default=0,
        help="Less log output (repeat to silence)",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    args = parser.parse_args(argv)
    _configure_logging(args.verbose - args.quiet)

    try:
        zero = PitchClass.from_note(args.zero)
        expression = parse_expression(args.expression, zero)
    except PostalError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    print(format_expression(expression, zero))


def _configure_logging(verbosity: int) -> None:
    level = _LOG_LEVELS[max(-2, min(2, verbosity))]
    logging.basicConfig(
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )
    logging.getLogger("post_office").setLevel(level)


if __name__ == "__main__":
    main()
