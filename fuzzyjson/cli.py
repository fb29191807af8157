"""
Command line interface: ``fson [INPUT]``.

Reads fuzzy JSON from a file (or standard input) and prints canonical JSON.
Exit status is 0 on success, 1 when no value was found or a limit was hit,
and 2 when the input could not be read.
"""

import argparse
import logging
import sys
from typing import Optional

from .core.engine import dumps, parse
from .security.exceptions import NoValueFoundError, SecurityError
from .utils.config import ParseConfig, ParseLimits

logger = logging.getLogger("fuzzyjson")

EXIT_OK = 0
EXIT_NO_VALUE = 1
EXIT_BAD_INPUT = 2

_DEFAULT_LIMITS = ParseLimits()


def read_input(name: str) -> str:
    """Read the whole input, where ``-`` means standard input."""
    if name == "-":
        return sys.stdin.read()
    with open(name, encoding="utf-8") as f:
        return f.read()


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(
        prog="fson", description="Convert fuzzy JSON text to strict JSON"
    )
    ap.add_argument("input", nargs="?", default="-", metavar="INPUT",
                    help="file to read (default: standard input)")
    ap.add_argument("--ascii", action="store_true",
                    help="escape non-ASCII characters in the output")
    ap.add_argument("--max-depth", type=int, default=_DEFAULT_LIMITS.max_nesting_depth,
                    help="maximum container nesting depth")
    ap.add_argument("--max-input-size", type=int, default=_DEFAULT_LIMITS.max_input_size,
                    help="maximum input size in characters")
    ap.add_argument("-v", "--verbose", action="store_true", help="log debug details")
    return ap


def main(argv: Optional[list[str]] = None) -> int:
    ap = build_parser()
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(name)s: %(levelname)s: %(message)s",
        stream=sys.stderr,
    )

    try:
        limits = ParseLimits(
            max_input_size=args.max_input_size, max_nesting_depth=args.max_depth
        )
    except ValueError as e:
        ap.error(str(e))

    try:
        text = read_input(args.input)
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Cannot read {args.input}: {e}")
        return EXIT_BAD_INPUT

    try:
        value = parse(text, ParseConfig(limits=limits))
    except NoValueFoundError as e:
        logger.warning(e.message)
        return EXIT_NO_VALUE
    except SecurityError as e:
        logger.error(str(e))
        return EXIT_NO_VALUE

    print(dumps(value, ensure_ascii=args.ascii))
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
