"""Load two matrix files and print their sum, difference and product.

Usage::

    python -m sparsemat A.txt B.txt [--width N] [-v]
"""

import argparse
import logging
import sys
from typing import List, Optional

from . import set_cell_width
from .errors import DimensionMismatchError, FormatError, MatrixIOError
from .io import load

logger = logging.getLogger("sparsemat")


def _positive_int(text):
    try:
        n = int(text)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: {text!r}") from None
    if n <= 0:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got {n}")
    return n


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="python -m sparsemat",
        description="Add, subtract and multiply two sparse matrix files.",
    )
    p.add_argument("left", help="first matrix file")
    p.add_argument("right", help="second matrix file")
    p.add_argument("--width", type=_positive_int, default=None, help="cell width for printed grids")
    p.add_argument("--strict", action="store_true", help="reject entries outside the declared shape")
    p.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")
    return p


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    if args.width is not None:
        set_cell_width(args.width)

    try:
        a = load(args.left, strict=args.strict)
        b = load(args.right, strict=args.strict)
    except (MatrixIOError, FormatError) as e:
        logger.error("%s", e)
        return 1

    print(f"Left ({args.left}):")
    print(a.render())
    print(f"\nRight ({args.right}):")
    print(b.render())

    ops = [
        ("Addition", "+", lambda: a + b),
        ("Subtraction", "-", lambda: a - b),
        ("Multiplication", "@", lambda: a @ b),
    ]
    for title, sym, fn in ops:
        print(f"\n{title} (left {sym} right):")
        try:
            print(fn().render())
        except DimensionMismatchError as e:
            print(f"Error: {e}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
