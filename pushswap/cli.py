"""Command-line entry: print the operations that sort the given numbers."""

from __future__ import annotations

import sys
from typing import Optional, Sequence, TextIO

from pushswap.parsing import ParseError, is_sorted, parse_arguments
from pushswap.sorting import sort_stacks
from pushswap.stacks import Stacks


def push_swap(args: Sequence[str], out: Optional[TextIO] = None) -> Stacks:
    """Sort the numbers in ``args``, writing each operation to ``out``.

    Raises :class:`ParseError` when the arguments are not distinct integers.
    Already sorted input produces no output.
    """
    values = parse_arguments(args)
    stacks = Stacks(values, out=out)
    if not is_sorted(stacks):
        sort_stacks(stacks)
    return stacks


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the program; returns 1 when no arguments are given, else 0."""
    args = list(sys.argv[1:] if argv is None else argv)
    if not args:
        return 1
    try:
        push_swap(args, sys.stdout)
    except ParseError:
        sys.stdout.write("Error\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())