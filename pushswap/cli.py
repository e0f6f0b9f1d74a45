"""Command line entry point: print the instructions that sort the given numbers."""

from __future__ import annotations

import sys
from typing import Sequence, TextIO

from pushswap.libft.output import putstr_fd
from pushswap.parsing import ArgumentError, check_duplicates, parse_arguments
from pushswap.sort import normalize, radix_sort, sort_four_to_five, sort_three
from pushswap.stacks import Stacks


def solve(values: Sequence[int], stream: TextIO | None = None) -> Stacks:
    """Sort ``values``, writing each instruction to ``stream``; return the stacks.

    Raises ArgumentError when a value is repeated.
    """
    check_duplicates(values)
    stacks = Stacks(normalize(values), stream)
    size = len(stacks.a)
    if size == 2 and stacks.a[0] > stacks.a[1]:
        stacks.swap("a")
    elif size == 3 and not stacks.is_sorted():
        sort_three(stacks)
    elif 4 <= size <= 5 and not stacks.is_sorted():
        sort_four_to_five(stacks)
    else:
        radix_sort(stacks)
    return stacks


def main(argv: Sequence[str] | None = None) -> int:
    """Parse the numbers, print the sorting instructions and return an exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        values = parse_arguments(args)
    except ArgumentError:
        putstr_fd("Error\n", sys.stderr)
        return 1
    solve(values)
    return 0


if __name__ == "__main__":
    sys.exit(main())