"""Sorting strategies that drive a :class:`~pushswap.stacks.Stacks` pair.

All strategies expect stack ``a`` to hold ranks ``0..n-1`` as produced by
:func:`normalize`.
"""

from __future__ import annotations

from bisect import bisect_left
from typing import Sequence

from pushswap.stacks import Stacks


def normalize(values: Sequence[int]) -> list[int]:
    """Replace every value by the number of values smaller than it."""
    ordered = sorted(values)
    return [bisect_left(ordered, value) for value in values]


def sort_three(stacks: Stacks) -> None:
    """Sort the ranks 0, 1 and 2 held in stack ``a``."""
    a = stacks.a
    if a[2] != 2:
        if a[0] == 2:
            stacks.rotate("a")
        else:
            stacks.reverse_rotate("a")
    if a[0] > a[1]:
        stacks.swap("a")


def sort_four_to_five(stacks: Stacks) -> None:
    """Sort four or five ranks held in stack ``a``.

    The two smallest ranks are parked on ``b`` while the rest are ordered.
    """
    wanted = max(0, 2 - len(stacks.b))
    if sum(1 for value in stacks.a if value in (0, 1)) < wanted:
        raise ValueError("stack a must hold the ranks 0 and 1")
    while len(stacks.b) <= 1:
        if stacks.a[0] in (0, 1):
            stacks.push_b()
        else:
            stacks.rotate("a")
    if stacks.b[0] == 0:
        stacks.swap("b")
    a = stacks.a
    # With four values only two remain on a, so the third place never holds
    # rank 4 and a reverse rotation is always made.
    if len(a) < 3 or a[2] != 4:
        if a[0] == 4:
            stacks.rotate("a")
        else:
            stacks.reverse_rotate("a")
    if a[0] > a[1]:
        stacks.swap("a")
    stacks.push_a()
    stacks.push_a()


def _distribute_b(stacks: Stacks, top_bit: int, bit: int) -> None:
    """Send back from ``b`` the values whose ``bit`` is set, rotating the others."""
    if bit <= top_bit:
        for _ in range(len(stacks.b)):
            if stacks.is_sorted():
                break
            if (stacks.b[0] >> bit) & 1 == 0:
                stacks.rotate("b")
            else:
                stacks.push_a()
    if stacks.is_sorted():
        while stacks.b:
            stacks.push_a()


def radix_sort(stacks: Stacks) -> None:
    """Sort the ranks in stack ``a`` bit by bit, least significant first."""
    top_bit = max(len(stacks.a).bit_length() - 1, 0)
    for bit in range(top_bit + 1):
        for _ in range(len(stacks.a)):
            if stacks.is_sorted():
                break
            if (stacks.a[0] >> bit) & 1 == 0:
                stacks.push_b()
            else:
                stacks.rotate("a")
        _distribute_b(stacks, top_bit, bit + 1)
    while stacks.b:
        stacks.push_a()