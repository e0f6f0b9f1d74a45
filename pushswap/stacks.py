"""The two stacks of the puzzle and the operations that move values between them."""

from __future__ import annotations

from collections import deque
from typing import Iterable, TextIO

from pushswap.libft.output import putendl_fd


class Stacks:
    """Stacks ``a`` and ``b``, top at index 0.

    Each operation that changes a stack writes its instruction name, one per
    line, to ``stream`` (standard output by default). Operations that would
    have no effect write nothing.
    """

    def __init__(self, values: Iterable[int] = (), stream: TextIO | None = None) -> None:
        self.a: deque[int] = deque(values)
        self.b: deque[int] = deque()
        self.stream = stream

    def _stack(self, stack: str) -> deque[int]:
        if stack == "a":
            return self.a
        if stack == "b":
            return self.b
        raise ValueError(f"unknown stack {stack!r}, expected 'a' or 'b'")

    def _emit(self, instruction: str) -> None:
        putendl_fd(instruction, self.stream)

    def swap(self, stack: str) -> None:
        """Exchange the two top values of ``stack`` (``sa`` / ``sb``)."""
        target = self._stack(stack)
        if len(target) < 2:
            return
        target[0], target[1] = target[1], target[0]
        self._emit(f"s{stack}")

    def rotate(self, stack: str) -> None:
        """Move the top value of ``stack`` to the bottom (``ra`` / ``rb``)."""
        target = self._stack(stack)
        if len(target) < 2:
            return
        target.rotate(-1)
        self._emit(f"r{stack}")

    def reverse_rotate(self, stack: str) -> None:
        """Move the bottom value of ``stack`` to the top (``rra`` / ``rrb``)."""
        target = self._stack(stack)
        if len(target) < 2:
            return
        target.rotate(1)
        self._emit(f"rr{stack}")

    def push_a(self) -> None:
        """Move the top of ``b`` onto ``a`` (``pa``)."""
        if not self.b:
            return
        self.a.appendleft(self.b.popleft())
        self._emit("pa")

    def push_b(self) -> None:
        """Move the top of ``a`` onto ``b`` (``pb``)."""
        if not self.a:
            return
        self.b.appendleft(self.a.popleft())
        self._emit("pb")

    def is_sorted(self) -> bool:
        """Return True when stack ``a`` is in ascending order from the top."""
        return all(left <= right for left, right in zip(self.a, list(self.a)[1:]))