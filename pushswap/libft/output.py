"""Writing characters, strings and numbers to a text stream."""

from __future__ import annotations

import operator
import sys
from typing import TextIO


def _target(stream: TextIO | None) -> TextIO:
    return sys.stdout if stream is None else stream


def putchar_fd(c: str, stream: TextIO | None = None) -> None:
    """Write a single character to ``stream`` (standard output by default)."""
    if len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    _target(stream).write(c)


def putstr_fd(text: str, stream: TextIO | None = None) -> None:
    """Write ``text`` to ``stream`` without a trailing newline."""
    _target(stream).write(text)


def putendl_fd(text: str, stream: TextIO | None = None) -> None:
    """Write ``text`` followed by a newline to ``stream``."""
    _target(stream).write(text + "\n")


def putnbr_fd(n: int, stream: TextIO | None = None) -> None:
    """Write the decimal representation of the integer ``n`` to ``stream``."""
    _target(stream).write(str(operator.index(n)))