"""Building new strings from existing ones and converting integers."""

from __future__ import annotations

import operator
from typing import Callable, MutableSequence

_WHITESPACE = " \r\t\n\v\f"
_LLONG_MAX = 2**63 - 1
_ULLONG_MOD = 2**64


def strjoin(first: str, second: str) -> str:
    """Return ``first`` followed by ``second``."""
    return f"{first}{second}"


def substr(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` from index ``start``.

    A ``start`` past the end gives an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start > len(text):
        return ""
    return text[start : start + length]


def strtrim(text: str, charset: str) -> str:
    """Remove characters found in ``charset`` from both ends of ``text``."""
    return text.strip(charset) if charset else text


def split(text: str, separator: str) -> list[str]:
    """Split ``text`` on ``separator``, dropping empty words."""
    if len(separator) != 1:
        raise ValueError(f"separator must be a single character, got {separator!r}")
    return [word for word in text.split(separator) if word]


def itoa(n: int) -> str:
    """Return the decimal representation of ``n``."""
    return str(operator.index(n))


def atoi(text: str) -> int:
    """Read a leading decimal integer from ``text``.

    Leading whitespace and one sign are accepted; reading stops at the first
    non-digit. The value is wrapped into the signed 32-bit range. When the
    accumulated magnitude exceeds the signed 64-bit maximum before another
    digit, the result is -1 for positive input and 0 for negative input.
    """
    pos = 0
    while pos < len(text) and text[pos] in _WHITESPACE:
        pos += 1
    sign = 1
    if pos < len(text) and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    result = 0
    while pos < len(text) and "0" <= text[pos] <= "9":
        if result > _LLONG_MAX:
            return 0 if sign == -1 else -1
        result = (result * 10 + ord(text[pos]) - ord("0")) % _ULLONG_MOD
        pos += 1
    low = (result * sign) % _ULLONG_MOD & 0xFFFFFFFF
    return low - 2**32 if low >= 2**31 else low


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Return a string built from ``func(index, char)`` for each character."""
    return "".join(func(index, char) for index, char in enumerate(text))


def striteri(
    chars: MutableSequence[str], func: Callable[[int, str], str | None]
) -> None:
    """Call ``func(index, char)`` for each element of ``chars``.

    When ``func`` returns a value other than None, it replaces the element
    in place.
    """
    for index, char in enumerate(chars):
        replacement = func(index, char)
        if replacement is not None:
            chars[index] = replacement