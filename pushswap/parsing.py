"""Reading and checking the numbers given on the command line."""

from __future__ import annotations

from typing import Iterable, Sequence

from pushswap.libft.chars import is_digit
from pushswap.libft.transform import split

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

# Every code up to and including the space is skipped before a number.
_LEADING_SKIP = "".join(chr(code) for code in range(33))


class ArgumentError(ValueError):
    """Raised when the numbers to sort are missing, malformed or repeated."""


def join_args(args: Iterable[str]) -> str:
    """Join the arguments into one space-separated string.

    A single empty argument is an error; no arguments at all give "".
    """
    parts = list(args)
    if len(parts) == 1 and parts[0] == "":
        raise ArgumentError("the only argument is empty")
    return " ".join(parts)


def validate(text: str) -> str:
    """Check that ``text`` holds only digits, spaces and well-placed signs.

    A sign must not be followed by a space or end the text. Returns ``text``
    unchanged when it is acceptable.
    """
    for position, (char, following) in enumerate(zip(text, text[1:] + " ")):
        if not (is_digit(char) or char in " +-"):
            raise ArgumentError(f"unexpected character {char!r} at {position}")
        if char in "+-" and following == " ":
            raise ArgumentError(f"sign without digits at {position}")
    return text


def word_count(text: str, separator: str = " ") -> int:
    """Return the number of non-empty words in ``text`` split on ``separator``."""
    return len(split(text, separator))


def parse_number(word: str) -> int:
    """Convert one word to an integer in the signed 32-bit range.

    Leading control characters and spaces are skipped and one sign is
    accepted; every remaining character must be a digit.
    """
    body = word.lstrip(_LEADING_SKIP)
    sign = 1
    if body[:1] in ("-", "+"):
        if body[0] == "-":
            sign = -1
        body = body[1:]
    if not all(is_digit(char) for char in body):
        raise ArgumentError(f"not a number: {word!r}")
    value = sign * int(body) if body else 0
    if not INT_MIN <= value <= INT_MAX:
        raise ArgumentError(f"number out of range: {word!r}")
    return value


def parse_numbers(text: str) -> list[int]:
    """Parse every space-separated word of ``text`` as a number."""
    return [parse_number(word) for word in split(text, " ")]


def check_duplicates(values: Sequence[int]) -> Sequence[int]:
    """Raise ArgumentError if any value occurs twice; otherwise return ``values``."""
    seen: set[int] = set()
    for value in values:
        if value in seen:
            raise ArgumentError(f"duplicate number: {value}")
        seen.add(value)
    return values


def parse_arguments(args: Iterable[str]) -> list[int]:
    """Turn command-line arguments into the list of numbers to sort."""
    text = validate(join_args(args))
    values = parse_numbers(text)
    check_duplicates(values)
    return values