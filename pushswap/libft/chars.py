"""Character classification and case conversion over the ASCII range.

Every function accepts either an integer character code or a one-character
string. The case converters return a value of the same kind they were given.
"""

from __future__ import annotations

import operator
from typing import TypeVar

CharLike = TypeVar("CharLike", int, str)


def _code(c: int | str) -> int:
    """Return the integer code of a character given as an int or a 1-char str."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    return operator.index(c)


def is_digit(c: int | str) -> bool:
    """Return True for the ASCII digits 0-9."""
    return ord("0") <= _code(c) <= ord("9")


def is_alpha(c: int | str) -> bool:
    """Return True for the ASCII letters a-z and A-Z."""
    code = _code(c)
    return ord("a") <= code <= ord("z") or ord("A") <= code <= ord("Z")


def is_alnum(c: int | str) -> bool:
    """Return True for ASCII letters and digits."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: int | str) -> bool:
    """Return True for codes in the 7-bit ASCII range 0-127."""
    return 0 <= _code(c) <= 127


def is_print(c: int | str) -> bool:
    """Return True for printable ASCII characters (space through tilde)."""
    return 32 <= _code(c) <= 126


def _convert(c: CharLike, code: int) -> CharLike:
    return chr(code) if isinstance(c, str) else code


def to_lower(c: CharLike) -> CharLike:
    """Map an ASCII upper-case letter to lower case; leave anything else as is."""
    code = _code(c)
    if ord("A") <= code <= ord("Z"):
        code += 32
    return _convert(c, code)


def to_upper(c: CharLike) -> CharLike:
    """Map an ASCII lower-case letter to upper case; leave anything else as is."""
    code = _code(c)
    if ord("a") <= code <= ord("z"):
        code -= 32
    return _convert(c, code)