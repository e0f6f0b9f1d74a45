"""Searching, comparing and bounded copying of text.

Positions are returned as indices into the text, and ``None`` where nothing
is found.
"""

from __future__ import annotations

import operator


def _char_code(c: int | str) -> int:
    """Return the code of ``c``, reduced modulo 256."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c) % 256
    return operator.index(c) % 256


def _check_size(size: int) -> None:
    if size < 0:
        raise ValueError(f"size must not be negative, got {size}")


def strlen(text: str) -> int:
    """Return the number of characters in ``text``."""
    return len(text)


def strchr(text: str, c: int | str) -> int | None:
    """Return the index of the first occurrence of ``c`` in ``text``.

    ``c`` may be a character or a code, taken modulo 256. Searching for the
    terminator (code 0) gives the length of ``text``. Returns None when ``c``
    does not occur.
    """
    code = _char_code(c)
    if code == 0:
        return len(text)
    index = text.find(chr(code))
    return None if index < 0 else index


def strrchr(text: str, c: int | str) -> int | None:
    """Return the index of the last occurrence of ``c`` in ``text``.

    Behaves like :func:`strchr` otherwise.
    """
    code = _char_code(c)
    if code == 0:
        return len(text)
    index = text.rfind(chr(code))
    return None if index < 0 else index


def strncmp(first: str, second: str, n: int) -> int:
    """Compare at most ``n`` characters of two strings.

    Returns the difference of the character codes at the first mismatch, a
    string that ends early counting as code 0; returns 0 when they agree.
    """
    _check_size(n)
    for i in range(n):
        left = ord(first[i]) if i < len(first) else 0
        right = ord(second[i]) if i < len(second) else 0
        if left != right:
            return left - right
        if left == 0:
            break
    return 0


def strnstr(big: str, little: str, length: int) -> int | None:
    """Find ``little`` within the first ``length`` characters of ``big``.

    Returns the index of the match, 0 for an empty ``little``, or None.
    """
    _check_size(length)
    if not little:
        return 0
    limit = min(len(big), length)
    for start in range(limit):
        if start + len(little) > length:
            break
        if big.startswith(little, start):
            return start
    return None


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters including the terminator.

    Returns the copied text, truncated to ``size - 1`` characters, and the
    full length of ``src`` so truncation can be detected.
    """
    _check_size(size)
    copied = src[: size - 1] if size > 0 else ""
    return copied, len(src)


def strlcat(dest: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dest`` within a buffer of ``size`` characters.

    Returns the resulting text and the length the concatenation would have
    had. When ``size`` does not exceed the length of ``dest``, ``dest`` is
    left as it is and the returned length is ``size + len(src)``.
    """
    _check_size(size)
    if size <= len(dest):
        return dest, size + len(src)
    room = size - 1 - len(dest)
    return dest + src[:room], len(dest) + len(src)


def strdup(text: str) -> str:
    """Return a copy of ``text``."""
    return "".join(text)