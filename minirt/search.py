"""Searching, comparing and bounded copying of strings and byte strings."""

from __future__ import annotations

from typing import Optional

_NUL = "\0"


def _check_char(c: str) -> None:
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")


def _check_count(n: int) -> None:
    if n < 0:
        raise ValueError(f"count must not be negative, got {n}")


def strnstr(haystack: str, needle: str, length: int) -> Optional[int]:
    """Index of the first ``needle`` lying wholly within ``haystack[:length]``.

    An empty needle is found at index 0. Returns None when there is no match.
    """
    _check_count(length)
    index = haystack[:length].find(needle)
    return None if index < 0 else index


def strchr(text: str, c: str) -> Optional[int]:
    """Index of the first ``c`` in ``text``, or None.

    Searching for the NUL character finds the end of the text.
    """
    _check_char(c)
    if c == _NUL:
        return len(text)
    index = text.find(c)
    return None if index < 0 else index


def strrchr(text: str, c: str) -> Optional[int]:
    """Index of the last ``c`` in ``text``, or None.

    Only positions from the end of the text down to index 1 are examined;
    the first character is never reported. Searching for NUL finds the end
    of a non-empty text.
    """
    _check_char(c)
    if not text:
        return None
    if c == _NUL:
        return len(text)
    index = text.rfind(c, 1)
    return None if index < 0 else index


def _code_at(text: str, index: int) -> int:
    return ord(text[index]) if index < len(text) else 0


def strncmp(first: str, second: str, n: int) -> int:
    """Compare at most ``n`` characters.

    Returns the difference of the character codes where the strings first
    differ (the end of a string counts as code 0), or 0 if they agree.
    """
    _check_count(n)
    for index in range(n):
        a = _code_at(first, index)
        b = _code_at(second, index)
        if a != b or a == 0:
            return a - b
    return 0


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` slots, one kept for the terminator.

    Returns the copied text and the full length of ``src``.
    """
    _check_count(size)
    copied = src[:size - 1] if size else ""
    return copied, len(src)


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size`` slots.

    Returns the resulting text and the length the full result would have.
    When the buffer is already full, ``dst`` is returned unchanged together
    with ``len(src) + size``.
    """
    _check_count(size)
    if size == 0 or size <= len(dst):
        return dst, len(src) + size
    room = size - len(dst) - 1
    return dst + src[:room], len(dst) + len(src)


def len_to_char(text: Optional[str], c: str) -> int:
    """One past the index of the first ``c`` in ``text``, or 0 if absent."""
    _check_char(c)
    if not text:
        return 0
    index = text.find(c)
    return index + 1 if index >= 0 else 0


def starts_with_key(text: str, key: str) -> bool:
    """True when ``text`` is ``key`` itself or ``key`` followed by ``=``."""
    if not text.startswith(key):
        return False
    rest = text[len(key):]
    return rest == "" or rest[0] == "="


def memchr(data: bytes, c: int, n: int) -> Optional[int]:
    """Index of the first byte equal to ``c`` (taken modulo 256) in ``data[:n]``."""
    _check_count(n)
    if n > len(data):
        raise ValueError(f"count {n} exceeds data length {len(data)}")
    index = data.find(c & 0xFF, 0, n)
    return None if index < 0 else index


def memcmp(first: bytes, second: bytes, n: int) -> int:
    """Compare the first ``n`` bytes; returns the difference at the first mismatch."""
    _check_count(n)
    if n > len(first) or n > len(second):
        raise ValueError(f"count {n} exceeds data length")
    for a, b in zip(first[:n], second[:n]):
        if a != b:
            return a - b
    return 0