"""String building and splitting helpers."""

from __future__ import annotations

from collections.abc import Callable, MutableSequence
from functools import reduce
from typing import Optional


def _check_separator(sep: str) -> None:
    if not isinstance(sep, str) or len(sep) != 1:
        raise ValueError(f"separator must be a single character, got {sep!r}")


def split(text: str, sep: str) -> list[str]:
    """Split ``text`` on the character ``sep``, dropping empty pieces."""
    _check_separator(sep)
    return [word for word in text.split(sep) if word]


def substr(text: str, start: int, length: int) -> str:
    """Return at most ``length`` characters of ``text`` starting at ``start``.

    A start at or past the end of the text gives an empty string.
    """
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(text):
        return ""
    return text[start:start + length]


def strtrim(text: str, charset: str) -> str:
    """Remove every leading and trailing character that appears in ``charset``."""
    return text.strip(charset)


def strjoin(first: Optional[str], second: Optional[str]) -> Optional[str]:
    """Concatenate two strings; a missing one is treated as absent.

    Returns None only when both are missing.
    """
    if first is None and second is None:
        return None
    if first is None:
        return second
    if second is None:
        return first
    return first + second


def join_all(*args: Optional[str]) -> Optional[str]:
    """Concatenate any number of strings, skipping missing ones.

    Returns None when nothing but missing strings (or nothing at all) is given.
    """
    return reduce(strjoin, args, None)


def strmapi(text: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from ``func(index, char)`` applied to every character."""
    return "".join(func(index, char) for index, char in enumerate(text))


def striteri(
    text: MutableSequence[str], func: Callable[[int, str], Optional[str]]
) -> None:
    """Call ``func(index, char)`` on every character of a mutable sequence.

    When ``func`` returns a value other than None it replaces that character
    in place.
    """
    for index, char in enumerate(text):
        replacement = func(index, char)
        if replacement is not None:
            text[index] = replacement