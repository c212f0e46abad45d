"""Conversions between text and numbers."""

from __future__ import annotations

from .chars import is_digit

_SPACES = frozenset("\t\n\v\f\r ")


def atoi_at(text: str, pos: int) -> tuple[int, int]:
    """Parse an integer starting at ``pos``.

    Leading whitespace is skipped and a sign is honoured only when a digit
    follows it. Returns the value and the position just after what was read.
    """
    end = len(text)
    while pos < end and text[pos] in _SPACES:
        pos += 1
    sign = 1
    if pos + 1 < end and text[pos] in "+-" and is_digit(text[pos + 1]):
        if text[pos] == "-":
            sign = -1
        pos += 1
    start = pos
    while pos < end and is_digit(text[pos]):
        pos += 1
    value = int(text[start:pos]) if pos > start else 0
    return sign * value, pos


def atoi(text: str) -> int:
    """Parse the integer at the start of ``text``; 0 if there is none."""
    return atoi_at(text, 0)[0]


def atof(text: str) -> float:
    """Parse an unsigned decimal number such as ``12`` or ``0.25``.

    Parsing stops at the first character that does not fit; no sign or
    whitespace is accepted, so such input gives 0.0.
    """
    end = len(text)
    pos = 0
    while pos < end and is_digit(text[pos]):
        pos += 1
    whole = text[:pos] or "0"
    fraction = ""
    if pos < end and text[pos] == ".":
        frac_start = pos + 1
        pos = frac_start
        while pos < end and is_digit(text[pos]):
            pos += 1
        fraction = text[frac_start:pos]
    return float(f"{whole}.{fraction or '0'}")


def itoa(n: int) -> str:
    """Decimal representation of an integer, with a leading '-' if negative."""
    if not isinstance(n, int) or isinstance(n, bool):
        raise TypeError(f"expected an int, got {type(n).__name__}")
    return str(n)