"""Small text helpers for splitting input and parsing numbers."""

from __future__ import annotations

_ZERO = ord("0")


def split(text: str, delimiter: str) -> list[str]:
    """Split ``text`` on a single-character delimiter, keeping empty fields."""
    if len(delimiter) != 1:
        raise ValueError("Delimiter must be a single character!")
    return text.split(delimiter)


def _strip_sign(text: str) -> tuple[int, str]:
    if text.startswith("-"):
        return -1, text[1:]
    if text.startswith("+"):
        return 1, text[1:]
    return 1, text


def to_int(text: str) -> int:
    """Parse an optionally signed decimal integer; any non-digit yields 0."""
    sign, digits = _strip_sign(text)
    result = 0
    for char in digits:
        if not "0" <= char <= "9":
            return 0
        result = result * 10 + (ord(char) - _ZERO)
    return result * sign


def to_double(text: str) -> float:
    """Parse an optionally signed decimal number with an optional fraction."""
    sign, body = _strip_sign(text)
    whole, _, fraction_digits = body.partition(".")

    result = 0.0
    for char in whole:
        result = result * 10 + (ord(char) - _ZERO)

    fraction = 0.0
    divisor = 1.0
    for char in fraction_digits:
        fraction = fraction * 10 + (ord(char) - _ZERO)
        divisor *= 10

    return sign * (result + fraction / divisor)