"""Roman numeral helpers used to order article markers."""

from __future__ import annotations

import re

_ROMAN_VALUES = [
    ("M", 1000),
    ("CM", 900),
    ("D", 500),
    ("CD", 400),
    ("C", 100),
    ("XC", 90),
    ("L", 50),
    ("XL", 40),
    ("X", 10),
    ("IX", 9),
    ("V", 5),
    ("IV", 4),
    ("I", 1),
]

# Well formed numerals from I to MMMCMXCIX.
ROMAN_PATTERN = re.compile(
    r"M{0,3}(?:CM|CD|D?C{0,3})(?:XC|XL|L?X{0,3})(?:IX|IV|V?I{0,3})"
)


def is_roman(token: str) -> bool:
    """Return whether ``token`` is a well formed upper case Roman numeral."""

    return bool(token) and ROMAN_PATTERN.fullmatch(token) is not None


def roman_to_int(token: str) -> int:
    """Convert a Roman numeral to an integer.

    Args:
        token: Upper case Roman numeral such as ``"XLII"``.

    Returns:
        The numeric value of ``token``.

    Raises:
        ValueError: If ``token`` is not a well formed numeral.
    """

    if not is_roman(token):
        raise ValueError(f"Not a Roman numeral: {token!r}")

    result = 0
    i = 0
    for numeral, value in _ROMAN_VALUES:
        while token[i : i + len(numeral)] == numeral:
            result += value
            i += len(numeral)
    return result


def int_to_roman(number: int) -> str:
    """Convert a positive integer to an upper case Roman numeral."""

    if not 0 < number < 4000:
        raise ValueError(f"Out of range for Roman numerals: {number}")

    parts: list[str] = []
    for numeral, value in _ROMAN_VALUES:
        while number >= value:
            parts.append(numeral)
            number -= value
    return "".join(parts)
