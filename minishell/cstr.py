"""Small string helpers with the exact semantics the shell relies on."""

from __future__ import annotations

from itertools import takewhile

_WHITESPACE = " \t\n\v\f\r"
_DIGITS = "0123456789"


def atoi(text: str) -> int:
    """Parse a leading decimal integer, ignoring trailing junk; 0 if none."""
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("-", "+"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    digits = "".join(takewhile(lambda c: c in _DIGITS, rest))
    return sign * int(digits) if digits else 0


def split_fields(text: str, sep: str) -> list[str]:
    """Split on a separator character, dropping empty fields."""
    return [part for part in text.split(sep) if part]


def prefix_equal(text: str, other: str, limit: int) -> bool:
    """True if the first ``limit`` characters of both strings agree."""
    return text[:limit] == other[:limit]