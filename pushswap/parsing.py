"""Parsing of command-line arguments into stack values."""

from __future__ import annotations

from collections.abc import Iterable

from .errors import DuplicateValueError, IntegerRangeError, InvalidIntegerError

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1
_LONG_MAX = 2**63 - 1
_LONG_MIN_MAGNITUDE = 2**63

_WHITESPACE = " \t\n\v\f\r"
_DIGITS = "0123456789"


def parse_int(text: str) -> int:
    """Parse a decimal integer that must fit in a signed 32-bit int.

    Leading whitespace and a single sign are accepted; anything after the
    digits is rejected.
    """
    if not text:
        raise InvalidIntegerError(text)
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("+", "-"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
        if not rest:
            raise InvalidIntegerError(text)

    limit = _LONG_MAX if sign > 0 else _LONG_MIN_MAGNITUDE
    magnitude = 0
    consumed = 0
    for char in rest:
        if char not in _DIGITS:
            break
        digit = ord(char) - ord("0")
        if magnitude > (limit - digit) // 10:
            raise IntegerRangeError(text)
        magnitude = magnitude * 10 + digit
        consumed += 1
    if consumed != len(rest):
        raise InvalidIntegerError(text)

    value = sign * magnitude
    if not INT_MIN <= value <= INT_MAX:
        raise IntegerRangeError(text)
    return value


def parse_values(args: Iterable[str]) -> list[int]:
    """Parse every argument in order, rejecting bad integers and duplicates."""
    values: list[int] = []
    seen: set[int] = set()
    for arg in args:
        value = parse_int(arg)
        if value in seen:
            raise DuplicateValueError(arg)
        seen.add(value)
        values.append(value)
    return values