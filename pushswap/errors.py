"""Errors raised for input that cannot form a valid stack."""

from __future__ import annotations

ERROR_MESSAGE = "Error"
"""What the command-line programs print on standard error for any rejected input."""


class PushSwapError(Exception):
    """Base class for every rejected argument."""

    reason = "invalid input"

    def __init__(self, text: str) -> None:
        self.text = text
        super().__init__(f"{self.reason}: {text!r}")


class InvalidIntegerError(PushSwapError):
    """The argument is not a well-formed decimal integer."""

    reason = "not an integer"


class IntegerRangeError(PushSwapError):
    """The argument is an integer outside the signed 32-bit range."""

    reason = "integer out of range"


class DuplicateValueError(PushSwapError):
    """The same value appears more than once among the arguments."""

    reason = "duplicate value"