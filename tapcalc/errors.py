"""Exceptions raised by tapcalc.

Parse failures never raise; they fall back to zero inside tapcalc.numbers.
"""

from __future__ import annotations


class CalculatorError(Exception):
    """Base class for errors the CLI reports and exits on."""


class DivisionByZeroError(CalculatorError, ZeroDivisionError):
    """Integer "=" with a zero divisor."""

    def __init__(self, left: str, right: str) -> None:
        super().__init__(f"integer division by zero: {left} / {right}")
        self.left = left
        self.right = right


class UnknownButtonError(CalculatorError, ValueError):
    """A label that matches no keypad button."""

    def __init__(self, label: str) -> None:
        super().__init__(f"unknown button: {label!r}")
        self.label = label


class NumberTooLargeError(CalculatorError, OverflowError):
    """An integer with more digits than int/str conversion allows.

    Raised by "=" the same way as DivisionByZeroError; the state is kept.
    """
