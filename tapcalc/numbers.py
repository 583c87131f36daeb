"""Numeric helpers for display strings.

Display values stay strings so a trailing decimal point survives between
taps. Every conversion here falls back to zero instead of raising, except
integers too long to convert, and integer division by zero which the
accumulator treats as fatal.
"""

from __future__ import annotations

import logging
import math
import operator as op
from typing import Callable, Union

from tapcalc.errors import NumberTooLargeError
from tapcalc.models import Operation

logger = logging.getLogger(__name__)

Number = Union[int, float]


def ends_with_decimal(text: str) -> bool:
    return text.endswith(".")


def is_float(text: str) -> bool:
    """A display string takes float semantics as soon as it holds a '.'."""
    return "." in text


def as_int(text: str) -> int:
    """Parse an integer display string, defaulting to 0.

    Raises:
        NumberTooLargeError: if text is a well-formed integer with more
            digits than int() accepts.
    """
    try:
        return int(text)
    except ValueError:
        digits = text[1:] if text.startswith("-") else text
        if digits.isdecimal():
            raise NumberTooLargeError(f"operand has {len(digits)} digits") from None
        logger.debug("int parse fallback: %r -> 0", text)
        return 0


def as_float(text: str) -> float:
    """Parse a float display string, defaulting to 0.0."""
    try:
        return float(text)
    except ValueError:
        logger.debug("float parse fallback: %r -> 0.0", text)
        return 0.0


def coerce_pair(left: str, right: str) -> tuple[Number, Number]:
    """Parse both operands once, as floats if either holds a decimal point.

    Returns:
        (left, right) as two ints or two floats.
    """
    if is_float(left) or is_float(right):
        return as_float(left), as_float(right)
    return as_int(left), as_int(right)


def format_number(value: Number) -> str:
    """Render a number for the display.

    Ints print bare ("5"); floats use the shortest round-tripping form,
    which always carries a fraction or an exponent ("5.0", "1e+16", "inf").

    Raises:
        NumberTooLargeError: if an int has too many digits to print.
    """
    if isinstance(value, float):
        return repr(value)
    try:
        return str(value)
    except ValueError:
        raise NumberTooLargeError("result exceeds the integer digit limit") from None


def truncating_div(left: int, right: int) -> int:
    """Integer division rounding toward zero (-7 / 2 == -3).

    Raises:
        ZeroDivisionError: if right is 0.
    """
    quotient = abs(left) // abs(right)
    return quotient if (left < 0) == (right < 0) else -quotient


def float_div(left: float, right: float) -> float:
    """IEEE division: x / 0 gives +-inf, 0 / 0 gives nan."""
    if right == 0:
        if left == 0 or math.isnan(left):
            return float("nan")
        # Sign follows both operands, including a negative zero divisor.
        negative = math.copysign(1.0, left) * math.copysign(1.0, right) < 0
        return float("-inf") if negative else float("inf")
    return left / right


_INT_OPERATORS: dict[Operation, Callable[[int, int], int]] = {
    Operation.ADD: op.add,
    Operation.SUBTRACT: op.sub,
    Operation.MULTIPLY: op.mul,
    Operation.DIVIDE: truncating_div,
}

_FLOAT_OPERATORS: dict[Operation, Callable[[float, float], float]] = {
    Operation.ADD: op.add,
    Operation.SUBTRACT: op.sub,
    Operation.MULTIPLY: op.mul,
    Operation.DIVIDE: float_div,
}


def apply(operation: Operation, left: Number, right: Number) -> Number:
    """Apply a pending operation with int or float semantics.

    The operand types pick the table: two ints use integer arithmetic,
    anything else floating point.
    """
    if isinstance(left, int) and isinstance(right, int):
        return _INT_OPERATORS[operation](left, right)
    return _FLOAT_OPERATORS[operation](float(left), float(right))
