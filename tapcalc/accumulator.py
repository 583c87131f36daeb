"""The tap accumulator — one reducer step per button press.

press(state, button) returns a new CalculatorState; nothing here touches
the screen. Accumulator wraps the reducer for callers that want a mutable
handle (the CLI session, the interactive keypad).

Effects per button category:
    number   — append, replace a lone "0", or start the right-hand operand
    decimal  — append "."
    negative — prepend "-" unless the display is "0"
    percent  — divide by 100 with float semantics
    clear    — back to "0" / "0" / no operation
    operator — snapshot the display as the pending operand
    equals   — resolve the pending operation
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Iterable, Optional

from tapcalc.config import Settings
from tapcalc.errors import DivisionByZeroError
from tapcalc.models import Button, ButtonType, CalculatorState, Operation, Phase
from tapcalc.numbers import (
    apply,
    as_float,
    coerce_pair,
    ends_with_decimal,
    format_number,
    is_float,
)

logger = logging.getLogger(__name__)

_DEFAULT_SETTINGS = Settings()


def _entered(state: CalculatorState) -> Phase:
    """Phase after an operand edit: idle moves on, anything else stays."""
    if state.phase == Phase.IDLE:
        return Phase.OPERAND_ENTERED
    return state.phase


def _press_digit(state: CalculatorState, digit: str) -> CalculatorState:
    value = state.display
    phase = _entered(state)

    if ends_with_decimal(value):
        if digit == "0":
            return state
        prefix = "0." if value == "." else value
        return replace(state, display=f"{prefix}{digit}", phase=phase)

    if value == "0":
        return replace(state, display=digit, phase=phase)
    if state.operation != Operation.NONE:
        # Second operand starts here; the current display becomes the left side.
        return replace(state, pending_operand=value, display=digit, phase=phase)
    return replace(state, display=f"{value}{digit}", phase=phase)


def _press_decimal(state: CalculatorState, settings: Settings) -> CalculatorState:
    """Append ".". Only digits start the right-hand operand, so a point
    typed right after an operator joins the left operand's text (5+.5= is 10.5).
    """
    if settings.strict_decimal and is_float(state.display):
        return state
    return replace(state, display=f"{state.display}.", phase=_entered(state))


def _press_negative(state: CalculatorState) -> CalculatorState:
    if state.display == "0":
        return state
    return replace(state, display=f"-{state.display}", phase=_entered(state))


def _press_percent(state: CalculatorState) -> CalculatorState:
    number = as_float(state.display)
    return replace(state, display=format_number(number / 100), phase=_entered(state))


def _press_equal(state: CalculatorState, settings: Settings) -> CalculatorState:
    operation = state.operation
    if operation == Operation.NONE:
        return replace(state, phase=Phase.OPERAND_ENTERED)

    left, right = coerce_pair(state.pending_operand, state.display)
    if operation == Operation.DIVIDE and isinstance(right, int) and right == 0:
        if not settings.float_division_by_zero:
            raise DivisionByZeroError(state.pending_operand, state.display)
        left, right = as_float(state.pending_operand), as_float(state.display)

    result = format_number(apply(operation, left, right))
    logger.debug(
        "resolved %s %s %s = %s",
        state.pending_operand, operation.value, state.display, result,
    )
    return replace(
        state,
        display=result,
        operation=Operation.NONE,
        phase=Phase.OPERAND_ENTERED,
    )


def press(
    state: CalculatorState,
    button: Button,
    settings: Optional[Settings] = None,
) -> CalculatorState:
    """Apply one button press and return the resulting state.

    Args:
        state: State before the tap.
        button: The button pressed.
        settings: Behaviour switches. Defaults to Settings().

    Returns:
        A new CalculatorState; `state` is never modified.

    Raises:
        DivisionByZeroError: on "=" dividing two integers by zero, unless
            settings.float_division_by_zero is set. `state` stays valid.
        NumberTooLargeError: on "=" when an integer operand or result has
            more digits than Python converts to or from str.
    """
    settings = settings or _DEFAULT_SETTINGS
    kind = button.type

    if kind == ButtonType.CLEAR:
        return CalculatorState()
    if kind == ButtonType.NUMBER:
        return _press_digit(state, button.value)
    if kind == ButtonType.DECIMAL:
        return _press_decimal(state, settings)
    if kind == ButtonType.NEGATIVE:
        return _press_negative(state)
    if kind == ButtonType.PERCENT:
        return _press_percent(state)
    if button == Button.EQUAL:
        return _press_equal(state, settings)

    return replace(
        state,
        pending_operand=state.display,
        operation=button.operation,
        phase=Phase.OPERATOR_PENDING,
    )


class Accumulator:
    """Mutable holder around press() for event-driven callers."""

    def __init__(self, settings: Optional[Settings] = None) -> None:
        self.settings = settings or _DEFAULT_SETTINGS
        self.state = CalculatorState()

    @property
    def display(self) -> str:
        return self.state.display

    def press(self, button: Button) -> CalculatorState:
        """Handle one input event. On error the previous state is kept."""
        before = self.state
        self.state = press(before, button, self.settings)
        logger.debug("tap %-3s %r -> %r", button.value, before.display, self.state.display)
        return self.state

    def press_many(self, buttons: Iterable[Button]) -> CalculatorState:
        for button in buttons:
            self.press(button)
        return self.state

    def clear(self) -> CalculatorState:
        return self.press(Button.CLEAR)
