"""Data models for the tapcalc accumulator.

Button, ButtonType, Operation, Phase, CalculatorState, TapResult, Tape — the
typed structures that flow through keypad → accumulator → session → render.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional


class ButtonType(str, Enum):
    """Button categories, one accumulator effect per category."""

    NUMBER = "number"
    OPERATOR = "operator"
    NEGATIVE = "negative"
    PERCENT = "percent"
    DECIMAL = "decimal"
    CLEAR = "clear"


class Button(str, Enum):
    """Keypad buttons. The value is the label printed on the key."""

    ZERO = "0"
    ONE = "1"
    TWO = "2"
    THREE = "3"
    FOUR = "4"
    FIVE = "5"
    SIX = "6"
    SEVEN = "7"
    EIGHT = "8"
    NINE = "9"
    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "x"
    DIVIDE = "/"
    EQUAL = "="
    CLEAR = "AC"
    DECIMAL = "."
    PERCENT = "%"
    NEGATIVE = "-/+"

    @property
    def type(self) -> ButtonType:
        if self in _OPERATOR_BUTTONS:
            return ButtonType.OPERATOR
        if self is Button.CLEAR:
            return ButtonType.CLEAR
        if self is Button.NEGATIVE:
            return ButtonType.NEGATIVE
        if self is Button.PERCENT:
            return ButtonType.PERCENT
        if self is Button.DECIMAL:
            return ButtonType.DECIMAL
        return ButtonType.NUMBER

    @property
    def operation(self) -> Optional[Operation]:
        """Arithmetic operation bound to this button, if any."""
        return _BUTTON_OPERATIONS.get(self)


class Operation(str, Enum):
    """Pending arithmetic operation."""

    ADD = "add"
    SUBTRACT = "subtract"
    MULTIPLY = "multiply"
    DIVIDE = "divide"
    NONE = "none"


class Phase(str, Enum):
    """Position in the input state machine."""

    IDLE = "idle"
    OPERAND_ENTERED = "operand-entered"
    OPERATOR_PENDING = "operator-pending"


_OPERATOR_BUTTONS = frozenset({
    Button.ADD, Button.SUBTRACT, Button.MULTIPLY, Button.DIVIDE, Button.EQUAL,
})

_BUTTON_OPERATIONS = {
    Button.ADD: Operation.ADD,
    Button.SUBTRACT: Operation.SUBTRACT,
    Button.MULTIPLY: Operation.MULTIPLY,
    Button.DIVIDE: Operation.DIVIDE,
}


@dataclass(frozen=True)
class CalculatorState:
    """Snapshot of the accumulator after one tap.

    display is what the screen shows, pending_operand the left-hand side
    captured when an operator was pressed.
    """

    display: str = "0"
    pending_operand: str = "0"
    operation: Operation = Operation.NONE
    phase: Phase = Phase.IDLE

    def to_dict(self) -> dict:
        """Serialize to a JSON-compatible dict."""
        return {
            "display": self.display,
            "pending_operand": self.pending_operand,
            "operation": self.operation.value,
            "phase": self.phase.value,
        }


@dataclass
class TapResult:
    """One replayed tap and the state it produced."""

    button: Button
    state: CalculatorState


@dataclass
class Tape:
    """Record of a replayed tap sequence."""

    steps: list[TapResult] = field(default_factory=list)
    error: str = ""

    @property
    def final(self) -> CalculatorState:
        if not self.steps:
            return CalculatorState()
        return self.steps[-1].state

    @property
    def display(self) -> str:
        return self.final.display

    @property
    def ok(self) -> bool:
        return not self.error

    def to_dict(self) -> dict:
        """Serialize to a JSON-compatible dict, one entry per step."""
        return {
            "steps": [
                {"button": step.button.value, **step.state.to_dict()}
                for step in self.steps
            ],
            "display": self.display,
            "error": self.error,
        }
