"""Rich renderables for the display, the keypad and a replay tape."""

from __future__ import annotations

from rich.console import Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from tapcalc.keypad import LAYOUT, button_color, button_span
from tapcalc.models import CalculatorState, Operation, Phase, Tape

_OPERATION_SYMBOLS = {
    Operation.ADD: "+",
    Operation.SUBTRACT: "-",
    Operation.MULTIPLY: "x",
    Operation.DIVIDE: "/",
    Operation.NONE: "",
}

_PHASE_STYLES = {
    Phase.IDLE: "dim",
    Phase.OPERAND_ENTERED: "green",
    Phase.OPERATOR_PENDING: "yellow",
}


def render_display(state: CalculatorState) -> Panel:
    """Right-aligned display panel; the pending operation shows in the subtitle."""
    value = Text(state.display, style="bold white", justify="right")
    subtitle = None
    if state.operation != Operation.NONE:
        subtitle = f"{state.pending_operand} {_OPERATION_SYMBOLS[state.operation]}"
    return Panel(value, subtitle=subtitle, subtitle_align="right", style="on black", width=28)


def _key(label: str, color: str, span: int) -> Text:
    width = 5 * span + (span - 1)
    return Text(label.center(width), style=f"bold white on {color}")


def render_keypad() -> Group:
    """Keypad rows coloured by button category."""
    lines: list[Text] = []
    for row in LAYOUT:
        line = Text()
        for i, button in enumerate(row):
            if i:
                line.append(" ")
            line.append_text(_key(button.value, button_color(button), button_span(button)))
        lines.append(line)
    return Group(*lines)


def render_tape(tape: Tape) -> Table:
    """One row per tap: button, display and pending state after the tap."""
    table = Table(title="Tape", show_header=True, header_style="bold")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Key", justify="center")
    table.add_column("Display", justify="right", style="bold")
    table.add_column("Operand", justify="right")
    table.add_column("Op", justify="center")
    table.add_column("Phase")

    for i, step in enumerate(tape.steps, 1):
        s = step.state
        style = _PHASE_STYLES[s.phase]
        table.add_row(
            str(i),
            step.button.value,
            s.display,
            s.pending_operand,
            _OPERATION_SYMBOLS[s.operation] or "--",
            f"[{style}]{s.phase.value}[/{style}]",
        )

    if tape.error:
        table.caption = f"[red]{tape.error}[/red]"
    return table
