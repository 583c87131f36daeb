"""Tapcalc session — feeds taps to an Accumulator and records the tape.

Data flow per replay:
1. Resolve labels to Buttons (tapcalc.keypad)
2. Start a fresh Accumulator with the given Settings
3. Press each button, recording the state it produced
4. Stop at the first failing "=" (division by zero, oversized integer),
   keeping the taps so far

interactive() runs the same loop line by line against a Rich console.
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional, Union

from rich.console import Console

from tapcalc.accumulator import Accumulator
from tapcalc.config import Settings
from tapcalc.errors import CalculatorError
from tapcalc.keypad import parse_taps
from tapcalc.models import Button, Tape, TapResult
from tapcalc.render import render_display, render_keypad

logger = logging.getLogger(__name__)

_QUIT_WORDS = ("q", "quit", "exit")


def _as_buttons(taps: Union[str, Iterable[Union[str, Button]]]) -> list[Button]:
    if isinstance(taps, str):
        return parse_taps(taps)
    labels = [t.value if isinstance(t, Button) else t for t in taps]
    return parse_taps(labels)


def replay(
    taps: Union[str, Iterable[Union[str, Button]]],
    settings: Optional[Settings] = None,
) -> Tape:
    """Replay a tap sequence on a fresh accumulator.

    Args:
        taps: Tap text ("12+3="), labels, or Buttons.
        settings: Behaviour switches. Defaults to Settings().

    Returns:
        Tape with one step per accepted tap. When "=" fails (integer division
        by zero, an integer too long to convert) the tape ends before it and
        carries the error message.

    Raises:
        UnknownButtonError: if a label matches no button. Nothing is pressed.
    """
    buttons = _as_buttons(taps)
    acc = Accumulator(settings)
    tape = Tape()

    for button in buttons:
        try:
            state = acc.press(button)
        except CalculatorError as e:
            logger.debug("replay stopped after %d taps: %s", len(tape.steps), e)
            tape.error = str(e)
            break
        tape.steps.append(TapResult(button=button, state=state))

    return tape


def interactive(
    console: Console,
    settings: Optional[Settings] = None,
    show_keypad: bool = True,
) -> str:
    """Run a line-oriented keypad session until q/quit or EOF.

    Each line is parsed as tap text and pressed in order. Errors are printed
    and the state from before the failing tap is kept.

    Returns:
        The display value when the session ends.
    """
    acc = Accumulator(settings)

    if show_keypad:
        console.print(render_keypad())
    console.print("[dim]Type taps (e.g. '12+3=') and press Enter. 'q' quits.[/dim]")
    console.print(render_display(acc.state))

    while True:
        try:
            line = console.input("[bold]> [/bold]")
        except EOFError:
            break
        line = line.strip()
        if not line:
            continue
        if line.lower() in _QUIT_WORDS:
            break

        try:
            acc.press_many(parse_taps(line))
        except CalculatorError as e:
            console.print(f"[red]Error:[/red] {e}")
        console.print(render_display(acc.state))

    return acc.display
