"""CLI for the tapcalc keypad calculator.

Usage:
    python -m tapcalc tap 1 2 + 3 =          # Replay taps, print the display
    python -m tapcalc tap 12+3= --tape       # Show every step on stderr
    python -m tapcalc tap 12+3= --json       # Print every step as JSON
    python -m tapcalc tap -- 5 -/+           # Use -- before labels starting with '-'
    python -m tapcalc keypad                 # Show the keypad layout
    python -m tapcalc interactive            # Type taps line by line
"""

from __future__ import annotations

import json
from typing import Optional

import typer
from rich.console import Console

from tapcalc.config import Settings, configure_logging
from tapcalc.errors import CalculatorError
from tapcalc.models import CalculatorState
from tapcalc.render import render_display, render_keypad, render_tape
from tapcalc.session import interactive, replay

app = typer.Typer(
    name="tapcalc",
    help="Four-function tap calculator",
    no_args_is_help=True,
)
console = Console(stderr=True)


def _settings(
    strict_decimal: Optional[bool],
    float_div_zero: Optional[bool],
    verbose: bool,
) -> Settings:
    """Environment settings with CLI flags applied on top."""
    settings = Settings.from_env().with_overrides(
        strict_decimal=strict_decimal,
        float_division_by_zero=float_div_zero,
        log_level="DEBUG" if verbose else None,
    )
    configure_logging(settings)
    return settings


@app.command("tap")
def cmd_tap(
    taps: list[str] = typer.Argument(help="Taps, e.g. '12+3=' or '1 2 + 3 ='"),
    tape: bool = typer.Option(False, "--tape", "-t", help="Show every step"),
    as_json: bool = typer.Option(False, "--json", help="Print the tape as JSON on stdout"),
    strict_decimal: Optional[bool] = typer.Option(
        None, "--strict-decimal/--loose-decimal", help="Ignore a second '.' in one number",
    ),
    float_div_zero: Optional[bool] = typer.Option(
        None, "--float-div-zero/--fatal-div-zero", help="Integer x/0 gives inf instead of failing",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
) -> None:
    """Replay taps and print the final display value."""
    settings = _settings(strict_decimal, float_div_zero, verbose)
    try:
        result = replay(taps, settings)
    except CalculatorError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    if tape:
        console.print()
        console.print(render_tape(result))
        console.print()

    if as_json:
        typer.echo(json.dumps(result.to_dict(), indent=2))
    elif result.ok:
        typer.echo(result.display)

    if not result.ok:
        console.print(f"[red]Error:[/red] {result.error}")
        raise typer.Exit(1)


@app.command("keypad")
def cmd_keypad() -> None:
    """Show the keypad layout."""
    console.print()
    console.print(render_display(CalculatorState()))
    console.print(render_keypad())
    console.print()


@app.command("interactive")
def cmd_interactive(
    strict_decimal: Optional[bool] = typer.Option(
        None, "--strict-decimal/--loose-decimal", help="Ignore a second '.' in one number",
    ),
    float_div_zero: Optional[bool] = typer.Option(
        None, "--float-div-zero/--fatal-div-zero", help="Integer x/0 gives inf instead of failing",
    ),
    no_keypad: bool = typer.Option(False, "--no-keypad", help="Don't draw the keypad first"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
) -> None:
    """Type taps line by line; the display is redrawn after each line."""
    settings = _settings(strict_decimal, float_div_zero, verbose)
    interactive(console, settings, show_keypad=not no_keypad)


if __name__ == "__main__":
    app()
