"""Keypad layout, colours and label lookup.

The layout mirrors a phone calculator: five rows, with a double-width "0"
key on the bottom row.
"""

from __future__ import annotations

from typing import Iterable, Union

from tapcalc.errors import UnknownButtonError
from tapcalc.models import Button, ButtonType

LAYOUT: list[list[Button]] = [
    [Button.CLEAR, Button.NEGATIVE, Button.PERCENT, Button.DIVIDE],
    [Button.SEVEN, Button.EIGHT, Button.NINE, Button.MULTIPLY],
    [Button.FOUR, Button.FIVE, Button.SIX, Button.SUBTRACT],
    [Button.ONE, Button.TWO, Button.THREE, Button.ADD],
    [Button.ZERO, Button.DECIMAL, Button.EQUAL],
]

# Rich colour names
ORANGE = "dark_orange"
LIGHT_GRAY = "grey70"
DARK_GRAY = "grey23"

# Alternate spellings accepted on the command line
_ALIASES: dict[str, Button] = {
    "×": Button.MULTIPLY,
    "*": Button.MULTIPLY,
    "X": Button.MULTIPLY,
    "÷": Button.DIVIDE,
    "+/-": Button.NEGATIVE,
    "±": Button.NEGATIVE,
    "neg": Button.NEGATIVE,
    "ac": Button.CLEAR,
    "c": Button.CLEAR,
    "C": Button.CLEAR,
}

_LONGEST_LABEL = max(len(label) for label in [*(b.value for b in Button), *_ALIASES])


def button_color(button: Button) -> str:
    """Background colour for a key."""
    if button.type == ButtonType.OPERATOR:
        return ORANGE
    if button in (Button.CLEAR, Button.NEGATIVE, Button.PERCENT):
        return LIGHT_GRAY
    return DARK_GRAY


def button_span(button: Button) -> int:
    """Number of grid columns a key occupies."""
    return 2 if button == Button.ZERO else 1


def parse_button(label: str) -> Button:
    """Look up a button by its label or an accepted alias.

    Raises:
        UnknownButtonError: if nothing matches.
    """
    try:
        return Button(label)
    except ValueError:
        pass
    alias = _ALIASES.get(label) or _ALIASES.get(label.lower())
    if alias is None:
        raise UnknownButtonError(label)
    return alias


def _split_token(token: str) -> list[Button]:
    """Resolve one token, matching the longest label at each position.

    "5-/+" reads as 5 then negate, "12+3=AC" ends with clear. A run that
    spells a multi-character label wins over its single characters, so
    "+/-" is negate rather than add, divide, subtract.
    """
    try:
        return [parse_button(token)]
    except UnknownButtonError:
        if len(token) == 1:
            raise

    buttons: list[Button] = []
    i = 0
    while i < len(token):
        for width in range(min(_LONGEST_LABEL, len(token) - i), 0, -1):
            try:
                buttons.append(parse_button(token[i:i + width]))
            except UnknownButtonError:
                if width == 1:
                    raise
                continue
            i += width
            break
    return buttons


def parse_taps(taps: Union[str, Iterable[str]]) -> list[Button]:
    """Turn tap text into buttons.

    Accepts a string or a list of tokens. Tokens are whitespace-separated
    labels; a token that is not a label itself is split into the longest
    labels it spells, so "12+3=" and "1 2 + 3 =" are the same sequence.

    Raises:
        UnknownButtonError: on any character with no matching button.
    """
    if isinstance(taps, str):
        taps = taps.split()
    buttons: list[Button] = []
    for token in taps:
        buttons.extend(_split_token(token))
    return buttons
