"""Tests for button lookup, tap parsing and keypad layout."""

import pytest

from tapcalc.errors import UnknownButtonError
from tapcalc.keypad import (
    DARK_GRAY,
    LAYOUT,
    LIGHT_GRAY,
    ORANGE,
    button_color,
    button_span,
    parse_button,
    parse_taps,
)
from tapcalc.models import Button, ButtonType, Operation


# --- Button metadata ---

def test_button_types():
    assert Button.SEVEN.type == ButtonType.NUMBER
    assert Button.ADD.type == ButtonType.OPERATOR
    assert Button.EQUAL.type == ButtonType.OPERATOR
    assert Button.DECIMAL.type == ButtonType.DECIMAL
    assert Button.NEGATIVE.type == ButtonType.NEGATIVE
    assert Button.PERCENT.type == ButtonType.PERCENT
    assert Button.CLEAR.type == ButtonType.CLEAR


def test_button_operations():
    assert Button.MULTIPLY.operation == Operation.MULTIPLY
    assert Button.EQUAL.operation is None
    assert Button.FIVE.operation is None


# --- Label lookup ---

@pytest.mark.parametrize("label,expected", [
    ("7", Button.SEVEN),
    ("x", Button.MULTIPLY),
    ("×", Button.MULTIPLY),
    ("*", Button.MULTIPLY),
    ("÷", Button.DIVIDE),
    ("AC", Button.CLEAR),
    ("ac", Button.CLEAR),
    ("c", Button.CLEAR),
    ("-/+", Button.NEGATIVE),
    ("+/-", Button.NEGATIVE),
    ("neg", Button.NEGATIVE),
    ("%", Button.PERCENT),
])
def test_parse_button(label, expected):
    assert parse_button(label) == expected


def test_parse_button_unknown():
    with pytest.raises(UnknownButtonError):
        parse_button("?")


def test_unknown_button_is_value_error():
    with pytest.raises(ValueError):
        parse_button("sqrt")


# --- Tap strings ---

def test_parse_taps_compact_and_spaced_match():
    assert parse_taps("12+3=") == parse_taps("1 2 + 3 =")


def test_parse_taps_compact():
    assert parse_taps("12+3=") == [Button.ONE, Button.TWO, Button.ADD, Button.THREE, Button.EQUAL]


def test_parse_taps_keeps_multichar_labels():
    assert parse_taps("5 -/+ AC") == [Button.FIVE, Button.NEGATIVE, Button.CLEAR]


def test_parse_taps_finds_labels_inside_compact_token():
    assert parse_taps("5-/+") == [Button.FIVE, Button.NEGATIVE]
    assert parse_taps("12+3=AC") == [
        Button.ONE, Button.TWO, Button.ADD, Button.THREE, Button.EQUAL, Button.CLEAR,
    ]


def test_parse_taps_prefers_longest_alias():
    assert parse_taps("7+/-") == [Button.SEVEN, Button.NEGATIVE]
    assert parse_taps("2neg") == [Button.TWO, Button.NEGATIVE]
    assert parse_taps("8ac") == [Button.EIGHT, Button.CLEAR]


def test_parse_taps_single_operators_still_split():
    assert parse_taps("6-2/") == [Button.SIX, Button.SUBTRACT, Button.TWO, Button.DIVIDE]


def test_parse_taps_accepts_token_list():
    assert parse_taps(["2.5", "x", "4"]) == [
        Button.TWO, Button.DECIMAL, Button.FIVE, Button.MULTIPLY, Button.FOUR,
    ]


def test_parse_taps_empty():
    assert parse_taps("") == []


def test_parse_taps_unknown_character():
    with pytest.raises(UnknownButtonError):
        parse_taps("1?")


# --- Layout ---

def test_layout_covers_every_button_once():
    keys = [b for row in LAYOUT for b in row]
    assert len(keys) == len(set(keys)) == len(Button)


def test_layout_shape():
    assert [len(row) for row in LAYOUT] == [4, 4, 4, 4, 3]
    assert LAYOUT[4][0] == Button.ZERO
    assert button_span(Button.ZERO) == 2
    assert button_span(Button.ONE) == 1


def test_button_colors():
    assert button_color(Button.EQUAL) == ORANGE
    assert button_color(Button.DIVIDE) == ORANGE
    assert button_color(Button.CLEAR) == LIGHT_GRAY
    assert button_color(Button.PERCENT) == LIGHT_GRAY
    assert button_color(Button.SEVEN) == DARK_GRAY
    assert button_color(Button.DECIMAL) == DARK_GRAY
