"""tapcalc — four-function tap calculator.

Feeds button taps (digits, + - x /, =, AC, ., %, -/+) through a small
accumulator and shows the running display value, the way a phone
calculator does. No precedence and no chaining: one pending operation at a
time.

Usage:
    python -m tapcalc tap 12+3=            # Replay taps, print the display
    python -m tapcalc tap 2.5 + 3 = --tape  # Also show every step
    python -m tapcalc keypad                # Show the keypad
    python -m tapcalc interactive           # Type taps line by line
"""
