import sys

import pytest


@pytest.fixture
def low_digit_limit():
    """Lower the int/str conversion limit to its minimum (640 digits)."""
    if not hasattr(sys, "set_int_max_str_digits"):
        pytest.skip("interpreter has no int/str digit limit")
    old = sys.get_int_max_str_digits()
    sys.set_int_max_str_digits(640)
    yield 640
    sys.set_int_max_str_digits(old)
