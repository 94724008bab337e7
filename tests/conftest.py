"""Pytest configuration to make the src/ packages importable.

Adds ``src`` to ``sys.path`` so ``import core`` and ``import app`` work when
tests are run from the repository root without installing the project.
"""

import os
import sys

import pytest

SRC_DIR = os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "src")

if SRC_DIR not in sys.path:
    sys.path.insert(0, SRC_DIR)

from core.calculator import Calculator  # noqa: E402
from core.operations import UnaryOperation  # noqa: E402

UNARY_KEYS = {
    "√": UnaryOperation.SQUARE_ROOT,
    "1/x": UnaryOperation.RECIPROCAL,
    "%": UnaryOperation.PERCENT,
    "+/-": UnaryOperation.NEGATE,
}


@pytest.fixture
def calc():
    """Fresh calculator in its power-on state."""
    return Calculator()


@pytest.fixture
def press(calc):
    """
    Drive ``calc`` with button labels, e.g. ``press("12", "+", "3", "=")``.

    A label made only of digits and "." is typed one character at a time.
    """
    def _press(*keys):
        for key in keys:
            if key in UNARY_KEYS:
                calc.apply_unary_operation(UNARY_KEYS[key])
            elif key == "=":
                calc.evaluate()
            elif key == "CE":
                calc.clear_entry()
            elif key == "C":
                calc.clear_all()
            elif key == "←":
                calc.backspace()
            elif all(char.isdigit() or char == "." for char in key):
                for char in key:
                    if char == ".":
                        calc.input_decimal_point()
                    else:
                        calc.input_digit(int(char))
            else:
                calc.apply_binary_operator(key)
        return calc
    return _press
