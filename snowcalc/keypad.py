"""Button-driven trigonometric keypad with degree/radian modes and a sign key.

The keypad keeps the text an edit box would show and which buttons are
usable. Presses on buttons that are disabled are ignored, as they are in a
dialog where those buttons are greyed out.
"""

from __future__ import annotations

import enum
from collections.abc import Callable

from snowcalc.maclaurin import fn_arctan, fn_cos, fn_sin
from snowcalc.series import snow_arcsin

PRECISION_MESSAGE = "输入最小精度为0.000001，请重新输入！"
LENGTH_MESSAGE = "输入最大为6位，请重新输入！"
DEGREES_LABEL = "角度"
RADIANS_LABEL = "弧度"

MAX_INTEGER_DIGITS = 6
MAX_DECIMAL_DIGITS = 6


class Function(enum.Enum):
    """The functions the keypad can evaluate, with their display prefix."""

    SIN = "sin"
    COS = "cos"
    ARCSIN = "arcsin"
    ARCTAN = "arctan"


def _fmt(value: float) -> str:
    return f"{value:f}"


class Keypad:
    """State of the calculator keypad: the entered number, sign, mode and display.

    ``tip`` is called whenever the arcsin hint is shown; it returns True when
    the hint is confirmed and False when it is cancelled.
    """

    def __init__(self, tip: Callable[[], bool] | None = None) -> None:
        self.tip: Callable[[], bool] = tip if tip is not None else (lambda: True)
        self.function = Function.SIN
        self.value = 0.0
        self.output = 0.0
        self.sign = 1
        self.in_degrees = True
        self.prefix = ""
        self.display = ""
        self.digits_enabled = False
        self.enabled_functions: set[Function] = set(Function)
        self._dot = False
        self._decimal_digits = 0
        self._integer_digits = 0

    @property
    def mode_label(self) -> str:
        """Caption of the mode button."""
        return DEGREES_LABEL if self.in_degrees else RADIANS_LABEL

    def _start_entry(self) -> None:
        self.digits_enabled = True
        self._dot = False
        self._decimal_digits = 0
        self._integer_digits = 0
        self.sign = 1
        self.value = 0.0

    def select(self, function: Function) -> None:
        """Choose the function to evaluate and start a fresh entry."""
        if function not in self.enabled_functions:
            return
        self._start_entry()
        self.prefix = function.value
        self.enabled_functions = {f for f in self.enabled_functions if f is function}
        self.function = function
        self.display = self.prefix
        if function is Function.ARCSIN:
            self.tip()

    def press_digit(self, digit: int) -> None:
        """Append a digit to the integer part, or to the fraction after the dot."""
        if not isinstance(digit, int) or not 0 <= digit <= 9:
            raise ValueError(f"digit must be an integer from 0 to 9, got {digit!r}")
        if not self.digits_enabled:
            return
        if not self._dot:
            self.value = self.value * 10 + digit
            self._integer_digits += 1
        else:
            self._decimal_digits += 1
            step = float(digit)
            for _ in range(self._decimal_digits):
                step *= 0.1
            self.value += step
        self.display = self.prefix + _fmt(self.value)
        self._check_limits()

    def _reject(self, message: str) -> None:
        self.clear()
        self.back()
        self.digits_enabled = False
        self.display = message

    def _check_limits(self) -> None:
        if self._decimal_digits > MAX_DECIMAL_DIGITS:
            self._reject(PRECISION_MESSAGE)
        if self._integer_digits > MAX_INTEGER_DIGITS:
            self._reject(LENGTH_MESSAGE)

    def press_dot(self) -> None:
        """Switch entry to the fractional part."""
        if self.digits_enabled:
            self._dot = True

    def press_negative(self) -> None:
        """Make the entry negative, restarting the number at zero."""
        if not self.digits_enabled:
            return
        self.sign = -1
        self.value = 0.0
        if "-" not in self.prefix:
            self.prefix += "-"
        self.display = self.prefix

    def back(self) -> None:
        """Make every function selectable again and restart the entry."""
        self.enabled_functions = set(Function)
        self._start_entry()

    def clear(self) -> None:
        """Clear the display and the entered number."""
        self.prefix = ""
        self.value = 0.0
        self._dot = False
        self._decimal_digits = 0
        self._integer_digits = 0
        self.sign = 1
        self.display = ""

    def toggle_mode(self) -> None:
        """Switch between degrees and radians."""
        self.in_degrees = not self.in_degrees

    def _show(self, output: float) -> float:
        self.output = output
        self.display = self.prefix + _fmt(self.value) + "=" + _fmt(output)
        self.digits_enabled = False
        return output

    def evaluate(self) -> float | None:
        """Evaluate the selected function and show the result.

        Sine, cosine and arctangent take the signed entry truncated to a whole
        number. Arcsine takes the exact signed entry and answers in degrees;
        an entry above 1 shows the hint instead and returns None.
        """
        whole = int(self.value * self.sign)
        if self.function is Function.SIN:
            return self._show(fn_sin(self.in_degrees, whole))
        if self.function is Function.COS:
            return self._show(fn_cos(self.in_degrees, whole))
        if self.function is Function.ARCTAN:
            return self._show(fn_arctan(self.in_degrees, whole))
        if self.value > 1:
            if not self.tip():
                return None
            self.clear()
            self.back()
            self.digits_enabled = False
            return None
        return self._show(snow_arcsin(self.value * self.sign, True))