"""Early button-driven keypad for sin, cos, arcsin and arctan.

Angles for sine and cosine are entered in degrees; arcsine and arctangent
answer in radians. The keypad keeps the text an edit box would show and which
buttons are usable. Presses on disabled buttons are ignored, as they are in a
dialog where those buttons are greyed out.
"""

from __future__ import annotations

from collections.abc import Callable

from snowcalc.classic_entry import ClassicEntry, EntryLimitError
from snowcalc.keypad import Function
from snowcalc.series import snow_arcsin, snow_arctan, snow_cos, snow_sin

_EVALUATORS: dict[Function, Callable[[float], float]] = {
    Function.SIN: snow_sin,
    Function.COS: snow_cos,
    Function.ARCTAN: snow_arctan,
}


def _fmt(value: float) -> str:
    return f"{value:f}"


class ClassicKeypad:
    """State of the early keypad: the selected function, the entry and the display.

    ``tip`` is called whenever the arcsin hint is shown; it returns True when
    the hint is confirmed and False when it is cancelled.
    """

    def __init__(self, tip: Callable[[], bool] | None = None) -> None:
        self.tip: Callable[[], bool] = tip if tip is not None else (lambda: True)
        self.function: Function | None = None
        self.entry = ClassicEntry()
        self.output = 0.0
        self.prefix = ""
        self.display = ""
        self.digits_enabled = False
        self.enabled_functions: set[Function] = set(Function)

    @property
    def value(self) -> float:
        """The number entered so far."""
        return self.entry.value

    def select(self, function: Function) -> None:
        """Choose the function to evaluate.

        Choosing the function already shown restarts the number at zero; the
        count of integer digits typed so far is kept.
        """
        if function not in self.enabled_functions:
            return
        self.digits_enabled = True
        self.entry.dot = False
        self.entry.decimal_digits = 0
        if self.prefix == function.value:
            self.entry.value = 0.0
        self.prefix = function.value
        self.enabled_functions = {function}
        self.function = function
        self.display = self.prefix
        if function is Function.ARCSIN:
            self.tip()

    def press_digit(self, digit: int) -> None:
        """Append a digit; passing a length limit clears everything and shows why."""
        if isinstance(digit, bool) or not isinstance(digit, int) or not 0 <= digit <= 9:
            raise ValueError(f"digit must be an integer from 0 to 9, got {digit!r}")
        if not self.digits_enabled:
            return
        try:
            self.entry.press_digit(digit)
        except EntryLimitError as error:
            self.clear()
            self.back()
            self.display = error.message
            return
        self.display = self.prefix + self.entry.formatted()

    def press_dot(self) -> None:
        """Send the following digits to the fractional part."""
        if self.digits_enabled:
            self.entry.press_dot()

    def back(self) -> None:
        """Make every function selectable again, disable the digits and zero the number."""
        self.enabled_functions = set(Function)
        self.digits_enabled = False
        self.entry.value = 0.0
        self.entry.integer_digits = 0
        self.entry.decimal_digits = 0

    def clear(self) -> None:
        """Clear the display and the whole entry."""
        self.prefix = ""
        self.entry.reset()
        self.display = ""

    def evaluate(self) -> float | None:
        """Evaluate the selected function on the entry and show the result.

        The digit counts and the dot are reset first; the number itself is kept.
        An arcsin entry outside [-1, 1] shows the hint instead and returns None.
        """
        self.entry.dot = False
        self.entry.decimal_digits = 0
        self.entry.integer_digits = 0
        if self.function is None:
            return None
        x = self.entry.value
        if self.function is Function.ARCSIN:
            if x < -1 or x > 1:
                if self.tip():
                    self.clear()
                    self.back()
                return None
            output = snow_arcsin(x)
        else:
            output = _EVALUATORS[self.function](x)
        self.output = output
        self.display = self.prefix + _fmt(x) + "=" + _fmt(output)
        return output