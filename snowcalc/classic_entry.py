"""Number entry of the early keypad: digits, a decimal point and length limits.

Digits build the integer part until the dot is pressed. After that each
digit adds ``digit * 0.1**n`` for the n-th decimal place. More than six
integer digits or six decimal places clears the entry and raises
:class:`EntryLimitError`, which carries the message the keypad shows.
"""

from __future__ import annotations

from snowcalc.keypad import (
    LENGTH_MESSAGE,
    MAX_DECIMAL_DIGITS,
    MAX_INTEGER_DIGITS,
    PRECISION_MESSAGE,
)


class EntryLimitError(ValueError):
    """Raised when an entry has too many integer digits or decimal places."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ClassicEntry:
    """The number being typed on the keypad and the digit counts behind it."""

    def __init__(self) -> None:
        self.value = 0.0
        self.dot = False
        self.integer_digits = 0
        self.decimal_digits = 0

    def press_digit(self, digit: int) -> float:
        """Add a digit to the entry and return the new value.

        Raises ValueError for anything but an integer from 0 to 9, and
        EntryLimitError, after clearing the entry, when a limit is passed.
        """
        if isinstance(digit, bool) or not isinstance(digit, int) or not 0 <= digit <= 9:
            raise ValueError(f"digit must be an integer from 0 to 9, got {digit!r}")
        if not self.dot:
            self.value = self.value * 10 + digit
            self.integer_digits += 1
        else:
            self.decimal_digits += 1
            step = float(digit)
            for _ in range(self.decimal_digits):
                step *= 0.1
            self.value += step

        if self.decimal_digits > MAX_DECIMAL_DIGITS:
            self.reset()
            raise EntryLimitError(PRECISION_MESSAGE)
        if self.integer_digits > MAX_INTEGER_DIGITS:
            self.reset()
            raise EntryLimitError(LENGTH_MESSAGE)
        return self.value

    def press_dot(self) -> None:
        """Send the following digits to the fractional part."""
        self.dot = True

    def reset(self) -> None:
        """Clear the value, the dot and both digit counts."""
        self.value = 0.0
        self.dot = False
        self.integer_digits = 0
        self.decimal_digits = 0

    def formatted(self) -> str:
        """The value with six decimal places, as the display shows it."""
        return f"{self.value:f}"