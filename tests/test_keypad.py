import pytest

from snowcalc.keypad import (
    DEGREES_LABEL,
    LENGTH_MESSAGE,
    PRECISION_MESSAGE,
    RADIANS_LABEL,
    Function,
    Keypad,
)
from snowcalc.maclaurin import fn_arctan, fn_cos, fn_sin
from snowcalc.series import snow_arcsin


class Recorder:
    def __init__(self, answer=True):
        self.answer = answer
        self.calls = 0

    def __call__(self):
        self.calls += 1
        return self.answer


def press(pad, *keys):
    for key in keys:
        if key == ".":
            pad.press_dot()
        else:
            pad.press_digit(key)


def test_digits_ignored_before_selection():
    pad = Keypad()
    pad.press_digit(5)
    assert pad.display == ""
    assert pad.value == 0.0
    assert pad.digits_enabled is False


def test_select_sets_prefix_and_locks_other_functions():
    pad = Keypad()
    pad.select(Function.SIN)
    assert pad.display == "sin"
    assert pad.enabled_functions == {Function.SIN}
    assert pad.digits_enabled is True


def test_selecting_disabled_function_is_ignored():
    pad = Keypad()
    pad.select(Function.COS)
    pad.select(Function.SIN)
    assert pad.function is Function.COS
    assert pad.display == "cos"


def test_integer_and_fraction_entry():
    pad = Keypad()
    pad.select(Function.SIN)
    press(pad, 1, 2, ".", 5)
    assert pad.value == pytest.approx(12.5)
    assert pad.display == "sin12.500000"


def test_evaluate_sin_in_degrees():
    pad = Keypad()
    pad.select(Function.SIN)
    press(pad, 3, 0)
    result = pad.evaluate()
    expected = fn_sin(True, 30)
    assert result == expected
    assert pad.display == "sin" + f"{30.0:f}" + "=" + f"{expected:f}"
    assert pad.digits_enabled is False


def test_negative_cos():
    pad = Keypad()
    pad.select(Function.COS)
    pad.press_negative()
    pad.press_negative()
    assert pad.display == "cos-"
    press(pad, 6, 0)
    assert pad.evaluate() == fn_cos(True, -60)
    assert pad.display.startswith("cos-60.000000=")


def test_arctan_truncates_entry():
    pad = Keypad()
    pad.select(Function.ARCTAN)
    press(pad, 1, ".", 5)
    assert pad.evaluate() == fn_arctan(True, 1)


def test_radian_mode():
    pad = Keypad()
    pad.toggle_mode()
    assert pad.in_degrees is False
    assert pad.mode_label == RADIANS_LABEL
    pad.select(Function.SIN)
    press(pad, 2)
    assert pad.evaluate() == fn_sin(False, 2)
    pad.toggle_mode()
    assert pad.mode_label == DEGREES_LABEL


def test_arcsin_shows_tip_and_answers_in_degrees():
    tip = Recorder()
    pad = Keypad(tip)
    pad.select(Function.ARCSIN)
    assert tip.calls == 1
    press(pad, 0, ".", 5)
    pad.press_negative()
    press(pad, 0, ".", 5)
    assert pad.evaluate() == snow_arcsin(-pad.value, True)


def test_arcsin_above_one_confirmed_resets():
    tip = Recorder(True)
    pad = Keypad(tip)
    pad.select(Function.ARCSIN)
    press(pad, 2)
    assert pad.evaluate() is None
    assert tip.calls == 2
    assert pad.display == ""
    assert pad.value == 0.0
    assert pad.enabled_functions == set(Function)
    assert pad.digits_enabled is False


def test_arcsin_above_one_cancelled_keeps_entry():
    tip = Recorder(False)
    pad = Keypad(tip)
    pad.select(Function.ARCSIN)
    press(pad, 2)
    assert pad.evaluate() is None
    assert pad.display == "arcsin2.000000"
    assert pad.value == 2.0


def test_too_many_integer_digits():
    pad = Keypad()
    pad.select(Function.SIN)
    press(pad, *([1] * 7))
    assert pad.display == LENGTH_MESSAGE
    assert pad.value == 0.0
    assert pad.digits_enabled is False
    assert pad.enabled_functions == set(Function)


def test_too_many_decimal_digits():
    pad = Keypad()
    pad.select(Function.COS)
    press(pad, ".", *([3] * 7))
    assert pad.display == PRECISION_MESSAGE
    assert pad.value == 0.0
    assert pad.digits_enabled is False


def test_six_integer_digits_accepted():
    pad = Keypad()
    pad.select(Function.SIN)
    press(pad, *([2] * 6))
    assert pad.value == 222222.0
    assert pad.display == "sin" + f"{222222.0:f}"


def test_clear_keeps_function():
    pad = Keypad()
    pad.select(Function.COS)
    pad.press_negative()
    press(pad, 4)
    pad.clear()
    assert pad.display == ""
    assert pad.value == 0.0
    assert pad.sign == 1
    assert pad.function is Function.COS


def test_back_reenables_everything_and_keeps_display():
    pad = Keypad()
    pad.select(Function.SIN)
    press(pad, 4, 5)
    pad.evaluate()
    shown = pad.display
    pad.back()
    assert pad.enabled_functions == set(Function)
    assert pad.digits_enabled is True
    assert pad.value == 0.0
    assert pad.display == shown


def test_evaluate_without_selection_uses_sin():
    pad = Keypad()
    assert pad.evaluate() == fn_sin(True, 0)
    assert pad.display.startswith("0.000000=")


@pytest.mark.parametrize("digit", [-1, 10, 2.5])
def test_invalid_digit(digit):
    pad = Keypad()
    pad.select(Function.SIN)
    with pytest.raises(ValueError):
        pad.press_digit(digit)