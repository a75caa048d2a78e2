import math

import pytest

from snowcalc.maclaurin import (
    arctan_series,
    fmod,
    fn_arcsin,
    fn_arctan,
    fn_cos,
    fn_sin,
)


def test_fmod_zero_divisor_gives_zero():
    assert fmod(12.5, 0) == 0.0


@pytest.mark.parametrize("dividend,divisor", [(7.5, 2.0), (725.0, 360.0), (1.0, 6.28)])
def test_fmod_same_sign_matches_math(dividend, divisor):
    assert fmod(dividend, divisor) == pytest.approx(math.fmod(dividend, divisor))


def test_fmod_mixed_sign_subtracts_divisor_again():
    assert fmod(-0.5, 360) == pytest.approx(math.fmod(-0.5, 360) - 360)


@pytest.mark.parametrize("angle", [10, 30, 45, 100, 200, 300, 719])
def test_sin_degrees_matches_math(angle):
    assert fn_sin(True, angle) == pytest.approx(math.sin(math.radians(angle)), abs=1e-6)


@pytest.mark.parametrize("x", [0.3, 1.0, 2.5, -1.0, 5.0])
def test_sin_radians_matches_math(x):
    assert fn_sin(False, x) == pytest.approx(math.sin(x), abs=1e-6)


def test_sin_snaps_small_results_to_zero():
    assert fn_sin(True, 180) == 0.0
    assert fn_sin(True, 0) == 0.0


def test_sin_is_periodic_in_degrees():
    assert fn_sin(True, 400) == pytest.approx(fn_sin(True, 40), abs=1e-9)


@pytest.mark.parametrize("angle", [0, 30, 60, 120, 250, 359])
def test_cos_degrees_matches_math(angle):
    assert fn_cos(True, angle) == pytest.approx(math.cos(math.radians(angle)), abs=1e-6)


def test_cos_at_zero_and_right_angle():
    assert fn_cos(False, 0) == 1.0
    assert fn_cos(True, 90) == 0.0


def test_cos_radians_matches_math():
    assert fn_cos(False, 2.0) == pytest.approx(math.cos(2.0), abs=1e-6)


def test_pythagorean_identity():
    for angle in (15, 75, 135, 222):
        s = fn_sin(True, angle)
        c = fn_cos(True, angle)
        assert s * s + c * c == pytest.approx(1.0, abs=1e-6)


@pytest.mark.parametrize("x", [0.0, 0.25, 0.5, -0.7])
def test_arcsin_radians_matches_math(x):
    assert fn_arcsin(False, x) == pytest.approx(math.asin(x), abs=1e-7)


def test_arcsin_degrees_matches_math():
    assert fn_arcsin(True, 0.5) == pytest.approx(math.degrees(math.asin(0.5)), abs=1e-6)


def test_arcsin_is_odd():
    assert fn_arcsin(False, -0.3) == pytest.approx(-fn_arcsin(False, 0.3))


def test_arcsin_outside_domain_raises():
    with pytest.raises(ValueError):
        fn_arcsin(False, 2.0)


@pytest.mark.parametrize("x", [0.1, 0.5, -0.8])
def test_arctan_series_matches_math(x):
    assert arctan_series(x, 1e-10) == pytest.approx(math.atan(x), abs=1e-9)


def test_arctan_series_rejects_values_outside_unit_interval():
    with pytest.raises(ValueError):
        arctan_series(2.0, 1e-5)


def test_arctan_series_tiny_input_returns_zero():
    assert arctan_series(1e-9, 1e-5) == 0.0


@pytest.mark.parametrize("x", [0.5, 3.0, 10.0, -4.0])
def test_arctan_radians_matches_math(x):
    assert fn_arctan(False, x) == pytest.approx(math.atan(x), abs=1e-4)


def test_arctan_degrees_matches_math():
    assert fn_arctan(True, 1.0) == pytest.approx(math.degrees(math.atan(1.0)), abs=1e-3)


def test_arctan_is_odd_outside_unit_interval():
    assert fn_arctan(False, -10.0) == pytest.approx(-fn_arctan(False, 10.0))


def test_arctan_smaller_precision_is_closer():
    coarse = abs(fn_arctan(False, 0.9, 1e-2) - math.atan(0.9))
    fine = abs(fn_arctan(False, 0.9, 1e-8) - math.atan(0.9))
    assert fine < coarse