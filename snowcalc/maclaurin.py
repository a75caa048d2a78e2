"""Trigonometric functions summed from their Maclaurin series to a given precision.

Each function takes a flag that chooses degrees (``True``) or radians
(``False``). Results whose magnitude is below the precision are returned as
exactly zero, so that no negative zero is shown.
"""

from __future__ import annotations

# The sine and cosine work with the shorter constant, the arcsine with the
# longer one and the arctangent with its own copy of the shorter one.
PI = 3.1415926
PI_LONG = 3.1415926535898

SIN_PRECISION = 1e-7
COS_PRECISION = 1e-7
ARCSIN_PRECISION = 1e-9
ARCTAN_PRECISION = 1e-5


def fmod(dividend: float, divisor: float) -> float:
    """Floating remainder with a truncated quotient.

    A zero divisor gives 0. When the dividend and divisor differ in sign the
    divisor is subtracted once more from the truncated remainder.
    """
    if divisor == 0.0:
        return 0.0
    quotient = float(int(dividend / divisor))
    remainder = dividend - quotient * divisor
    if (dividend < 0.0) != (divisor < 0.0):
        remainder -= divisor
    return remainder


def _reduce(in_degrees: bool, value: float) -> float:
    if in_degrees:
        return fmod(value, 360) / 180 * PI
    return fmod(value, 2 * PI)


def _snap_zero(value: float, precision: float) -> float:
    return 0.0 if -precision < value < precision else value


def _power_series(x: float, start: float, sign: float, keep_odd: bool, precision: float) -> float:
    """Sum x**i / i! over the odd or even powers, flipping the sign each time."""
    total = start
    numerator = 1.0
    denominator = 1.0
    i = 1
    current = 1.0
    while abs(current) >= precision:
        numerator *= x
        denominator *= i
        if (i % 2 == 1) == keep_odd:
            sign = -sign
            total += sign * numerator / denominator
        i += 1
        current = numerator / denominator
    return total


def fn_sin(in_degrees: bool, value: float, precision: float = SIN_PRECISION) -> float:
    """Sine of ``value`` in degrees or radians."""
    x = _reduce(in_degrees, value)
    return _snap_zero(_power_series(x, 0.0, -1.0, True, precision), precision)


def fn_cos(in_degrees: bool, value: float, precision: float = COS_PRECISION) -> float:
    """Cosine of ``value`` in degrees or radians."""
    x = _reduce(in_degrees, value)
    return _snap_zero(_power_series(x, 1.0, 1.0, False, precision), precision)


def fn_arcsin(in_degrees: bool, value: float, precision: float = ARCSIN_PRECISION) -> float:
    """Arcsine of ``value``; the result is in degrees when ``in_degrees`` is set.

    Raises ValueError outside [-1, 1], where the series does not converge.
    """
    if not -1.0 <= value <= 1.0:
        raise ValueError(f"arcsin is defined only on [-1, 1], got {value!r}")
    total = value
    square = value * value
    term = value
    m = 1
    while abs(term) >= precision:
        tmp = 2.0 * m
        term *= (1 + 1.0 / tmp - 4.0 / (tmp + 1)) * square
        total += term
        m += 1
    total = _snap_zero(total, precision)
    if in_degrees:
        total = total * 180 / PI_LONG
    return total


def arctan_series(x: float, precision: float) -> float:
    """Arctangent in radians of ``x`` in [-1, 1] by its Maclaurin series.

    The term that first falls within the precision is still added.
    Raises ValueError outside [-1, 1], where the series does not converge.
    """
    if not -1.0 <= x <= 1.0:
        raise ValueError(f"the arctan series needs x in [-1, 1], got {x!r}")
    square = x * x
    e = x
    r = 0.0
    i = 1
    f = e / i
    while abs(f) > precision:
        f = e / i
        r = r + f if i % 4 == 1 else r - f
        e *= square
        i += 2
    return r


def fn_arctan(in_degrees: bool, value: float, precision: float = ARCTAN_PRECISION) -> float:
    """Arctangent of ``value``; the result is in degrees when ``in_degrees`` is set."""
    if -1.0 <= value <= 1.0:
        result = arctan_series(value, precision)
    elif value > 0:
        result = PI / 2 - arctan_series(1 / value, precision)
    else:
        result = -PI / 2 - arctan_series(1 / value, precision)
    if in_degrees:
        result = result * 180 / PI
    return result