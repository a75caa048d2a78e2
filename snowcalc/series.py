"""Trigonometric functions computed from Taylor series and a fitted polynomial.

All conversions between degrees and radians use the truncated constant
``PI = 3.1415926``, so results differ from :mod:`math` in the eighth decimal.
"""

from __future__ import annotations

import math

PI = 3.1415926

_SIN_TOLERANCE = 1e-15
_ARCTAN_TOLERANCE = 1e-7
_ARCSIN_SERIES_TERMS = 1000

# Coefficients of the odd polynomial approximating arcsin on (-1, 1),
# highest power of x*x first.
_ARCSIN_COEFFICIENTS = (
    355.8344664968055,
    -1527.866163211568,
    2753.832624036205,
    -2703.664106042975,
    1570.005944165283,
    -547.8511412592482,
    111.6022805454461,
    -12.131229199997044,
    0.767998895934955,
    0.991408990431597,
)


def factorial(n: float) -> float:
    """Return n * (n - 1) * ... down to the first factor not above 1.

    Values of ``n`` not above 1 are returned unchanged, so ``factorial(0)`` is 0.
    """
    if n <= 1:
        return n
    result = 1.0
    while n > 1:
        result *= n
        n -= 1
    return result * n


def degrees_to_radians(x: float) -> float:
    """Bring an angle below 360 degrees by whole turns and convert it to radians."""
    while x >= 360.0:
        x -= 360.0
    return x * PI / 180.0


def snow_sin_radians(x: float) -> float:
    """Sine of ``x`` radians, summing the Taylor series until a term drops below 1e-15."""
    total = x
    power = x
    denominator = 1.0
    sign = 1
    i = 1
    while True:
        denominator = denominator * (i + 1) * (i + 2)
        power *= x * x
        sign = -sign
        term = power / denominator * sign
        total += term
        i += 2
        if not abs(term) > _SIN_TOLERANCE:
            return total


def _sqrt_or_nan(value: float) -> float:
    return math.sqrt(value) if value >= 0 else math.nan


def snow_cos_radians(x: float) -> float:
    """Cosine of ``x`` radians as sqrt(1 - sin^2); the result is never negative."""
    s = snow_sin_radians(x)
    return _sqrt_or_nan(1 - s * s)


def snow_sin(degrees: float) -> float:
    """Sine of an angle given in degrees."""
    return snow_sin_radians(degrees_to_radians(degrees))


def snow_cos(degrees: float) -> float:
    """Cosine of an angle in degrees as sqrt(1 - sin^2); never negative."""
    s = snow_sin(degrees)
    return _sqrt_or_nan(1 - s * s)


def snow_arcsin(x: float, in_degrees: bool = False) -> float:
    """Arcsine by a fitted odd polynomial.

    Inside (-1, 1) the polynomial is used; exactly 1 gives PI/2 and any other
    value gives -PI/2. With ``in_degrees`` the result is converted to degrees.
    """
    if -1 < x < 1:
        square = x * x
        acc = 0.0
        for coefficient in _ARCSIN_COEFFICIENTS:
            acc = acc * square + coefficient
        y = acc * x
    elif x == 1:
        y = PI / 2
    else:
        y = -(PI / 2)
    if in_degrees:
        y = y * 180 / PI
    return y


def snow_arcsin_series(x: float) -> float:
    """Sum of the early console series for arcsin over 1000 terms.

    Each term multiplies ``x`` itself (not a power of it), so the result is
    proportional to ``x``.
    """
    result = x
    ratio = 1.0 / 2.0
    for i in range(_ARCSIN_SERIES_TERMS):
        if i:
            for k in (2 * i - 1, 2 * i):
                ratio *= (2 * k + 1) / (2 * k + 2)
        result += ratio / (2 * i + 3) * x
    return result


def _arctan_sum(e: float, square: float, r: float, i: int) -> tuple[float, float, int]:
    while abs(e / i) > _ARCTAN_TOLERANCE:
        f = e / i
        r = r + f if i % 4 == 1 else r - f
        e *= square
        i += 2
    return e, r, i


def snow_arctan(x: float) -> float:
    """Arctangent in radians by the Maclaurin series, using 1/x outside [-1, 1]."""
    e = x
    r = 0.0
    i = 1
    if -1 <= e <= 1:
        e, r, i = _arctan_sum(e, x * x, r, i)
    if e <= -1 or e >= 1:
        e = 1 / e
        e, r, i = _arctan_sum(e, e * e, r, i)
        r = PI / 2 - r if e > 0 else -PI / 2 - r
    return r