# snowcalc

snowcalc is a small trigonometric calculator. It computes sine, cosine,
arcsine and arctangent from power series and a fitted polynomial, not from
the `math` module. It needs nothing outside the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Console calculator

```
snowcalc
```

This shows a menu:

```
1. sin x
2. cos x
3. arcsin x
4. arctan x
5. Clean screen
0. to quit
```

Type a menu number and then a value.

- sin and cos read an angle in degrees and bring it below 360 before use.
- arcsin asks again while the value lies outside [-1, 1]. It then applies
  `snow_arcsin_series`.
- arctan reads any number and answers in radians.
- Option 5 clears the terminal, with `cls` on Windows and `clear` elsewhere.

Results are printed to five decimal places. The program stops when you
choose 0 or when the input ends.

`snowcalc.console.run(lines, out, clear)` runs the same loop. It reads from
any iterable of lines and writes to any text stream, which makes it usable
in scripts and tests.

## Series functions: `snowcalc.series`

- `snow_sin(degrees)` and `snow_cos(degrees)` take an angle in degrees.
- `snow_sin_radians(x)` and `snow_cos_radians(x)` take an angle in radians.
- The sine is a Taylor series that stops once a term falls to 1e-15 or
  below.
- The cosine is computed as `sqrt(1 - sin²)`, so it is never negative.
- `snow_arcsin(x, in_degrees=False)` uses a fitted odd polynomial on
  (-1, 1). Exactly 1 gives π/2 and any other value gives -π/2.
- `snow_arcsin_series(x)` is an older 1000-term sum. Its result is
  proportional to `x`.
- `snow_arctan(x)` gives radians from the Maclaurin series. It uses `1/x`
  outside [-1, 1].
- `degrees_to_radians(x)` and `factorial(n)` are the helpers behind these
  functions.

This module uses π = 3.1415926.

## Maclaurin functions: `snowcalc.maclaurin`

The functions are `fn_sin`, `fn_cos`, `fn_arcsin`, `fn_arctan` and
`arctan_series`.

- Each takes an `in_degrees` flag and a `precision` at which the series
  stops.
- For `fn_sin` and `fn_cos` the flag sets the input unit. For `fn_arcsin`
  and `fn_arctan` it sets the output unit.
- Results smaller in magnitude than the precision are returned as 0.
- `fn_arcsin` raises `ValueError` outside [-1, 1]. So does `arctan_series`.
- `fmod(dividend, divisor)` is the remainder function used to reduce angles.

## Keypads

`snowcalc.keypad.Keypad` and `snowcalc.classic_keypad.ClassicKeypad` hold
the state of a button calculator.

**Using a keypad**

- Choose a `Function` with `select`.
- Type with `press_digit` and `press_dot`.
- Call `evaluate`. It returns the result and sets `display` to text such as
  `sin30.000000=0.500000`.
- An entry may have at most six integer digits and six decimal places.
  Going past either limit clears the entry and puts a message on the
  display.
- The optional `tip` callable stands for the arcsin hint. It returns True to
  confirm and False to cancel.

**`Keypad`**

- It has a degree/radian mode, switched with `toggle_mode`, and a sign key,
  `press_negative`.
- sin, cos and arctan use the signed entry truncated to a whole number.
- arcsin uses the exact entry and answers in degrees.

**`ClassicKeypad`**

- sin and cos take degrees.
- arcsin and arctan answer in radians.
- Entry is handled by `snowcalc.classic_entry.ClassicEntry`. That class
  raises `EntryLimitError` when a limit is passed.

```python
from snowcalc.series import snow_sin, snow_arctan
from snowcalc.maclaurin import fn_cos
from snowcalc.keypad import Function, Keypad

snow_sin(30)                 # about 0.5
snow_arctan(1.0)             # about 0.785398
fn_cos(True, 60, 1e-7)       # about 0.5

pad = Keypad()
pad.select(Function.SIN)
pad.press_digit(3)
pad.press_digit(0)
pad.evaluate()               # pad.display == "sin30.000000=0.500000"
```

## What it does not do

snowcalc has no graphical window. The keypad classes model the buttons and
the display text only, and nothing draws them. The console menu is the only
interactive front end.