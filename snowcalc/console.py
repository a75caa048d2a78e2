"""Menu-driven console calculator for sin, cos, arcsin and arctan.

Input is read one value per line from an iterator of lines; prompts and
results go to a text stream.
"""

from __future__ import annotations

import argparse
import os
import re
import subprocess
import sys
from collections.abc import Callable, Iterable
from typing import TextIO

from snowcalc.series import (
    degrees_to_radians,
    snow_arcsin_series,
    snow_arctan,
    snow_cos_radians,
    snow_sin_radians,
)

MENU = (
    "-------Welcome to Snow Calculator-------\n"
    "               1. sin x                 \n"
    "               2. cos x                 \n"
    "               3. arcsin x              \n"
    "               4. arctan x              \n"
    "               5. Clean screen          \n"
    "               0. to quit               \n"
    "--Input number corresponds to function--\n"
    "----------------------------------------\n"
)

_INT_PREFIX = re.compile(r"[+-]?\d+")
_FLOAT_PREFIX = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def _parse_int(line: str | None) -> int | None:
    if line is None:
        return None
    match = _INT_PREFIX.match(line.strip())
    return int(match.group()) if match else None


def _parse_float(line: str | None) -> float | None:
    if line is None:
        return None
    match = _FLOAT_PREFIX.match(line.strip())
    return float(match.group()) if match else None


def read_choice(lines: Iterable[str], out: TextIO) -> int:
    """Show the menu and read a choice; unreadable input or end of input gives 0."""
    out.write(MENU)
    choice = _parse_int(next(iter(lines), None))
    return 0 if choice is None else choice


def read_number(lines: Iterable[str], out: TextIO) -> float:
    """Prompt until a line starting with a number is read and echo it.

    Raises EOFError when the input ends first.
    """
    stream = iter(lines)
    out.write("please input a number\n")
    while True:
        line = next(stream, None)
        if line is None:
            raise EOFError("input ended before a number was read")
        value = _parse_float(line)
        if value is not None:
            break
        out.write("Wrong, you have inputed a wrong type data\n\n")
        out.write("please input again\n")
    out.write(f"The number x is: {value:g}\n")
    return value


def read_angle(lines: Iterable[str], out: TextIO) -> float:
    """Read an angle in degrees and return it in radians, reduced below 360 degrees."""
    return degrees_to_radians(read_number(lines, out))


def read_unit(lines: Iterable[str], out: TextIO) -> float:
    """Read a number and ask again while it lies outside [-1, 1].

    A repeated entry that cannot be read counts as 0.
    """
    stream = iter(lines)
    x = read_number(stream, out)
    while x > 1 or x < -1:
        out.write("Wrong input! Please input again.\n")
        value = _parse_float(next(stream, None))
        x = 0.0 if value is None else value
    return x


def _clear_screen() -> None:
    command = ["cmd", "/c", "cls"] if os.name == "nt" else ["clear"]
    try:
        subprocess.run(command, check=False)
    except OSError:
        pass


def _report(out: TextIO, result: float) -> None:
    out.write(f"Result =  {result:.5f}\n")


def run(
    lines: Iterable[str] | None = None,
    out: TextIO | None = None,
    clear: Callable[[], None] | None = None,
) -> None:
    """Run the menu loop until 0 is chosen or the input ends."""
    stream = iter(sys.stdin if lines is None else lines)
    out = sys.stdout if out is None else out
    clear = _clear_screen if clear is None else clear

    actions: dict[int, Callable[[], float]] = {
        1: lambda: snow_sin_radians(read_angle(stream, out)),
        2: lambda: snow_cos_radians(read_angle(stream, out)),
        3: lambda: snow_arcsin_series(read_unit(stream, out)),
        4: lambda: snow_arctan(read_number(stream, out)),
    }
    try:
        choice = read_choice(stream, out)
        while choice != 0:
            if choice in actions:
                _report(out, actions[choice]())
            elif choice == 5:
                clear()
            else:
                out.write("Wrong input, please input again!\n")
            choice = read_choice(stream, out)
    except EOFError:
        pass

    out.write("Thank you for using!\nPress any key to exit.\n")
    out.flush()
    next(stream, None)


def main(argv: list[str] | None = None) -> int:
    """Start the interactive calculator on standard input and output."""
    parser = argparse.ArgumentParser(
        prog="snowcalc",
        description="Menu-driven calculator for sin, cos, arcsin and arctan.",
    )
    parser.parse_args(argv)
    run(sys.stdin, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())