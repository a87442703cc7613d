"""Everyday small computations: averages, conversions, bills, grades and character tests."""

from __future__ import annotations

import argparse
import sys
from enum import Enum
from typing import Iterable, Sequence


class CharKind(Enum):
    """What kind of character a single character is."""

    ALPHABET = "Alphabet"
    NUMBER = "number"
    SYMBOL = "symbol"


_VOWELS = frozenset("aeiouAEIOU")


def average(marks: Iterable[float]) -> float:
    """Return the arithmetic mean of the given marks."""
    values = list(marks)
    if not values:
        raise ValueError("cannot average an empty collection of marks")
    return sum(values) / len(values)


def celsius_to_fahrenheit(celsius: float) -> float:
    """Convert a temperature from degrees Celsius to degrees Fahrenheit."""
    return 9 / 5 * celsius + 32


def _single_char(ch: str) -> str:
    if len(ch) != 1:
        raise ValueError(f"expected a single character, got {ch!r}")
    return ch


def classify_character(ch: str) -> CharKind:
    """Classify one character as an alphabet letter, a digit or a symbol.

    Codes 96 to 122 and 65 to 90 count as alphabet, so the backtick does too.
    """
    code = ord(_single_char(ch))
    if 96 <= code <= 122 or 65 <= code <= 90:
        return CharKind.ALPHABET
    if 48 <= code <= 57:
        return CharKind.NUMBER
    return CharKind.SYMBOL


def electricity_bill(units: float) -> float:
    """Return the bill amount for the consumed units under the tiered tariff.

    The first 100 units cost 2 each, the next 100 cost 3, the next 100 cost 4
    and everything above 300 costs 5.
    """
    if units < 0:
        raise ValueError("consumed units cannot be negative")
    if units <= 100:
        return units * 2
    if units <= 200:
        return (units - 100) * 3 + 100 * 2
    if units <= 300:
        return (units - 200) * 4 + 100 * 3 + 100 * 2
    return (units - 300) * 5 + 100 * 4 + 100 * 3 + 100 * 2


def find_positions(values: Sequence[int], target: int) -> list[int]:
    """Return the 1-based positions at which target occurs in values."""
    return [position for position, value in enumerate(values, start=1) if value == target]


def is_even(number: int) -> bool:
    """Return True if the number is even."""
    return number % 2 == 0


def grade(marks: int) -> str:
    """Return the letter grade for a percentage mark; "F" means a fail."""
    if marks >= 90:
        return "A+"
    if marks >= 80:
        return "A"
    if marks >= 75:
        return "B+"
    if marks >= 50:
        return "B"
    if marks >= 33:
        return "C"
    return "F"


def largest_of_three(first: int, second: int, third: int) -> int:
    """Return the value the strict comparison chain selects as largest.

    The first value wins only if it is strictly greater than both others, the
    second likewise; in every other case the third value is returned.
    """
    if first > second and first > third:
        return first
    if second > first and second > third:
        return second
    return third


def is_vowel(ch: str) -> bool:
    """Return True if the single character is an English vowel of either case."""
    return _single_char(ch) in _VOWELS


def greeting() -> str:
    """Return the classic greeting."""
    return "Hello World!"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="drills-basics", description=__doc__)
    commands = parser.add_subparsers(dest="command", required=True)

    commands.add_parser("hello", help="print a greeting")

    avg = commands.add_parser("average", help="average of student marks")
    avg.add_argument("marks", nargs="+", type=float)

    cel = commands.add_parser("celsius", help="convert Celsius to Fahrenheit")
    cel.add_argument("value", type=float)

    char = commands.add_parser("char", help="alphabet, number or symbol")
    char.add_argument("ch")

    bill = commands.add_parser("bill", help="electricity bill for consumed units")
    bill.add_argument("units", type=float)

    search = commands.add_parser("search", help="find a number in a list and sort it")
    search.add_argument("target", type=int)
    search.add_argument("values", nargs="+", type=int)

    parity = commands.add_parser("parity", help="odd or even")
    parity.add_argument("number", type=int)

    grd = commands.add_parser("grade", help="grade for a percentage mark")
    grd.add_argument("marks", type=int)

    largest = commands.add_parser("largest", help="largest of three numbers")
    largest.add_argument("numbers", nargs=3, type=int)

    vowel = commands.add_parser("vowel", help="vowel or consonant")
    vowel.add_argument("ch")
    return parser


def _run(args: argparse.Namespace) -> None:
    command = args.command
    if command == "hello":
        print(greeting())
    elif command == "average":
        print(f"Average of {len(args.marks)} students = {average(args.marks):.2f}")
    elif command == "celsius":
        fahrenheit = celsius_to_fahrenheit(args.value)
        print(f"{args.value:.2f} Celsius = {fahrenheit:.2f} Fahrenheit.")
    elif command == "char":
        print(f"{args.ch} is {classify_character(args.ch).value}.")
    elif command == "bill":
        print(f"Your Bill = {args.units:.2f} units")
        print(f"Your Bill Amount = Rs.{electricity_bill(args.units):.2f}")
    elif command == "search":
        positions = find_positions(args.values, args.target)
        for position in positions:
            print(f"Number {args.target} is found on position {position}")
        if not positions:
            print(f"Number {args.target} is not found in this array.")
        print("Sorted array: " + " ".join(str(value) for value in sorted(args.values)))
    elif command == "parity":
        word = "even" if is_even(args.number) else "odd"
        print(f"{args.number} is {word}.")
    elif command == "grade":
        letter = grade(args.marks)
        print("You have failed." if letter == "F" else f"Your grade is {letter}")
    elif command == "largest":
        print(f"{largest_of_three(*args.numbers)} is Large.")
    elif command == "vowel":
        word = "vowel" if is_vowel(args.ch) else "consonant"
        print(f"{args.ch} is a {word}.")


def main(argv: Sequence[str] | None = None) -> int:
    """Run one of the basic drills from the command line."""
    args = _build_parser().parse_args(argv)
    try:
        _run(args)
    except ValueError as error:
        print(f"Error: {error}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())