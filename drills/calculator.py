"""Calculators: integer and real arithmetic, percentages and averages."""

from __future__ import annotations

import argparse
import operator as _op
import sys
from enum import Enum
from typing import Iterable, Sequence


class Operation(Enum):
    """A binary operation on real numbers, identified by its symbol."""

    ADD = "+"
    SUBTRACT = "-"
    MULTIPLY = "*"
    DIVIDE = "/"


_LABELS = {
    Operation.ADD: "Sum",
    Operation.SUBTRACT: "Difference",
    Operation.MULTIPLY: "Product",
    Operation.DIVIDE: "Quotient",
}


def _truncated_divmod(first: int, second: int) -> tuple[int, int]:
    """Divide rounding toward zero; the remainder takes the dividend's sign."""
    if second == 0:
        raise ZeroDivisionError("Division by zero")
    quotient = abs(first) // abs(second)
    if (first < 0) != (second < 0):
        quotient = -quotient
    return quotient, first - second * quotient


def integer_calculate(first: int, second: int, operator: str) -> int:
    """Apply one of + - * / % to two integers.

    Division truncates toward zero and the remainder keeps the sign of the
    dividend.
    """
    if operator == "+":
        return first + second
    if operator == "-":
        return first - second
    if operator == "*":
        return first * second
    if operator == "/":
        return _truncated_divmod(first, second)[0]
    if operator == "%":
        return _truncated_divmod(first, second)[1]
    raise ValueError(f"Invalid operator {operator!r}")


_FUNCTIONS = {
    Operation.ADD: _op.add,
    Operation.SUBTRACT: _op.sub,
    Operation.MULTIPLY: _op.mul,
    Operation.DIVIDE: _op.truediv,
}


def calculate(first: float, second: float, operation: Operation) -> float:
    """Apply a real-number operation to two operands."""
    if operation is Operation.DIVIDE and second == 0:
        raise ZeroDivisionError("Division by zero not possible.")
    return _FUNCTIONS[Operation(operation)](first, second)


def percentage(obtained: float, total: float) -> float:
    """Return obtained as a percentage of total."""
    if total == 0:
        raise ZeroDivisionError("Total can't be zero!")
    return obtained / total * 100


def mean(values: Iterable[float]) -> float:
    """Return the arithmetic mean of the values."""
    numbers = list(values)
    if not numbers:
        raise ValueError("cannot average an empty collection of numbers")
    return sum(numbers) / len(numbers)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="drills-calculator", description=__doc__)
    commands = parser.add_subparsers(dest="command", required=True)

    integer = commands.add_parser("int", help="integer arithmetic with + - * / %%")
    integer.add_argument("first", type=int)
    integer.add_argument("operator", choices=["+", "-", "*", "/", "%"])
    integer.add_argument("second", type=int)

    for operation in Operation:
        sub = commands.add_parser(operation.name.lower(), help=_LABELS[operation].lower())
        sub.add_argument("first", type=float)
        sub.add_argument("second", type=float)

    percent = commands.add_parser("percent", help="percentage of obtained marks")
    percent.add_argument("obtained", type=float)
    percent.add_argument("total", type=float)

    average = commands.add_parser("average", help="average of numbers")
    average.add_argument("values", nargs="+", type=float)
    return parser


def _run(args: argparse.Namespace) -> None:
    command = args.command
    if command == "int":
        print(f"Result: {integer_calculate(args.first, args.second, args.operator)}")
    elif command == "percent":
        print(f"Percentage = {percentage(args.obtained, args.total):.2f}%")
    elif command == "average":
        print(f"Average = {mean(args.values):.2f}")
    else:
        operation = Operation[command.upper()]
        result = calculate(args.first, args.second, operation)
        print(f"{_LABELS[operation]} = {result:.2f}")


def main(argv: Sequence[str] | None = None) -> int:
    """Run one calculation from the command line."""
    args = _build_parser().parse_args(argv)
    try:
        _run(args)
    except (ValueError, ZeroDivisionError) as error:
        print(f"Error: {error}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())