"""Number drills: factorials, Fibonacci numbers, Armstrong numbers, primes and reversal."""

from __future__ import annotations

import argparse
import math
import sys
from enum import Enum
from typing import Sequence


class Primality(Enum):
    """Whether a non-negative integer is prime, composite or neither."""

    PRIME = "Prime"
    COMPOSITE = "Composite"
    NEITHER = "neither Prime nor Composite"


def factorial(n: int) -> int:
    """Return n! for n >= 1; for 0 the result is 0, as the recursion's base case gives."""
    if n < 0:
        raise ValueError("factorial is not defined for negative numbers")
    if n == 0:
        return 0
    return math.factorial(n)


def fibonacci(n: int) -> int:
    """Return the n-th Fibonacci number, counting fibonacci(0) == 0."""
    if n < 0:
        raise ValueError("fibonacci is not defined for negative indices")
    current, following = 0, 1
    for _ in range(n):
        current, following = following, current + following
    return current


def fibonacci_series(count: int) -> list[int]:
    """Return the first count Fibonacci numbers, starting with 0."""
    series = []
    current, following = 0, 1
    for _ in range(max(count, 0)):
        series.append(current)
        current, following = following, current + following
    return series


def is_armstrong(number: int) -> bool:
    """Return True if number equals the sum of its digits each raised to the digit count.

    Zero is not counted as an Armstrong number.
    """
    if number < 0:
        raise ValueError("Armstrong numbers are defined for non-negative integers")
    if number == 0:
        return False
    digits = [int(d) for d in str(number)]
    return sum(d ** len(digits) for d in digits) == number


def armstrong_numbers(limit: int) -> list[int]:
    """Return the Armstrong numbers from 1 to limit inclusive."""
    return [n for n in range(1, limit + 1) if is_armstrong(n)]


def is_prime(number: int) -> bool:
    """Return True if number is a prime."""
    if number < 2:
        return False
    return all(number % divisor for divisor in range(2, number // 2 + 1))


def primes_up_to(limit: int) -> list[int]:
    """Return the primes from 2 to limit inclusive."""
    return [n for n in range(2, limit + 1) if is_prime(n)]


def reverse_number(number: int) -> int:
    """Return the number with its decimal digits reversed, keeping its sign."""
    sign = -1 if number < 0 else 1
    return sign * int(str(abs(number))[::-1])


def classify_primality(number: int) -> Primality:
    """Classify a non-negative integer as prime, composite or neither."""
    if number < 0:
        raise ValueError("primality is classified for non-negative integers only")
    if number in (0, 1):
        return Primality.NEITHER
    return Primality.PRIME if is_prime(number) else Primality.COMPOSITE


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="drills-numtheory", description=__doc__)
    commands = parser.add_subparsers(dest="command", required=True)
    for name, help_text in (
        ("factorial", "factorial and Fibonacci series of a number"),
        ("armstrong", "Armstrong numbers up to a limit"),
        ("primes", "prime numbers up to a limit"),
        ("reverse", "reverse the digits of a number"),
        ("classify", "prime, composite or neither"),
    ):
        sub = commands.add_parser(name, help=help_text)
        sub.add_argument("number", type=int)
    return parser


def _run(command: str, number: int) -> None:
    if command == "factorial":
        if number < 0:
            raise ValueError("Please enter a non-negative number")
        print(f"Factorial of {number}! = {factorial(number)}")
        series = ", ".join(str(term) for term in fibonacci_series(number))
        print(f"Fibonacci of {number} = {series}")
    elif command == "armstrong":
        for value in armstrong_numbers(number):
            print(value)
    elif command == "primes":
        for value in primes_up_to(number):
            print(value)
    elif command == "reverse":
        print(f"Reversed Number: {reverse_number(number)}")
    elif command == "classify":
        print(f"{number} is {classify_primality(number).value}.")


def main(argv: Sequence[str] | None = None) -> int:
    """Run one of the number drills from the command line."""
    args = _build_parser().parse_args(argv)
    try:
        _run(args.command, args.number)
    except ValueError as error:
        print(f"Error: {error}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())