"""Matrix drills: addition, multiplication and transposition of integer matrices."""

from __future__ import annotations

import argparse
import sys
from typing import Sequence

Matrix = list[list[int]]


def _shape(matrix: Sequence[Sequence[int]]) -> tuple[int, int]:
    """Return (rows, columns), rejecting ragged matrices."""
    if not matrix:
        return 0, 0
    columns = len(matrix[0])
    if any(len(row) != columns for row in matrix):
        raise ValueError("matrix rows must all have the same length")
    return len(matrix), columns


def add(a: Sequence[Sequence[int]], b: Sequence[Sequence[int]]) -> Matrix:
    """Return the element-wise sum of two matrices of the same dimensions."""
    if _shape(a) != _shape(b):
        raise ValueError("matrices must have the same dimensions to be added")
    return [[x + y for x, y in zip(row_a, row_b)] for row_a, row_b in zip(a, b)]


def multiply(a: Sequence[Sequence[int]], b: Sequence[Sequence[int]]) -> Matrix:
    """Return the matrix product a x b.

    The number of columns of a must equal the number of rows of b.
    """
    _, columns_a = _shape(a)
    rows_b, _ = _shape(b)
    if columns_a != rows_b:
        raise ValueError("Matrix multiplication not possible")
    columns = list(zip(*b))
    return [[sum(x * y for x, y in zip(row, column)) for column in columns] for row in a]


def transpose(a: Sequence[Sequence[int]]) -> Matrix:
    """Return the transpose of a matrix."""
    _shape(a)
    return [list(column) for column in zip(*a)]


def format_matrix(matrix: Sequence[Sequence[int]]) -> str:
    """Render a matrix with a tab after every element and a newline after every row."""
    return "".join("".join(f"{value}\t" for value in row) + "\n" for row in matrix)


def _parse_matrix(text: str) -> Matrix:
    """Parse rows separated by ';' holding values separated by commas or spaces."""
    matrix = [[int(value) for value in row.replace(",", " ").split()] for row in text.split(";")]
    _shape(matrix)
    return matrix


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="drills-matrix",
        description="Add, multiply or transpose matrices written as '1,2;3,4'.",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    add_cmd = commands.add_parser("add", help="sum of two matrices")
    add_cmd.add_argument("first", type=_parse_matrix)
    add_cmd.add_argument("second", type=_parse_matrix)

    mul_cmd = commands.add_parser("multiply", help="product of two matrices")
    mul_cmd.add_argument("first", type=_parse_matrix)
    mul_cmd.add_argument("second", type=_parse_matrix)

    tr_cmd = commands.add_parser("transpose", help="transpose of a matrix")
    tr_cmd.add_argument("first", type=_parse_matrix)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Run one matrix operation from the command line."""
    args = _build_parser().parse_args(argv)
    try:
        if args.command == "add":
            result = add(args.first, args.second)
            header = "Sum of two matrix is:"
        elif args.command == "multiply":
            result = multiply(args.first, args.second)
            header = "Product of two matrix is:"
        else:
            result = transpose(args.first)
            header = "Transpose of the matrix is:"
    except ValueError as error:
        print(f"Error: {error}", file=sys.stderr)
        return 1
    print(header)
    print(format_matrix(result), end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())