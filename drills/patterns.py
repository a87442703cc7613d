"""Text patterns of stars and numbers, each returned as a list of lines."""

from __future__ import annotations

import argparse
import sys
from typing import Callable, Sequence


def number_triangle(rows: int) -> list[str]:
    """Left triangle of consecutive numbers: row i holds the next i numbers."""
    lines = []
    next_number = 1
    for width in range(1, rows + 1):
        numbers = range(next_number, next_number + width)
        lines.append(" ".join(str(n) for n in numbers))
        next_number += width
    return lines


def star_triangle(rows: int) -> list[str]:
    """Left triangle of stars growing from one star to rows stars."""
    return ["*" * width for width in range(1, rows + 1)]


def inverted_star_triangle(rows: int) -> list[str]:
    """Left triangle of stars shrinking from rows stars to one."""
    return ["*" * width for width in range(rows, 0, -1)]


def star_pyramid(rows: int) -> list[str]:
    """Centred pyramid with 2*i - 1 stars on row i."""
    return [" " * (rows - i) + "*" * (2 * i - 1) for i in range(1, rows + 1)]


def star_diamond_half(half: int) -> list[str]:
    """Stars growing to half and shrinking back to one."""
    return star_triangle(half) + inverted_star_triangle(half - 1)


def repeated_number_triangle(rows: int) -> list[str]:
    """Row i holds the number i repeated i times."""
    return [" ".join([str(i)] * i) for i in range(1, rows + 1)]


def shifted_inverted_triangle(rows: int) -> list[str]:
    """Row i is indented by i spaces and holds rows - i + 1 stars."""
    return [" " * i + "*" * (rows - i + 1) for i in range(1, rows + 1)]


def binary_triangle(rows: int) -> list[str]:
    """Row i holds i digits: 1 where row plus column is even, else 0."""
    return [
        " ".join("1" if (i + j) % 2 == 0 else "0" for j in range(1, i + 1))
        for i in range(1, rows + 1)
    ]


def right_aligned_triangle(rows: int) -> list[str]:
    """Right-aligned triangle: row k (from the top) is indented and holds k stars."""
    return [" " * i + "*" * (rows - i + 1) for i in range(rows, 0, -1)]


_PATTERNS: dict[str, Callable[[int], list[str]]] = {
    "numbers": number_triangle,
    "stars": star_triangle,
    "inverted": inverted_star_triangle,
    "pyramid": star_pyramid,
    "diamond-half": star_diamond_half,
    "repeated": repeated_number_triangle,
    "shifted": shifted_inverted_triangle,
    "binary": binary_triangle,
    "right": right_aligned_triangle,
}


def main(argv: Sequence[str] | None = None) -> int:
    """Print a chosen pattern with the given number of rows."""
    parser = argparse.ArgumentParser(prog="drills-patterns", description=__doc__)
    parser.add_argument("pattern", choices=sorted(_PATTERNS))
    parser.add_argument("rows", type=int)
    args = parser.parse_args(argv)
    for line in _PATTERNS[args.pattern](args.rows):
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())