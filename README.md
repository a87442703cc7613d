# drills

Small, classic programming exercises as plain Python functions, each module
with a command that takes its input as command-line arguments.

## Installation

    pip install .

For running the tests:

    pip install ".[test]"
    pytest

## Modules

- `drills.basics`: `average`, `celsius_to_fahrenheit`,
  `classify_character` (returns a `CharKind`: `ALPHABET`, `NUMBER` or
  `SYMBOL`; the character codes 96 to 122 and 65 to 90 count as alphabet, so
  the backtick does too), `electricity_bill` (2 per unit for the first 100,
  3 for the next 100, 4 for the next 100, 5 above 300), `find_positions`
  (1-based positions), `is_even`, `grade` (`"A+"`, `"A"`, `"B+"`, `"B"`,
  `"C"` or `"F"`), `largest_of_three`, `is_vowel` and `greeting`.
- `drills.numtheory`: `factorial` (note that `factorial(0)` is `0`),
  `fibonacci`, `fibonacci_series`, `is_armstrong`, `armstrong_numbers`,
  `is_prime`, `primes_up_to`, `reverse_number` and `classify_primality`
  (returns a `Primality`: `PRIME`, `COMPOSITE` or `NEITHER`).
- `drills.patterns`: `number_triangle`, `star_triangle`,
  `inverted_star_triangle`, `star_pyramid`, `star_diamond_half`,
  `repeated_number_triangle`, `shifted_inverted_triangle`, `binary_triangle`
  and `right_aligned_triangle`, each returning a list of lines.
- `drills.matrix`: `add`, `multiply`, `transpose` on lists of lists of
  integers, and `format_matrix`, which puts a tab after every element and a
  newline after every row. Mismatched or ragged matrices raise `ValueError`.
- `drills.calculator`: `integer_calculate` for `+ - * / %` (division
  truncates toward zero, the remainder keeps the dividend's sign),
  `calculate` with an `Operation` (`ADD`, `SUBTRACT`, `MULTIPLY`, `DIVIDE`),
  `percentage` and `mean`. Division by zero raises `ZeroDivisionError`.

## Library use

    from drills.numtheory import primes_up_to, factorial
    from drills.patterns import star_pyramid
    from drills.matrix import multiply

    primes_up_to(20)                 # [2, 3, 5, 7, 11, 13, 17, 19]
    factorial(5)                     # 120
    print("\n".join(star_pyramid(3)))
    multiply([[1, 2]], [[3], [4]])   # [[11]]

## Commands

    drills-basics hello
    drills-basics average 70 80 90
    drills-basics celsius 36.6
    drills-basics char x
    drills-basics bill 250
    drills-basics search 3 5 3 1
    drills-basics parity 7
    drills-basics grade 82
    drills-basics largest 4 9 2
    drills-basics vowel e

    drills-numtheory factorial 6
    drills-numtheory armstrong 500
    drills-numtheory primes 30
    drills-numtheory reverse 1234
    drills-numtheory classify 17

    drills-patterns pyramid 4

Patterns: `numbers`, `stars`, `inverted`, `pyramid`, `diamond-half`,
`repeated`, `shifted`, `binary`, `right`.

    drills-matrix add "1,2;3,4" "5,6;7,8"
    drills-matrix multiply "1,2" "3;4"
    drills-matrix transpose "1,2,3;4,5,6"

Matrices are written with rows separated by `;` and values by commas or
spaces.

    drills-calculator int 7 % 3
    drills-calculator add 1.5 2
    drills-calculator subtract 5 3
    drills-calculator multiply 2 4
    drills-calculator divide 1 3
    drills-calculator percent 45 60
    drills-calculator average 1 2 3

An invalid input such as division by zero prints an error and exits with
status 1.

## What it does not do

The commands are not interactive: they do not prompt for input or show a
menu to choose from repeatedly. Each run performs one exercise on the
arguments given.