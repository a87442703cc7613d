import pytest

from drills.patterns import (
    binary_triangle,
    inverted_star_triangle,
    main,
    number_triangle,
    repeated_number_triangle,
    right_aligned_triangle,
    shifted_inverted_triangle,
    star_diamond_half,
    star_pyramid,
    star_triangle,
)


@pytest.mark.parametrize("rows", [0, 1, 4, 7])
def test_row_count(rows):
    results = [
        number_triangle(rows),
        star_triangle(rows),
        inverted_star_triangle(rows),
        star_pyramid(rows),
        repeated_number_triangle(rows),
        shifted_inverted_triangle(rows),
        binary_triangle(rows),
        right_aligned_triangle(rows),
    ]
    assert [len(result) for result in results] == [rows] * len(results)


def test_negative_rows_give_nothing():
    results = [
        number_triangle(-2),
        star_triangle(-2),
        inverted_star_triangle(-2),
        star_pyramid(-2),
        repeated_number_triangle(-2),
        shifted_inverted_triangle(-2),
        binary_triangle(-2),
        right_aligned_triangle(-2),
        star_diamond_half(-2),
    ]
    assert results == [[]] * len(results)


def test_number_triangle_counts_up():
    rows = 5
    numbers = [int(n) for line in number_triangle(rows) for n in line.split()]
    assert numbers == list(range(1, len(numbers) + 1))
    assert len(numbers) == sum(range(1, rows + 1))


def test_number_triangle_row_widths():
    for i, line in enumerate(number_triangle(6), start=1):
        assert len(line.split()) == i


def test_star_triangle_widths():
    assert [len(line) for line in star_triangle(5)] == [1, 2, 3, 4, 5]
    assert all(set(line) == {"*"} for line in star_triangle(5))


def test_inverted_is_reverse_of_triangle():
    assert inverted_star_triangle(6) == star_triangle(6)[::-1]


def test_star_pyramid_three():
    assert star_pyramid(3) == ["  *", " ***", "*****"]


def test_star_pyramid_is_centred():
    rows = 6
    for line in star_pyramid(rows):
        stars = line.strip()
        assert set(stars) == {"*"}
        assert len(line) - len(stars) == rows - (len(stars) + 1) // 2


def test_star_diamond_half_shape():
    half = 4
    lines = star_diamond_half(half)
    assert len(lines) == 2 * half - 1
    assert lines == lines[::-1]
    assert max(len(line) for line in lines) == half


def test_repeated_number_triangle_rows():
    for i, line in enumerate(repeated_number_triangle(5), start=1):
        assert line.split() == [str(i)] * i


def test_shifted_inverted_lengths_constant():
    rows = 5
    lines = shifted_inverted_triangle(rows)
    assert all(len(line) == rows + 1 for line in lines)
    assert [len(line.lstrip()) for line in lines] == list(range(rows, 0, -1))


def test_binary_triangle_alternates():
    for i, line in enumerate(binary_triangle(6), start=1):
        digits = line.split()
        assert len(digits) == i
        assert digits[0] == ("1" if i % 2 == 1 else "0")
        assert all(a != b for a, b in zip(digits, digits[1:]))


def test_right_aligned_triangle_grows_and_aligns():
    rows = 5
    lines = right_aligned_triangle(rows)
    assert all(len(line) == rows + 1 for line in lines)
    assert [line.count("*") for line in lines] == list(range(1, rows + 1))
    assert all(line.endswith("*") for line in lines)


def test_main_prints_pattern(capsys):
    assert main(["stars", "3"]) == 0
    assert capsys.readouterr().out.splitlines() == star_triangle(3)


def test_main_rejects_unknown_pattern():
    with pytest.raises(SystemExit):
        main(["hexagon", "3"])