import pytest

from drills.matrix import add, format_matrix, main, multiply, transpose

A = [[1, 2], [3, 4]]
B = [[5, 6], [7, 8]]
RECT = [[1, 2, 3], [4, 5, 6]]


def _identity(size):
    return [[1 if i == j else 0 for j in range(size)] for i in range(size)]


def test_add_known_values():
    assert add(A, B) == [[6, 8], [10, 12]]


def test_add_is_commutative():
    assert add(A, B) == add(B, A)


def test_add_zero_matrix_is_identity():
    zeros = [[0, 0, 0], [0, 0, 0]]
    assert add(RECT, zeros) == RECT


def test_add_rejects_mismatched_shapes():
    with pytest.raises(ValueError):
        add(A, RECT)


def test_add_rejects_ragged_matrix():
    with pytest.raises(ValueError):
        add([[1, 2], [3]], [[1, 2], [3, 4]])


def test_multiply_known_values():
    assert multiply(A, B) == [[19, 22], [43, 50]]


def test_multiply_by_identity_returns_same():
    assert multiply(RECT, _identity(3)) == RECT
    assert multiply(_identity(2), RECT) == RECT


def test_multiply_result_shape():
    product = multiply(RECT, transpose(RECT))
    assert len(product) == 2
    assert all(len(row) == 2 for row in product)


def test_multiply_rejects_incompatible_dimensions():
    with pytest.raises(ValueError, match="not possible"):
        multiply(RECT, RECT)


def test_transpose_swaps_dimensions():
    result = transpose(RECT)
    assert len(result) == 3
    assert all(len(row) == 2 for row in result)
    assert result[2][1] == RECT[1][2]


def test_transpose_twice_is_identity():
    assert transpose(transpose(RECT)) == RECT


def test_transpose_of_product_reverses_order():
    assert transpose(multiply(A, B)) == multiply(transpose(B), transpose(A))


def test_format_matrix_uses_tabs_and_newlines():
    assert format_matrix(A) == "1\t2\t\n3\t4\t\n"


def test_main_add_prints_header_and_sum(capsys):
    assert main(["add", "1,2;3,4", "5,6;7,8"]) == 0
    out = capsys.readouterr().out
    assert out.startswith("Sum of two matrix is:\n")
    assert out.endswith(format_matrix(add(A, B)))


def test_main_multiply_incompatible_fails(capsys):
    assert main(["multiply", "1,2,3;4,5,6", "1,2,3;4,5,6"]) == 1
    assert "not possible" in capsys.readouterr().err


def test_main_transpose(capsys):
    assert main(["transpose", "1 2 3;4 5 6"]) == 0
    out = capsys.readouterr().out
    assert out == "Transpose of the matrix is:\n" + format_matrix(transpose(RECT))