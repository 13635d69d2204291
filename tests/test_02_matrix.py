"""Matrix tests: construction, element access, value semantics, structure and arithmetic."""
import copy

import numpy as np
import pytest

from fracmatrix import DimensionError, DomainError, Fraction, Matrix, NumberOperations


@pytest.fixture
def m23():
    return Matrix.from_rows([[1, "1/2", 3], [-4, 5, "2/3"]])


@pytest.fixture
def m22():
    return Matrix.from_rows([[1, 2], [3, 4]])


# =============================================================================
# Construction
# =============================================================================


def test_fill_constructor():
    """Every cell holds its own copy of the fill value."""
    m = Matrix(2, 3, Fraction(1, 2))
    assert m.shape == (2, 3)
    assert all(value == Fraction(1, 2) for row in m for value in row)
    m[0][0] = 5
    assert m[0][1] == Fraction(1, 2)
    assert m[1][2] == Fraction(1, 2)


def test_default_constructor_is_zero():
    m = Matrix(2, 2)
    assert str(m) == "[0 0]\n[0 0]"
    assert m == Matrix.zeros(2, 2)


def test_empty_matrix():
    m = Matrix(0, 0)
    assert m.shape == (0, 0)
    assert len(m) == 0
    assert str(m) == ""


def test_invalid_dimensions():
    with pytest.raises(DimensionError):
        Matrix(-1, 2)
    with pytest.raises(TypeError):
        Matrix(2, 2.0)


def test_from_rows_errors():
    with pytest.raises(DimensionError):
        Matrix.from_rows([])
    with pytest.raises(DimensionError):
        Matrix.from_rows([[]])
    with pytest.raises(DimensionError):
        Matrix.from_rows([[1, 2], [3]])


def test_identity():
    m = Matrix.identity(3)
    for i in range(3):
        for j in range(3):
            assert m[i][j] == (1 if i == j else 0)
    assert Matrix.identity(3, 3) == m
    with pytest.raises(DimensionError):
        Matrix.identity(2, 3)


# =============================================================================
# Element access
# =============================================================================


def test_indexing(m23):
    assert m23[0][1] == Fraction(1, 2)
    assert m23[1, 2] == Fraction(2, 3)
    assert m23.get_value_at(1, 0) == -4
    assert m23.get_row(1) == [-4, 5, Fraction(2, 3)]
    assert m23.get_column(2) == [3, Fraction(2, 3)]
    assert len(m23) == 2
    assert len(m23[0]) == 3
    assert list(m23[0]) == [1, Fraction(1, 2), 3]


@pytest.mark.parametrize("index", [(2, 0), (0, 3), (-1, 0), (0, -1)])
def test_out_of_range_index(m23, index):
    """Indices must satisfy 0 <= index < size, negative indices included."""
    row, col = index
    with pytest.raises(IndexError):
        m23[row][col]
    with pytest.raises(IndexError):
        m23[row, col]
    with pytest.raises(IndexError):
        m23[row, col] = 1


def test_reads_return_copies(m23):
    """Mutating a value read from the matrix leaves the matrix unchanged."""
    value = m23[0][0]
    value += 10
    row = m23.get_row(0)
    row[1] *= 4
    column = m23.get_column(0)
    column[0] -= 1
    for values in m23:
        values[0] += 1
    assert m23 == Matrix.from_rows([[1, "1/2", 3], [-4, 5, "2/3"]])


def test_writes_store_copies(m22):
    """A value written into the matrix is not shared with the caller."""
    value = Fraction(1, 2)
    m22[0][0] = value
    value += 1
    assert m22[0, 0] == Fraction(1, 2)


def test_in_place_element_update(m22):
    m22[0][0] += 1
    m22[1, 1] *= Fraction(1, 2)
    assert m22 == Matrix.from_rows([[2, 2], [3, 2]])


def test_row_assignment(m23):
    m23[1] = [7, 8, "9/2"]
    assert m23.get_row(1) == [7, 8, Fraction(9, 2)]
    with pytest.raises(DimensionError):
        m23[0] = [1, 2]


def test_copies_are_independent(m22):
    for clone in (m22.copy(), copy.copy(m22), copy.deepcopy(m22)):
        clone[0, 0] = 9
        assert m22[0, 0] == 1


# =============================================================================
# Structure
# =============================================================================


def test_transpose(m23):
    t = m23.transpose()
    assert t.shape == (3, 2)
    for i in range(2):
        for j in range(3):
            assert t[j][i] == m23[i][j]
    assert t.transpose() == m23


def test_sub_matrix_and_minor():
    m = Matrix.from_rows([[1, 2, 3], [4, 5, 6], [7, 8, 9]])
    assert m.sub_matrix(0, 2, 1, 3) == Matrix.from_rows([[2, 3], [5, 6]])
    assert m.minor(1, 1) == Matrix.from_rows([[1, 3], [7, 9]])
    assert m.minor(0, 2) == Matrix.from_rows([[4, 5], [7, 8]])
    with pytest.raises(IndexError):
        m.sub_matrix(0, 4, 0, 1)
    with pytest.raises(IndexError):
        m.minor(3, 0)


def test_augment(m22):
    augmented = m22.augment(Matrix.identity(2))
    assert augmented == Matrix.from_rows([[1, 2, 1, 0], [3, 4, 0, 1]])
    with pytest.raises(DimensionError):
        m22.augment(Matrix(3, 1))


def test_row_operations(m22):
    m22.swap_rows(0, 1)
    assert m22 == Matrix.from_rows([[3, 4], [1, 2]])
    m22.scale_row(0, Fraction(1, 3))
    assert m22 == Matrix.from_rows([[1, "4/3"], [1, 2]])
    m22.add_scaled_row(1, 0, -1)
    assert m22 == Matrix.from_rows([[1, "4/3"], [0, "2/3"]])
    with pytest.raises(IndexError):
        m22.swap_rows(0, 2)


# =============================================================================
# Arithmetic
# =============================================================================


def test_add_sub_neg(m22):
    other = Matrix.from_rows([["1/2", 0], [0, -1]])
    assert m22 + other == Matrix.from_rows([["3/2", 2], [3, 3]])
    assert m22 - other == Matrix.from_rows([["1/2", 2], [3, 5]])
    assert -m22 == Matrix.from_rows([[-1, -2], [-3, -4]])
    assert m22 == Matrix.from_rows([[1, 2], [3, 4]])


def test_in_place_add_sub(m22):
    alias = m22
    m22 += Matrix.identity(2)
    m22 -= Matrix(2, 2, 1)
    assert m22 is alias
    assert m22 == Matrix.from_rows([[1, 1], [2, 4]])


def test_shape_mismatch(m22, m23):
    with pytest.raises(DimensionError):
        m22 + m23
    with pytest.raises(DimensionError):
        m22 - m23
    with pytest.raises(DimensionError):
        m22 += m23
    with pytest.raises(DimensionError):
        m22 * m23.transpose()


def test_scalar_multiplication_and_division(m22):
    expected = Matrix.from_rows([[2, 4], [6, 8]])
    assert m22 * 2 == expected
    assert 2 * m22 == expected
    assert m22 * Fraction(1, 2) == Matrix.from_rows([["1/2", 1], ["3/2", 2]])
    assert m22 * 0.5 == m22 / 2
    assert m22 / Fraction(1, 2) == expected
    m22 *= 3
    m22 /= Fraction(3, 2)
    assert m22 == expected


def test_division_by_zero_scalar(m22):
    with pytest.raises(DomainError):
        m22 / 0
    with pytest.raises(DomainError):
        m22 / Fraction(0, 3)
    with pytest.raises(DomainError):
        m22 /= 0
    assert m22 == Matrix.from_rows([[1, 2], [3, 4]])


def test_number_operations_divide(scalar_type):
    """Scalar division fails with DomainError for every scalar type."""
    ops = NumberOperations.for_type(scalar_type)
    assert ops.divide(ops.value_of(3), ops.value_of(4)) == ops.value_of(Fraction(3, 4))
    with pytest.raises(DomainError):
        ops.divide(ops.one(), ops.zero())
    m = Matrix.from_rows([[1, 2], [3, 4]], scalar_type=scalar_type)
    assert m / 2 == Matrix.from_rows([["1/2", 1], ["3/2", 2]], scalar_type=scalar_type)
    with pytest.raises(DomainError):
        m / 0


def test_matrix_product(m22):
    other = Matrix.from_rows([[5, 6], [7, 8]])
    product = Matrix.from_rows([[19, 22], [43, 50]])
    assert m22 * other == product
    assert m22 @ other == product
    assert m22 * Matrix.identity(2) == m22


def test_rectangular_product(m23):
    column = Matrix.from_rows([[1], [0], [-1]])
    assert m23 * column == Matrix.from_rows([[-2], ["-14/3"]])
    with pytest.raises(DimensionError):
        column * m23.transpose()


def test_in_place_product(m22):
    m22 *= Matrix.from_rows([[0, 1], [1, 0]])
    assert m22 == Matrix.from_rows([[2, 1], [4, 3]])
    with pytest.raises(DimensionError):
        m22 *= Matrix(2, 3)


def test_equality(m22, m23):
    assert m22 != m23
    assert m22 == Matrix.from_rows([["2/2", "4/2"], [3, 4]])
    assert m22 != 5


# =============================================================================
# Rendering and conversion
# =============================================================================


def test_str(m23):
    assert str(m23) == "[1 1/2 3]\n[-4 5 2/3]"


def test_repr(m23):
    assert repr(m23) == "Matrix(2x3, Fraction, [[1, 1/2, 3], [-4, 5, 2/3]])"


def test_to_numpy(m23):
    np.testing.assert_allclose(m23.to_numpy(), [[1.0, 0.5, 3.0], [-4.0, 5.0, 2.0 / 3.0]])


# =============================================================================
# Other scalar types
# =============================================================================


def test_other_scalar_types(scalar_type):
    """Matrices over fractions.Fraction and sympy.Rational behave like Fraction matrices."""
    ops = NumberOperations.for_type(scalar_type)
    m = Matrix.from_rows([[1, 2], [3, 4]], scalar_type=scalar_type)
    assert m.scalar_type is scalar_type
    assert m * Matrix.identity(2, scalar_type=scalar_type) == m
    assert (m + m) == m * 2
    m[0, 0] = Fraction(1, 2)
    assert m[0, 0] == ops.value_of(Fraction(1, 2))
    assert m.transpose()[1, 0] == ops.value_of(2)


def test_float_matrix():
    m = Matrix.from_rows([[1.0, 2.0], [3.0, 4.0]], scalar_type=float)
    assert m * Matrix.identity(2, scalar_type=float) == m
    assert m.to_numpy().tolist() == [[1.0, 2.0], [3.0, 4.0]]
