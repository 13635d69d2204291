import fractions

import numpy as np
import pytest
import sympy

from fracmatrix import Fraction, Matrix

# Scalar types a matrix is tested with: the package's own Fraction plus two
# independent exact rational implementations
scalar_types = [Fraction, fractions.Fraction, sympy.Rational]


@pytest.fixture(params=scalar_types, scope="session", ids=lambda t: f"{t.__module__}.{t.__name__}")
def scalar_type(request: pytest.FixtureRequest) -> type:
    """Provide session-level fixture for parametrized scalar types."""
    return request.param


@pytest.fixture
def rng() -> np.random.Generator:
    """Seeded random generator, so every test run sees the same matrices."""
    return np.random.default_rng(20221)


def random_matrix(rng: np.random.Generator, rows: int, cols: int = None, scalar_type: type = Fraction,
                  max_num: int = 6, max_den: int = 4) -> Matrix:
    """Random matrix of small fractions n/d with -max_num <= n <= max_num and 1 <= d <= max_den."""
    cols = rows if cols is None else cols
    data = [[Fraction(int(rng.integers(-max_num, max_num + 1)), int(rng.integers(1, max_den + 1)))
             for _ in range(cols)]
            for _ in range(rows)]
    return Matrix.from_rows(data, scalar_type=scalar_type)


def random_invertible_matrix(rng: np.random.Generator, order: int, scalar_type: type = Fraction) -> Matrix:
    """Random matrix with non-zero determinant."""
    while True:
        matrix = random_matrix(rng, order, scalar_type=scalar_type)
        if matrix.determinant() != 0:
            return matrix
