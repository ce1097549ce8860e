"""Lightweight pure-Python 2×2 matrix helpers (tuples of tuples)."""

import math

from .types import Matrix2x2, Point2


def as_matrix(mat) -> Matrix2x2:
    """Coerce any 2×2 nested sequence into an immutable :data:`Matrix2x2`."""
    rows = [tuple(float(v) for v in row) for row in mat]
    if len(rows) != 2 or any(len(row) != 2 for row in rows):
        shape = (len(rows), tuple(len(row) for row in rows))
        raise ValueError(f"Expected a 2x2 matrix, got rows of shape {shape}")
    return (rows[0], rows[1])


def identity() -> Matrix2x2:
    """The 2×2 identity matrix."""
    return ((1.0, 0.0), (0.0, 1.0))


def diag(values) -> Matrix2x2:
    """Diagonal matrix with *values* on the diagonal."""
    d0, d1 = values
    return ((float(d0), 0.0), (0.0, float(d1)))


def from_columns(col0: Point2, col1: Point2) -> Matrix2x2:
    """Assemble a matrix whose columns are *col0* and *col1*."""
    return ((col0[0], col1[0]), (col0[1], col1[1]))


def transpose(mat) -> Matrix2x2:
    """Transpose a matrix."""
    (a, b), (c, d) = as_matrix(mat)
    return ((a, c), (b, d))


def mat_mul(a, b) -> Matrix2x2:
    """Matrix multiplication A @ B."""
    a = as_matrix(a)
    b = as_matrix(b)
    return tuple(
        tuple(a[i][0] * b[0][j] + a[i][1] * b[1][j] for j in range(2))
        for i in range(2)
    )


def det(mat) -> float:
    """Determinant of a 2×2 matrix."""
    (a, b), (c, d) = as_matrix(mat)
    return a * d - b * c


def frobenius_norm(mat) -> float:
    """Frobenius norm of a matrix."""
    s = 0.0
    for row in as_matrix(mat):
        for v in row:
            s += v * v
    return math.sqrt(s)


def apply(mat, point) -> Point2:
    """Linear map ``mat @ point``."""
    (a, b), (c, d) = as_matrix(mat)
    x, y = point
    return (a * x + b * y, c * x + d * y)


def transform_points(mat, points) -> list[Point2]:
    """Apply *mat* to every point in *points*."""
    mat = as_matrix(mat)
    return [apply(mat, p) for p in points]
