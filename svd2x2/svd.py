"""Closed-form singular value decomposition of 2×2 real matrices.

The right singular vectors are the eigenvectors of the Gram matrix
``AᵗA = [[e, f], [f, g]]``, whose eigenvalues are the squared singular
values.  Because the Gram matrix is symmetric 2×2, both are available in
closed form; no iteration is needed.

The first left singular vector is ``u1 = A v1 / s1``; the second is ``u1``
turned by 90°, signed by ``det A``, which equals ``A v2 / s2`` without
dividing by a possibly tiny ``s2``.  Where the formulas degenerate (a zero
singular value, a diagonal Gram matrix) a fixed fallback is used instead.
Those fallbacks are named by :class:`GramCase` and :class:`RankCase`.
"""

import math
from enum import Enum

from .matrix import apply, as_matrix, det, diag, from_columns, mat_mul, transpose
from .types import SVDResult

# Off-diagonal Gram entry below which AᵗA is treated as diagonal.
GRAM_TOL = 1e-10
# Singular values at or below this are treated as zero.
SINGULAR_TOL = 1e-9


class GramCase(Enum):
    """How the right singular vectors are chosen."""
    AXIS_ALIGNED = "axis_aligned"
    AXIS_SWAPPED = "axis_swapped"
    GENERIC = "generic"


class RankCase(Enum):
    """How the left singular vectors are chosen."""
    RANK_ZERO = "rank_zero"
    RANK_ONE = "rank_one"
    FULL = "full"


def gram_case(e, f, g, tol=GRAM_TOL):
    """Classify the Gram matrix ``[[e, f], [f, g]]``.

    A diagonal Gram matrix (``|f| < tol``) has the coordinate axes as
    eigenvectors; the larger diagonal entry decides which axis comes first.
    Ties (isotropic scaling) keep the identity ordering.
    """
    if abs(f) < tol:
        return GramCase.AXIS_ALIGNED if e >= g else GramCase.AXIS_SWAPPED
    return GramCase.GENERIC


def rank_case(s1, s2, tol=SINGULAR_TOL):
    """Classify the singular values ``s1 ≥ s2`` by numerical rank."""
    if not s1 > tol:
        return RankCase.RANK_ZERO
    if not s2 > tol:
        return RankCase.RANK_ONE
    return RankCase.FULL


def gram(mat):
    """Entries ``(e, f, g)`` of the Gram matrix ``AᵗA = [[e, f], [f, g]]``."""
    (a, b), (c, d) = as_matrix(mat)
    return a * a + c * c, a * b + c * d, b * b + d * d


def gram_eigenvalues(e, f, g):
    """Eigenvalues ``(λ1, λ2)`` of ``[[e, f], [f, g]]``, descending, clamped ≥ 0."""
    disc = math.sqrt((e - g) * (e - g) + 4.0 * f * f)
    lambda1 = (e + g + disc) / 2.0
    lambda2 = (e + g - disc) / 2.0
    return max(lambda1, 0.0), max(lambda2, 0.0)


def singular_values(mat):
    """Singular values ``(s1, s2)`` of a 2×2 matrix, descending.

    ``s2`` is taken as ``|det A| / s1`` rather than from the smaller Gram
    eigenvalue, which cancels catastrophically for near-singular input.
    """
    mat = as_matrix(mat)
    lambda1, _ = gram_eigenvalues(*gram(mat))
    s1 = math.sqrt(lambda1)
    if not s1 > 0.0:
        return s1, 0.0
    return s1, min(abs(det(mat)) / s1, s1)


def _right_vectors(case, e, f, lambda1):
    if case is GramCase.AXIS_ALIGNED:
        return (1.0, 0.0), (0.0, 1.0)
    if case is GramCase.AXIS_SWAPPED:
        return (0.0, 1.0), (-1.0, 0.0)
    x, y = f, lambda1 - e
    n = math.hypot(x, y)
    v1 = (x / n, y / n)
    return v1, (-v1[1], v1[0])


def _left_vectors(case, mat, v1, s1):
    if case is RankCase.RANK_ZERO:
        return (1.0, 0.0), (0.0, 1.0)
    av1 = apply(mat, v1)
    u1 = (av1[0] / s1, av1[1] / s1)
    perp = (-u1[1], u1[0])
    if case is RankCase.RANK_ONE:
        return u1, perp
    # u2 = A v2 / s2 up to rounding; det(U) carries the sign of det(A).
    if det(mat) < 0:
        return u1, (-perp[0], -perp[1])
    return u1, perp


def decompose(mat, *, gram_tol=GRAM_TOL, singular_tol=SINGULAR_TOL):
    """Compute the SVD of a 2×2 matrix in closed form.

    Returns an :class:`SVDResult` with ``mat ≈ u @ diag(s) @ vt``, where
    ``s = (s1, s2)`` is descending and non-negative and ``u``, ``v`` are
    orthogonal.  Never raises for finite input; NaN input yields NaN output.

    ``gram_tol`` is an absolute bound on the off-diagonal Gram entry, so
    matrices with entries around 1e-5 or smaller are treated as having a
    diagonal Gram matrix and get a poor U.  Pass a smaller ``gram_tol``
    when decomposing matrices at that scale.
    """
    mat = as_matrix(mat)
    e, f, g = gram(mat)

    lambda1, _ = gram_eigenvalues(e, f, g)
    s1, s2 = singular_values(mat)

    v1, v2 = _right_vectors(gram_case(e, f, g, gram_tol), e, f, lambda1)
    u1, u2 = _left_vectors(rank_case(s1, s2, singular_tol), mat, v1, s1)

    v = from_columns(v1, v2)
    return SVDResult(u=from_columns(u1, u2), s=(s1, s2), v=v, vt=transpose(v))


def classify(mat, *, gram_tol=GRAM_TOL, singular_tol=SINGULAR_TOL):
    """Return the ``(GramCase, RankCase)`` pair :func:`decompose` takes for *mat*."""
    e, f, g = gram(mat)
    return (gram_case(e, f, g, gram_tol),
            rank_case(*singular_values(mat), tol=singular_tol))


def reconstruct(u, s, vt):
    """Reconstruct ``U @ diag(s) @ Vt``.

    The factors are not checked for orthogonality, so any ``u``/``vt`` pair
    and any scale factors may be combined.
    """
    return mat_mul(mat_mul(u, diag(s)), vt)
