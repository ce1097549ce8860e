"""Value types shared across svd2x2."""

from typing import NamedTuple

Point2 = tuple[float, float]
Row2 = tuple[float, float]
Matrix2x2 = tuple[Row2, Row2]
SingularValues = tuple[float, float]


class SVDResult(NamedTuple):
    """Factors of ``A = U · diag(s) · Vt``.

    ``v`` and ``vt`` are both carried; ``vt`` is always the transpose of ``v``.
    """
    u: Matrix2x2
    s: SingularValues
    v: Matrix2x2
    vt: Matrix2x2
