"""svd2x2 – closed-form singular value decomposition of 2×2 matrices."""

__version__ = "0.1.0"

from .editor import EditorState
from .matrix import apply, transform_points
from .rotation import angle_of, rotation_of
from .svd import GramCase, RankCase, classify, decompose, reconstruct
from .types import Matrix2x2, Point2, SingularValues, SVDResult

__all__ = [
    "EditorState",
    "GramCase",
    "Matrix2x2",
    "Point2",
    "RankCase",
    "SVDResult",
    "SingularValues",
    "angle_of",
    "apply",
    "classify",
    "decompose",
    "reconstruct",
    "rotation_of",
    "transform_points",
]
