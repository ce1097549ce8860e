"""Editor state for interactive SVD exploration.

The matrix ``A`` is the source of truth.  Editing ``A`` re-decomposes it;
editing a single factor (the U angle, the Vᵗ angle or Σ) keeps the other
factors as they are and rebuilds ``A`` from them, so that the factors never
jump to a different but equivalent decomposition mid-edit.
"""

import math
from typing import NamedTuple

from .matrix import as_matrix, identity, transpose
from .rotation import angle_of, rotation_of
from .svd import decompose, reconstruct
from .types import Matrix2x2, SVDResult

DEFAULT_MATRIX = ((1.5, 0.5), (0.5, 1.5))

SIGMA_MIN = 0.0
SIGMA_MAX = 5.0
SIGMA_STEP_DECIMALS = 1

SLIDER_MIN_DEG = -180.0
SLIDER_MAX_DEG = 180.0

# Reference "F": vertical bar, top bar, middle bar (four corners each).
F_SHAPE = (
    (-0.5, -1.0), (-0.5, 1.0), (0.0, 1.0), (0.0, -1.0),
    (0.0, 0.7), (0.8, 0.7), (0.8, 1.0), (0.0, 1.0),
    (0.0, 0.0), (0.5, 0.0), (0.5, 0.3), (0.0, 0.3),
)

STAGE_LABELS = ("original", "after Vt", "after S Vt", "after U S Vt")


def round_half_away(value, decimals=0):
    """Round *value* to *decimals* places, ties away from zero.

    The scaled float is rounded, so ``0.25 + 0.1`` (stored just above 0.35)
    gives 0.4.
    """
    scale = 10 ** decimals
    return math.copysign(math.floor(abs(value) * scale + 0.5), value) / scale


def clamp_sigma(value):
    """Clamp a scale factor into ``[SIGMA_MIN, SIGMA_MAX]``."""
    return max(SIGMA_MIN, min(SIGMA_MAX, float(value)))


def slider_to_radians(degrees):
    """Map a slider position in degrees (clamped to ±180) to radians."""
    degrees = max(SLIDER_MIN_DEG, min(SLIDER_MAX_DEG, float(degrees)))
    return math.radians(degrees)


def radians_to_slider(angle):
    """Slider position, in whole degrees, for *angle* radians."""
    return int(round_half_away(math.degrees(angle)))


def shape_polygons(points, corners=4):
    """Split a flat point list into consecutive polygons of *corners* points."""
    points = list(points)
    if len(points) % corners:
        raise ValueError(f"{len(points)} points do not split into {corners}-gons")
    return [points[i:i + corners] for i in range(0, len(points), corners)]


class EditorState(NamedTuple):
    """Immutable pairing of a matrix with the SVD factors shown for it."""
    matrix: Matrix2x2
    svd: SVDResult

    @classmethod
    def from_matrix(cls, mat=DEFAULT_MATRIX):
        mat = as_matrix(mat)
        return cls(matrix=mat, svd=decompose(mat))

    @property
    def u_angle(self):
        return angle_of(self.svd.u)

    @property
    def vt_angle(self):
        return angle_of(self.svd.vt)

    def with_matrix(self, mat):
        """Replace ``A`` and re-decompose it."""
        return EditorState.from_matrix(mat)

    def _rebuilt(self, svd):
        return EditorState(matrix=reconstruct(svd.u, svd.s, svd.vt), svd=svd)

    def with_u_angle(self, angle):
        """Replace U by a rotation of *angle* radians and rebuild ``A``."""
        return self._rebuilt(self.svd._replace(u=rotation_of(angle)))

    def with_vt_angle(self, angle):
        """Replace Vᵗ (and V with it) by a rotation of *angle* radians."""
        vt = rotation_of(angle)
        return self._rebuilt(self.svd._replace(v=transpose(vt), vt=vt))

    def with_sigma(self, sigma):
        """Replace Σ, clamping each factor into ``[SIGMA_MIN, SIGMA_MAX]``."""
        s0, s1 = sigma
        return self._rebuilt(self.svd._replace(s=(clamp_sigma(s0), clamp_sigma(s1))))

    def step_sigma(self, index, delta):
        """Nudge one scale factor by *delta*, rounding to the step precision."""
        if index not in (0, 1):
            raise IndexError(f"sigma index must be 0 or 1, got {index}")
        s = list(self.svd.s)
        s[index] = round_half_away(s[index] + delta, SIGMA_STEP_DECIMALS)
        return self.with_sigma(s)

    def stages(self):
        """Matrices applied at each visual stage: I, Vᵗ, Σ·Vᵗ, then ``A``."""
        return (
            identity(),
            self.svd.vt,
            reconstruct(identity(), self.svd.s, self.svd.vt),
            self.matrix,
        )
