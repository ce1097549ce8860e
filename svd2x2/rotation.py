"""Conversion between 2×2 rotation matrices and signed angles (radians)."""

import math


def angle_of(rotation):
    """Angle θ in ``(-π, π]`` of a rotation ``[[cos θ, -sin θ], [sin θ, cos θ]]``.

    Only the first column is read, so a matrix that is not a pure rotation
    still yields an angle: the direction of its first column.
    """
    return math.atan2(rotation[1][0], rotation[0][0])


def rotation_of(angle):
    """Counter-clockwise rotation matrix for *angle* radians."""
    c = math.cos(angle)
    s = math.sin(angle)
    return ((c, -s), (s, c))
