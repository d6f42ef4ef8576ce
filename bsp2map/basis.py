"""
Canonical texture axes for classic MAP texture rotation.

Quake-style compilers do not derive texture axes from an arbitrary plane
basis. They pick one of three axis-aligned bases depending on the dominant
component of the face normal (floor/ceiling, east/west, north/south). That
basis is what "rotation 0" means in a MAP file, so any rotation recovered
from a BSP has to be measured against it.
"""

from typing import Tuple

from .config import FLOOR_NORMAL_THRESHOLD
from .types import Vector, Plane


def select_basis(normal: Vector) -> Tuple[Vector, Vector]:
    """Return the (base_u, base_v) pair for a unit face normal.

    First match wins:
    - floor/ceiling (|z| > 0.999): U = +X, V = -Y
    - east/west wall (|x| > |y|):  U = +Y, V = -Z
    - north/south wall:            U = +X, V = -Z
    """
    # Floor or ceiling
    if abs(normal.z) > FLOOR_NORMAL_THRESHOLD:
        return Vector(1, 0, 0), Vector(0, -1, 0)
    # Wall facing east or west
    if abs(normal.x) > abs(normal.y):
        return Vector(0, 1, 0), Vector(0, 0, -1)
    # Wall facing north or south
    return Vector(1, 0, 0), Vector(0, 0, -1)


def texture_axis_from_plane(plane: Plane) -> Tuple[Vector, Vector]:
    """Default BSP texture axes for a plane.

    BSP axes carry the inverse scale in their length. The default scale is
    1, so the canonical unit pair is already in BSP convention.
    """
    return select_basis(plane.normal)
