"""
Shared data types for texture info conversion.

These are plain dataclasses handed between the BSP reader, the
converter and the MAP writer.
"""

import math
from dataclasses import dataclass, field

import numpy as np

from .config import NEUTRAL_FLAGS, UNRESOLVED_TEXTURE_INDEX


@dataclass
class Vector:
    """3D Vector."""
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def as_array(self) -> np.ndarray:
        return np.array([self.x, self.y, self.z], dtype=np.float64)

    @classmethod
    def from_array(cls, a) -> "Vector":
        return cls(float(a[0]), float(a[1]), float(a[2]))

    def is_finite(self) -> bool:
        """True if no component is infinite or NaN."""
        return all(math.isfinite(c) for c in (self.x, self.y, self.z))

    def is_zero(self) -> bool:
        return self.x == 0 and self.y == 0 and self.z == 0


@dataclass
class Vector2:
    """2D Vector (texture space)."""
    x: float = 0.0
    y: float = 0.0


@dataclass
class Plane:
    """3D Plane (unit normal + distance)."""
    normal: Vector = field(default_factory=Vector)
    distance: float = 0.0


@dataclass
class TextureInfo:
    """Texture projection for a single face.

    In BSP form the axis lengths encode the inverse texture scale and
    ``scale``/``rotation`` are unused. In MAP form the axes are unit
    length and scale and rotation are explicit.
    """
    u_axis: Vector = field(default_factory=Vector)
    v_axis: Vector = field(default_factory=Vector)
    translation: Vector2 = field(default_factory=Vector2)
    scale: Vector2 = field(default_factory=lambda: Vector2(1.0, 1.0))
    flags: int = NEUTRAL_FLAGS
    texture_index: int = UNRESOLVED_TEXTURE_INDEX  # Resolved by the writer
    rotation: int = 0  # Degrees, [0, 360)
