"""
BSP to MAP Texture Info Utilities

Shared utilities for turning compiled BSP texture info into classic
MAP texture parameters. Used by the decompiler's brush writer.
"""

from .types import Vector, Vector2, Plane, TextureInfo
from .basis import select_basis, texture_axis_from_plane
from .texinfo import bsp_to_map_texinfo, validate_texinfo

__all__ = [
    'Vector',
    'Vector2',
    'Plane',
    'TextureInfo',
    'select_basis',
    'texture_axis_from_plane',
    'bsp_to_map_texinfo',
    'validate_texinfo',
]
