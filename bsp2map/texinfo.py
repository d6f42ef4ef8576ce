"""
BSP -> MAP Texture Info Conversion.

BSP stores texture mapping as two full 3D texture axes with the scale baked
into their lengths. Classic MAP format instead uses:
- Unit-length texture axes
- Explicit scale values
- A single rotation angle (integer degrees) against the canonical basis

This module reverses that reduction and sanitizes texture info read from
untrusted BSP data. Neither function raises for numeric input; run
validate_texinfo() first when the BSP may contain garbage, since the
converter propagates inf/NaN for zero-length axes.

Usage:
    python -m bsp2map.texinfo --u-axis 0 -1 0 --v-axis -1 0 0 --normal 0 0 1
    python -m bsp2map.texinfo --u-axis 2 0 0 --v-axis 0 0 -1 --offset 50 0 --origin 10 0 0 --normal 0 1 0
"""

import math
from dataclasses import replace
from typing import Optional

import numpy as np

from . import config
from .basis import select_basis, texture_axis_from_plane
from .config import (
    DEGENERATE_AXIS_EPSILON,
    NEUTRAL_FLAGS,
    UNRESOLVED_TEXTURE_INDEX,
)
from .types import Vector, Vector2, Plane, TextureInfo


def bsp_to_map_texinfo(
    texinfo: TextureInfo, world_position: Optional[Vector] = None
) -> TextureInfo:
    """Convert BSP texture info into a MAP-compatible TextureInfo.

    Args:
        texinfo: Source BSP texture info (axis length = 1 / scale)
        world_position: World-space origin of the owning entity. None or the
            zero vector for worldspawn. BSP texture offsets are relative to it.

    Returns:
        New TextureInfo with unit axes, explicit scale, integer rotation in
        [0, 360), placeholder flags and an unresolved texture index.
    """
    if world_position is None:
        world_position = Vector()

    u_raw = texinfo.u_axis.as_array()
    v_raw = texinfo.v_axis.as_array()
    origin = world_position.as_array()

    # Zero-length axes give infinite scale and NaN axes; left to the caller.
    with np.errstate(divide="ignore", invalid="ignore"):
        u_len = math.hypot(*u_raw)
        v_len = math.hypot(*v_raw)
        u_scale = np.divide(1.0, u_len)
        v_scale = np.divide(1.0, v_len)

        u_axis = u_raw / u_len
        v_axis = v_raw / v_len

        # Handedness matches the basis table; swapping it flips walls by 180
        normal = np.cross(u_axis, v_axis)
        normal = normal / np.linalg.norm(normal)

        base_u, base_v = select_basis(Vector.from_array(normal))

        x = np.dot(u_axis, base_u.as_array())
        y = np.dot(u_axis, base_v.as_array())

        # MAP rotation is clockwise looking along the normal, atan2 is CCW
        rotation = -np.degrees(np.arctan2(y, x))
        rotation = ((rotation % 360.0) + 360.0) % 360.0

        # Offsets use the unnormalized axes
        u_translate = texinfo.translation.x - np.dot(u_raw, origin)
        v_translate = texinfo.translation.y - np.dot(v_raw, origin)

    # Round half to even, then wrap again so 359.7 becomes 0 and not 360
    if math.isfinite(rotation):
        rotation_int = int(round(float(rotation))) % 360
    else:
        rotation_int = 0

    return TextureInfo(
        u_axis=Vector.from_array(u_axis),
        v_axis=Vector.from_array(v_axis),
        translation=Vector2(float(u_translate), float(v_translate)),
        scale=Vector2(float(u_scale), float(v_scale)),
        flags=NEUTRAL_FLAGS,
        texture_index=UNRESOLVED_TEXTURE_INDEX,
        rotation=rotation_int,
    )


def _bad_scale(value: float) -> bool:
    return not math.isfinite(value) or value == 0


def validate_texinfo(texinfo: TextureInfo, plane: Plane) -> TextureInfo:
    """Return a copy of texinfo with inf/NaN/zero/degenerate fields replaced.

    - Scale components that are inf, NaN or 0 become 1
    - Translation components that are inf or NaN become 0
    - An axis with any inf/NaN component, or a zero axis, becomes the
      plane's default axis
    - If the axes no longer project onto the face ("texture axis
      perpendicular to face"), both are replaced with the default pair

    Flags, texture index and rotation pass through unchanged.
    """
    default_u, default_v = texture_axis_from_plane(plane)

    scale = texinfo.scale
    scale_x = 1.0 if _bad_scale(scale.x) else scale.x
    scale_y = 1.0 if _bad_scale(scale.y) else scale.y

    translation = texinfo.translation
    translate_x = translation.x if math.isfinite(translation.x) else 0.0
    translate_y = translation.y if math.isfinite(translation.y) else 0.0

    u_axis = texinfo.u_axis
    if not u_axis.is_finite() or u_axis.is_zero():
        u_axis = default_u
    v_axis = texinfo.v_axis
    if not v_axis.is_finite() or v_axis.is_zero():
        v_axis = default_v

    with np.errstate(over="ignore", invalid="ignore"):
        cross = np.cross(u_axis.as_array(), v_axis.as_array())
        along_normal = abs(np.dot(cross, plane.normal.as_array()))
    if along_normal < DEGENERATE_AXIS_EPSILON:
        u_axis, v_axis = default_u, default_v

    return replace(
        texinfo,
        u_axis=Vector(float(u_axis.x), float(u_axis.y), float(u_axis.z)),
        v_axis=Vector(float(v_axis.x), float(v_axis.y), float(v_axis.z)),
        translation=Vector2(float(translate_x), float(translate_y)),
        scale=Vector2(float(scale_x), float(scale_y)),
    )


def print_precision() -> int:
    """Significant digits for CLI output, 6 if the env override is not a number."""
    try:
        return int(config.PRINT_PRECISION)
    except ValueError:
        return 6


def format_texinfo(texinfo: TextureInfo, precision: Optional[int] = None) -> str:
    """MAP-style texture parameters: xoff yoff rotation xscale yscale."""
    if precision is None:
        precision = print_precision()

    def num(value: float) -> str:
        return f"{value:.{precision}g}"

    return " ".join([
        num(texinfo.translation.x),
        num(texinfo.translation.y),
        str(texinfo.rotation),
        num(texinfo.scale.x),
        num(texinfo.scale.y),
    ])


def main(argv=None):
    import argparse

    parser = argparse.ArgumentParser(description="BSP -> MAP texture info converter")
    parser.add_argument("--u-axis", type=float, nargs=3, required=True, metavar=("X", "Y", "Z"),
                        help="BSP U texture axis (length = 1 / scale)")
    parser.add_argument("--v-axis", type=float, nargs=3, required=True, metavar=("X", "Y", "Z"),
                        help="BSP V texture axis (length = 1 / scale)")
    parser.add_argument("--offset", type=float, nargs=2, default=[0.0, 0.0], metavar=("U", "V"),
                        help="BSP texture offsets")
    parser.add_argument("--origin", type=float, nargs=3, default=[0.0, 0.0, 0.0], metavar=("X", "Y", "Z"),
                        help="World position of the owning entity")
    parser.add_argument("--normal", type=float, nargs=3, default=[0.0, 0.0, 1.0], metavar=("X", "Y", "Z"),
                        help="Face plane normal")
    parser.add_argument("--dist", type=float, default=0.0, help="Face plane distance")
    parser.add_argument("--no-validate", action="store_true", help="Skip sanitizing the BSP texture info")
    parser.add_argument("--silent", action="store_true", help="Only print the converted texture parameters")
    args = parser.parse_args(argv)

    texinfo = TextureInfo(
        u_axis=Vector(*args.u_axis),
        v_axis=Vector(*args.v_axis),
        translation=Vector2(*args.offset),
    )
    plane = Plane(normal=Vector(*args.normal), distance=args.dist)

    if not args.no_validate:
        validated = validate_texinfo(texinfo, plane)
        if not args.silent and validated != texinfo:
            print("Texture info sanitized:")
            print(f"  U axis: {validated.u_axis}")
            print(f"  V axis: {validated.v_axis}")
            print(f"  Offset: {validated.translation}")
        texinfo = validated

    result = bsp_to_map_texinfo(texinfo, Vector(*args.origin))
    precision = print_precision()

    if not args.silent:
        print("=" * 60)
        print("MAP TEXTURE INFO")
        print("=" * 60)
        print(f"U axis:   {result.u_axis}")
        print(f"V axis:   {result.v_axis}")
        print(f"Rotation: {result.rotation}")
        print(f"Scale:    {result.scale.x:.{precision}g} {result.scale.y:.{precision}g}")
        print(f"Offset:   {result.translation.x:.{precision}g} {result.translation.y:.{precision}g}")
        print()
    print(format_texinfo(result, precision))


if __name__ == "__main__":
    main()
