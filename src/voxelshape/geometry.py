"""Element approximation: cuboid corners, renderer-style rotation, tight bounds.

All vertex math is done in float32 so results match the block renderer the
shapes are meant for.  The rotation convention (plane per axis, negated
angle) mirrors that renderer's handedness and must not be replaced with a
textbook rotation matrix.
"""

from __future__ import annotations

import logging
import math
from typing import Dict, Tuple

import numpy as np

from voxelshape.contracts import AABox, Axis, CuboidElement, ModelRotation, Vector3
from voxelshape.errors import EmptyVertexSetError

logger = logging.getLogger(__name__)

_PI_F32 = np.float32(np.pi)
_DEG_TO_RAD = (np.float32(2.0) * _PI_F32) / np.float32(360.0)

# (first, second) vertex columns of the rotation plane for each axis.
# X rotates in (z, y), Y in (x, z), Z in (y, x).
_PLANE_COLUMNS: Dict[Axis, Tuple[int, int]] = {
    Axis.X: (2, 1),
    Axis.Y: (0, 2),
    Axis.Z: (1, 0),
}

DEFAULT_PIVOT = Vector3(8.0, 8.0, 8.0)


def into_verts(box: AABox) -> np.ndarray:
    """Return the 8 corners of *box* as a (8, 3) float32 array.

    Bottom face (min z) first, then top face, each walked
    (0,0) -> (1,0) -> (1,1) -> (0,1) in x/y.
    """
    x0, y0, z0, x1, y1, z1 = box.as_tuple()
    return np.array(
        [
            [x0, y0, z0],
            [x1, y0, z0],
            [x1, y1, z0],
            [x0, y1, z0],
            [x0, y0, z1],
            [x1, y0, z1],
            [x1, y1, z1],
            [x0, y1, z1],
        ],
        dtype=np.float32,
    )


def rotate(
    vertices: np.ndarray,
    origin: Vector3,
    axis: Axis,
    angle: float,
) -> np.ndarray:
    """Rotate *vertices* about *origin* on *axis* by *angle* degrees.

    The angle is negated before use; with (u, v) the plane columns for the
    axis, ``u' = u*cos - v*sin`` and ``v' = v*cos + u*sin``.  Returns a new
    array; *vertices* is left untouched.
    """
    pivot = origin.as_array()
    local = np.asarray(vertices, dtype=np.float32) - pivot

    theta = np.float32(-np.float32(angle)) * _DEG_TO_RAD
    # Correctly rounded float32 cos/sin, as libm computes them.
    cos_t = np.float32(math.cos(float(theta)))
    sin_t = np.float32(math.sin(float(theta)))

    u_col, v_col = _PLANE_COLUMNS[axis]
    u = local[:, u_col]
    v = local[:, v_col]
    u_rot = u * cos_t - v * sin_t
    v_rot = v * cos_t + u * sin_t

    rotated = local.copy()
    rotated[:, u_col] = u_rot
    rotated[:, v_col] = v_rot
    return rotated + pivot


def bounds_of(vertices: np.ndarray) -> AABox:
    """Tight axis-aligned bounds of a vertex set."""
    verts = np.asarray(vertices, dtype=np.float32)
    if verts.ndim != 2 or verts.shape[0] == 0:
        raise EmptyVertexSetError("Cannot compute bounds of an empty vertex set")
    lo = verts.min(axis=0)
    hi = verts.max(axis=0)
    return AABox(
        float(lo[0]), float(lo[1]), float(lo[2]),
        float(hi[0]), float(hi[1]), float(hi[2]),
    )


def approximate(
    element: CuboidElement,
    model_rotation: ModelRotation,
    pivot: Vector3 = DEFAULT_PIVOT,
) -> AABox:
    """Approximate a (possibly rotated) element by its enclosing AABox.

    The element's own rotation is applied first, with its angle as declared.
    Then each non-zero model rotation component (x, then y, then z) is
    applied about *pivot* with the angle negated.  Zero components are
    skipped outright rather than rotated by 0 degrees.
    """
    verts = into_verts(AABox.from_corners(element.from_corner, element.to_corner))

    rot = element.rotation
    if rot is not None:
        verts = rotate(verts, rot.origin, rot.axis, rot.angle)

    if model_rotation.x != 0.0:
        verts = rotate(verts, pivot, Axis.X, -model_rotation.x)
    if model_rotation.y != 0.0:
        verts = rotate(verts, pivot, Axis.Y, -model_rotation.y)
    if model_rotation.z != 0.0:
        verts = rotate(verts, pivot, Axis.Z, -model_rotation.z)

    box = bounds_of(verts)
    logger.debug("Approximated element %s -> %s", element.name or "<unnamed>", box.as_tuple())
    return box
