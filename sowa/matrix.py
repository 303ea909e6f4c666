"""4x4 transform matrices.

Matrices are numpy arrays in standard mathematical layout: ``m[row, col]``,
column vectors, translation in ``m[:3, 3]``.
"""

from __future__ import annotations

import math
from typing import Optional, Sequence, Tuple

import numpy as np

from .vector2 import Vector2

_EPSILON = 1.1920929e-07


def _translation(x: float, y: float, z: float) -> np.ndarray:
    m = np.eye(4)
    m[:3, 3] = (x, y, z)
    return m


def _scaling(x: float, y: float, z: float) -> np.ndarray:
    return np.diag([x, y, z, 1.0])


def _rotation_x(angle: float) -> np.ndarray:
    c, s = math.cos(angle), math.sin(angle)
    m = np.eye(4)
    m[1, 1], m[1, 2], m[2, 1], m[2, 2] = c, -s, s, c
    return m


def _rotation_y(angle: float) -> np.ndarray:
    c, s = math.cos(angle), math.sin(angle)
    m = np.eye(4)
    m[0, 0], m[0, 2], m[2, 0], m[2, 2] = c, s, -s, c
    return m


def _rotation_z(angle: float) -> np.ndarray:
    c, s = math.cos(angle), math.sin(angle)
    m = np.eye(4)
    m[0, 0], m[0, 1], m[1, 0], m[1, 1] = c, -s, s, c
    return m


def calculate_transform(
    position: Vector2,
    rotation: float,
    scale: Vector2,
    offset: Optional[Vector2] = None,
    base: Optional[np.ndarray] = None,
) -> np.ndarray:
    """Build a 2D transform: translate, rotate by ``-rotation`` degrees, offset, scale."""
    offset = offset if offset is not None else Vector2(0.0, 0.0)
    transform = np.eye(4) if base is None else np.asarray(base, dtype=float)
    transform = transform @ _translation(position.x, position.y, 0.0)
    transform = transform @ _rotation_z(math.radians(-rotation))
    transform = transform @ _translation(offset.x, offset.y, 0.0)
    return transform @ _scaling(scale.x, scale.y, 1.0)


def calculate_transform_3d(
    position: Sequence[float],
    rotation: Sequence[float],
    scale: Sequence[float],
    base: Optional[np.ndarray] = None,
) -> np.ndarray:
    """Build a 3D transform with rotations (degrees) applied in z, y, x order."""
    transform = np.eye(4) if base is None else np.asarray(base, dtype=float)
    transform = transform @ _translation(*position)
    transform = transform @ _rotation_z(math.radians(rotation[2]))
    transform = transform @ _rotation_y(math.radians(rotation[1]))
    transform = transform @ _rotation_x(math.radians(rotation[0]))
    return transform @ _scaling(*scale)


def _quaternion(cols: list) -> Tuple[float, float, float, float]:
    trace = cols[0][0] + cols[1][1] + cols[2][2]
    if trace > 0.0:
        root = math.sqrt(trace + 1.0)
        w = 0.5 * root
        root = 0.5 / root
        x = root * (cols[1][2] - cols[2][1])
        y = root * (cols[2][0] - cols[0][2])
        z = root * (cols[0][1] - cols[1][0])
        return x, y, z, w

    following = (1, 2, 0)
    i = 0
    if cols[1][1] > cols[0][0]:
        i = 1
    if cols[2][2] > cols[i][i]:
        i = 2
    j = following[i]
    k = following[j]
    root = math.sqrt(cols[i][i] - cols[j][j] - cols[k][k] + 1.0)
    q = [0.0, 0.0, 0.0]
    q[i] = 0.5 * root
    root = 0.5 / root
    q[j] = root * (cols[i][j] + cols[j][i])
    q[k] = root * (cols[i][k] + cols[k][i])
    w = root * (cols[j][k] - cols[k][j])
    return q[0], q[1], q[2], w


def decompose_transform(mat: np.ndarray) -> Tuple[Vector2, float, Vector2]:
    """Split a transform into (position, rotation in degrees, scale).

    Raises ValueError when the matrix cannot be decomposed.
    """
    local = np.array(mat, dtype=float)
    if local.shape != (4, 4):
        raise ValueError("expected a 4x4 matrix")
    if abs(local[3, 3]) <= _EPSILON:
        raise ValueError("matrix is not decomposable: zero homogeneous scale")
    local /= local[3, 3]

    perspective = local.copy()
    perspective[3, :3] = 0.0
    perspective[3, 3] = 1.0
    if abs(np.linalg.det(perspective)) <= _EPSILON:
        raise ValueError("matrix is not decomposable: singular")

    translation = local[:3, 3]
    cols = [local[:3, i].copy() for i in range(3)]

    sx = float(np.linalg.norm(cols[0]))
    cols[0] = cols[0] / sx
    skew_z = float(np.dot(cols[0], cols[1]))
    cols[1] = cols[1] - cols[0] * skew_z
    sy = float(np.linalg.norm(cols[1]))
    cols[1] = cols[1] / sy
    skew_y = float(np.dot(cols[0], cols[2]))
    cols[2] = cols[2] - cols[0] * skew_y
    skew_x = float(np.dot(cols[1], cols[2]))
    cols[2] = cols[2] - cols[1] * skew_x
    sz = float(np.linalg.norm(cols[2]))
    cols[2] = cols[2] / sz

    if float(np.dot(cols[0], np.cross(cols[1], cols[2]))) < 0.0:
        sx, sy, sz = -sx, -sy, -sz
        cols = [-c for c in cols]

    x, y, z, w = _quaternion([list(map(float, c)) for c in cols])
    roll_y = 2.0 * (x * y + w * z)
    roll_x = w * w + x * x - y * y - z * z
    if abs(roll_x) <= _EPSILON and abs(roll_y) <= _EPSILON:
        angle = 0.0
    else:
        angle = math.atan2(roll_y, roll_x)

    position = Vector2(float(translation[0]), float(translation[1]))
    return position, math.degrees(angle), Vector2(sx, sy)


def calculate_ortho(left: float, right: float, bottom: float, top: float) -> np.ndarray:
    """Orthographic projection with a depth range of -128 to 128."""
    near, far = -128.0, 128.0
    m = np.eye(4)
    m[0, 0] = 2.0 / (right - left)
    m[1, 1] = 2.0 / (top - bottom)
    m[2, 2] = -2.0 / (far - near)
    m[0, 3] = -(right + left) / (right - left)
    m[1, 3] = -(top + bottom) / (top - bottom)
    m[2, 3] = -(far + near) / (far - near)
    return m