"""Rigid poses of the marker trees at one sample."""

import math
from typing import Mapping, Sequence, Tuple

import numpy as np


def barycenter(sample: Mapping[str, np.ndarray], names: Sequence[str]) -> np.ndarray:
    """Mean position of the named markers."""
    return np.mean([sample[name] for name in names], axis=0)


def _normalized(v: np.ndarray, fallback: np.ndarray) -> np.ndarray:
    length = np.linalg.norm(v)
    if length < 1e-12:
        return fallback
    return v / length


def _perpendicular(v: np.ndarray, right: np.ndarray) -> np.ndarray:
    """Unit component of v orthogonal to right, or None when v is parallel to it."""
    v = v - np.dot(v, right) * right
    length = np.linalg.norm(v)
    if length < 1e-12:
        return None
    return v / length


def marker_frame(top_left: np.ndarray, top_right: np.ndarray,
                 bottom_right: np.ndarray) -> Tuple[np.ndarray, np.ndarray, np.ndarray]:
    """
    Orthonormal frame of a rectangular marker tree.
    
    right runs from the top-right to the top-left marker; up runs from the
    bottom-right to the top-right marker with its component along right
    removed; normal completes the right-handed frame. Collapsed markers fall
    back to the world axes, still orthogonalized against right.
    
    Returns:
        (right, up, normal) unit vectors
    """
    right = _normalized(np.asarray(top_left, dtype=np.float64) - top_right,
                        np.array([1.0, 0.0, 0.0]))
    edge = np.asarray(top_right, dtype=np.float64) - bottom_right
    up = _perpendicular(edge, right)
    for axis in ((0.0, 1.0, 0.0), (0.0, 0.0, 1.0)):
        if up is not None:
            break
        up = _perpendicular(np.array(axis), right)
    normal = np.cross(right, up)
    return right, up, normal


def euler_matrix(rotation: Sequence[float]) -> np.ndarray:
    """
    Rotation matrix for Euler angles in degrees, applied about z, then x,
    then y (the convention the skull offsets were captured in).
    """
    rx, ry, rz = (math.radians(a) for a in rotation)
    cx, sx = math.cos(rx), math.sin(rx)
    cy, sy = math.cos(ry), math.sin(ry)
    cz, sz = math.cos(rz), math.sin(rz)
    
    mx = np.array([[1.0, 0.0, 0.0], [0.0, cx, -sx], [0.0, sx, cx]])
    my = np.array([[cy, 0.0, sy], [0.0, 1.0, 0.0], [-sy, 0.0, cy]])
    mz = np.array([[cz, -sz, 0.0], [sz, cz, 0.0], [0.0, 0.0, 1.0]])
    return my @ mx @ mz
