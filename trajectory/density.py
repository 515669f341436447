"""Voxel grid accumulating how close a marker path passes to each cell."""

import math
from typing import Tuple

import numpy as np
from numba import njit, prange

from .errors import GridMismatch


# ============================================================================
# NUMBA JIT-COMPILED DENSITY KERNEL
# ============================================================================

@njit(parallel=True, fastmath=True, cache=True)
def accumulate_linear_falloff(
    centers: np.ndarray,
    points: np.ndarray,
    ks: float,
    densities: np.ndarray,
    num_voxels: int,
    num_points: int
):
    """Raise every voxel density to the strongest falloff of any path point."""
    for v in prange(num_voxels):
        best = densities[v]
        for p in range(num_points):
            dx = centers[v, 0] - points[p, 0]
            dy = centers[v, 1] - points[p, 1]
            dz = centers[v, 2] - points[p, 2]
            dist = math.sqrt(dx * dx + dy * dy + dz * dz)
            if dist < ks:
                value = 1.0 - dist / ks
                if value > best:
                    best = value
        densities[v] = best


class DensityGrid:
    """
    Cubic grid of n_per_dim^3 voxels spanning length_per_dim on every axis.
    
    Voxel (x, y, z) is centred half a voxel into its cell, measured from
    origin. Densities start at zero.
    """
    
    def __init__(self, n_per_dim: int, length_per_dim: float,
                 origin: Tuple[float, float, float] = (0.0, 0.0, 0.0)):
        self.n_per_dim = n_per_dim
        self.length_per_dim = float(length_per_dim)
        self.origin = np.asarray(origin, dtype=np.float64)
        self.voxel_length = self.length_per_dim / n_per_dim
        
        half = self.voxel_length / 2.0
        axis = half + self.voxel_length * np.arange(n_per_dim, dtype=np.float64)
        gx, gy, gz = np.meshgrid(axis, axis, axis, indexing="ij")
        self.centers = np.stack([gx, gy, gz], axis=-1) + self.origin
        self.densities = np.zeros((n_per_dim, n_per_dim, n_per_dim), dtype=np.float64)
    
    @property
    def shape(self) -> tuple:
        return self.densities.shape
    
    def accumulate(self, points: np.ndarray, ks: float):
        """
        Fold a path into the grid.
        
        Each voxel keeps the larger of its current density and the linear
        falloff of the closest path point.
        
        Args:
            points: (N, 3) positions in the grid's coordinate space
            ks: Falloff radius; points further than ks contribute nothing
        """
        points = np.ascontiguousarray(points, dtype=np.float64).reshape(-1, 3)
        centers = np.ascontiguousarray(self.centers.reshape(-1, 3))
        flat = np.ascontiguousarray(self.densities.reshape(-1))
        accumulate_linear_falloff(centers, points, float(ks), flat, flat.shape[0], points.shape[0])
        self.densities = flat.reshape(self.shape)
    
    def add(self, other: "DensityGrid"):
        if other.n_per_dim != self.n_per_dim or other.length_per_dim != self.length_per_dim:
            raise GridMismatch(
                f"cannot add a {other.n_per_dim}^3/{other.length_per_dim} grid "
                f"to a {self.n_per_dim}^3/{self.length_per_dim} grid"
            )
        self.densities += other.densities
    
    def normalize(self, n: int):
        """Divide every density by n, e.g. the number of grids summed."""
        self.densities /= n
    
    def occupied(self, threshold: float = 0.0) -> Tuple[np.ndarray, np.ndarray]:
        """Centers and densities of the voxels above threshold, for drawing."""
        mask = self.densities > threshold
        return self.centers[mask], self.densities[mask]
