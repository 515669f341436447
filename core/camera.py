"""Orbital camera that keeps the replayed markers in view."""

import math
import numpy as np
from OpenGL.GL import *
from OpenGL.GLU import *
from config import replay as config


class Camera:
    """Orbital camera with smooth zoom and a target that eases toward the markers."""
    
    def __init__(self, radius: float = None, theta: float = None, phi: float = None):
        self.radius = config.CAMERA["initial_radius"] if radius is None else radius
        self.target_radius = self.radius
        self.theta = config.CAMERA["initial_theta"] if theta is None else theta
        self.phi = config.CAMERA["initial_phi"] if phi is None else phi
        self.target = np.array([0.0, 0.0, 0.0])
        self.focus = self.target.copy()
        self.zoom_smoothing = 8.0
        self.follow_smoothing = 3.0
    
    def get_direction(self) -> np.ndarray:
        """Get the normalized direction vector from target to camera."""
        theta_rad = math.radians(self.theta)
        phi_rad = math.radians(self.phi)
        x = math.cos(phi_rad) * math.cos(theta_rad)
        y = math.sin(phi_rad)
        z = math.cos(phi_rad) * math.sin(theta_rad)
        return np.array([x, y, z])
    
    def get_position(self) -> np.ndarray:
        """Get the camera's world position."""
        return self.target + self.radius * self.get_direction()
    
    def rotate(self, d_theta: float, d_phi: float):
        """Rotate the camera by the given angles in degrees."""
        self.theta = (self.theta + d_theta) % 360
        self.phi = max(
            config.CAMERA["min_phi"],
            min(config.CAMERA["max_phi"], self.phi + d_phi)
        )
    
    def zoom(self, delta: float):
        """Immediately zoom by the given amount."""
        self.radius = max(
            config.CAMERA["min_radius"],
            min(config.CAMERA["max_radius"], self.radius + delta)
        )
        self.target_radius = self.radius
    
    def zoom_smooth(self, delta: float):
        """Smoothly zoom by the given amount."""
        self.target_radius = max(
            config.CAMERA["min_radius"],
            min(config.CAMERA["max_radius"], self.target_radius + delta)
        )
    
    def follow(self, point: np.ndarray):
        """Set the point the camera eases toward (e.g. the head barycenter)."""
        self.focus = np.asarray(point, dtype=np.float64)
    
    def update(self, dt: float):
        """Update zoom and follow state (called each frame)."""
        self.radius += (self.target_radius - self.radius) * self.zoom_smoothing * dt
        self.target = self.target + (self.focus - self.target) * min(1.0, self.follow_smoothing * dt)
    
    def apply(self):
        """Apply the camera transformation to the OpenGL modelview matrix."""
        pos = self.get_position()
        glLoadIdentity()
        
        if self.radius >= 0:
            look_at = self.target
        else:
            look_at = pos - self.get_direction() * 10
        
        gluLookAt(
            pos[0], pos[1], pos[2],
            look_at[0], look_at[1], look_at[2],
            0, 1, 0
        )
