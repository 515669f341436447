"""Marker, path trail and density rendering for the replay viewer."""

from typing import Mapping, Sequence

import numpy as np
from OpenGL.GL import *

from config import replay as config
from trajectory.trace import TraceWindow


class MarkerRenderer:
    """Draws one recording's markers, rigid frames and path trail (scene units)."""
    
    def __init__(self):
        self.point_size = config.MARKERS["point_size"]
        self.axis_length = config.MARKERS["axis_length"]
        self.hull_alpha = config.MARKERS["hull_alpha"]
        self.transparent = False
    
    def toggle_transparency(self):
        self.transparent = not self.transparent
        print(f"[Replay] Transparency enabled: {self.transparent}")
    
    def draw_markers(self, sample: Mapping[str, np.ndarray]):
        """Draw every marker group of one sample as colored points."""
        glPointSize(self.point_size)
        glBegin(GL_POINTS)
        for group, names in config.MARKER_GROUPS.items():
            glColor3f(*config.COLORS[group])
            for name in names:
                if name in sample:
                    glVertex3f(*sample[name])
        glEnd()
    
    def draw_hull(self, points: Sequence[np.ndarray], color):
        """Outline (solid) or fill (transparent) of a marker tree's corners."""
        if self.transparent:
            glEnable(GL_BLEND)
            glBlendFunc(GL_SRC_ALPHA, GL_ONE_MINUS_SRC_ALPHA)
            glDepthMask(GL_FALSE)
            glColor4f(color[0], color[1], color[2], self.hull_alpha)
            glBegin(GL_POLYGON)
        else:
            glColor3f(*color)
            glBegin(GL_LINE_LOOP)
        for p in points:
            glVertex3f(*p)
        glEnd()
        if self.transparent:
            glDepthMask(GL_TRUE)
            glDisable(GL_BLEND)
    
    def draw_frame(self, origin: np.ndarray, axes: Sequence[np.ndarray]):
        """Draw a local coordinate frame as red/green/blue axis lines."""
        colors = ((1.0, 0.2, 0.2), (0.2, 1.0, 0.2), (0.3, 0.3, 1.0))
        glBegin(GL_LINES)
        for axis, color in zip(axes, colors):
            end = origin + axis * self.axis_length
            glColor3f(*color)
            glVertex3f(*origin)
            glVertex3f(*end)
        glEnd()
    
    def draw_trace(self, window: TraceWindow, points: np.ndarray):
        """
        Draw the path trail; the part behind the current sample uses the past
        color, the part from the current sample onwards the future color.
        
        Args:
            window: Window bounds within the series
            points: Window points already converted to scene units
        """
        if len(points) < 2:
            return
        split = window.past_count
        
        glLineWidth(2.0)
        if split > 0:
            glColor3f(*config.TRACE["past_color"])
            glBegin(GL_LINE_STRIP)
            # Include the current sample so both halves connect
            for p in points[:split + 1]:
                glVertex3f(*p)
            glEnd()
        if window.future_count > 1:
            glColor3f(*config.TRACE["future_color"])
            glBegin(GL_LINE_STRIP)
            for p in points[split:]:
                glVertex3f(*p)
            glEnd()
        glLineWidth(1.0)
    
    def draw_density(self, centers: np.ndarray, densities: np.ndarray):
        """Draw occupied voxels as points whose opacity follows their density."""
        if len(centers) == 0:
            return
        r, g, b = config.COLORS["density"]
        glEnable(GL_BLEND)
        glBlendFunc(GL_SRC_ALPHA, GL_ONE)
        glPointSize(config.DENSITY["point_size"])
        glBegin(GL_POINTS)
        for center, density in zip(centers, densities):
            glColor4f(r, g, b, float(min(1.0, density)))
            glVertex3f(*center)
        glEnd()
        glDisable(GL_BLEND)
