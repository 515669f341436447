"""Floor grid for spatial reference."""

from OpenGL.GL import *
from config import replay as config


class Grid:
    """Draws a square floor grid centred under the scene origin."""
    
    def __init__(self, divisions: int = 10):
        self.base_size = config.GRID["base_size"]
        self.color = config.GRID["color"]
        self.divisions = divisions
    
    def draw(self, height: float = 0.0):
        """
        Draw the grid lines.
        
        Args:
            height: Y coordinate of the floor plane
        """
        e = self.base_size
        step = 2 * e / self.divisions
        
        glBegin(GL_LINES)
        glColor3f(*self.color)
        for i in range(self.divisions + 1):
            offset = -e + i * step
            glVertex3f(offset, height, -e); glVertex3f(offset, height, e)
            glVertex3f(-e, height, offset); glVertex3f(e, height, offset)
        glEnd()
