"""Rendering components for the replay viewer."""

from .grid import Grid
from .text import TextRenderer
from .markers import MarkerRenderer

__all__ = ["Grid", "TextRenderer", "MarkerRenderer"]
