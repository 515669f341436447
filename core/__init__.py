"""Core application components."""

from .session import ReplaySession, SeriesView

__all__ = ["ReplaySession", "SeriesView"]
