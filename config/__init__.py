"""Viewer configuration modules."""
