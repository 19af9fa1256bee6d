"""Parallax-aware wallpaper crop geometry."""

__version__ = "1.0.0"
