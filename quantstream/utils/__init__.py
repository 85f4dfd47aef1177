"""Utility containers used by the indicator implementations."""

from .window import BoundedWindow

__all__ = ["BoundedWindow"]
