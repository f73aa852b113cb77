"""Domain interfaces."""

from .layout_engine import LayoutEngine

__all__ = ["LayoutEngine"]
