"""
Tiling Brush Editor - Controllers Module

Viewport and coordinate transformations.
"""

from .view_state import ViewState

__all__ = ['ViewState']
