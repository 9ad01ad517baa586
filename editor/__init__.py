"""
Tiling Brush Editor - Editor Package

A Pygame-based host for the tiling brush.
"""

from .application import EditorApplication
from .main import main

__all__ = ['EditorApplication', 'main']
