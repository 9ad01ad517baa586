"""
Tiling Brush Editor - Core Module

Configuration constants.
"""

from . import constants

__all__ = ['constants']
