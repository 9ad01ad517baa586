"""
Tiling Brush Editor - Tools

Editor tools that drive brushes from pointer input.
"""

from .base_tool import BrushTool, Tool, ToolContext, ToolResult
from .tiling_brush_tool import TilingBrushTool
from .tool_manager import ToolManager

__all__ = [
    "BrushTool",
    "Tool",
    "ToolContext",
    "ToolResult",
    "ToolManager",
    "TilingBrushTool",
]
