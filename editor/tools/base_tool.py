"""
Tool protocol and base definitions for editor tools.
"""

from enum import Enum
from typing import Protocol


class BrushTool(Enum):
    """Kind of brush operation the host is currently performing."""

    SELECT = "select"
    MOVE = "move"
    PAINT = "paint"
    BOX = "box"
    PICK = "pick"
    ERASE = "erase"
    FLOOD_FILL = "flood_fill"


class Tool(Protocol):
    """Protocol defining the tool interface.

    Tools don't need to inherit from this - they just need to implement these methods.
    This provides duck typing with type checking support.
    """

    def handle_mouse_down(
        self, pos: tuple[int, int], button: int, modifiers: int, context: "ToolContext"
    ) -> "ToolResult":
        """Handle mouse button down event."""
        ...

    def handle_mouse_up(
        self, pos: tuple[int, int], button: int, context: "ToolContext"
    ) -> "ToolResult":
        """Handle mouse button up event."""
        ...

    def handle_mouse_motion(
        self, pos: tuple[int, int], context: "ToolContext"
    ) -> "ToolResult":
        """Handle mouse motion event."""
        ...

    def handle_key_down(
        self, key: int, modifiers: int, context: "ToolContext"
    ) -> "ToolResult":
        """Handle key down event (for tool-specific shortcuts)."""
        ...

    def handle_key_up(self, key: int, context: "ToolContext") -> "ToolResult":
        """Handle key up event."""
        ...

    def draw_overlay(self, context: "ToolContext") -> None:
        """Draw per-frame scene overlay."""
        ...

    def on_activated(self, context: "ToolContext") -> None:
        """Called when tool becomes active."""
        ...

    def on_deactivated(self, context: "ToolContext") -> None:
        """Called when tool is deactivated."""
        ...

    def reset(self) -> None:
        """Reset tool state."""
        ...

    def get_hotkey(self) -> int | None:
        """Return pygame key constant for this tool's activation hotkey.

        Returns None if tool has no hotkey.
        """
        ...


class ToolContext:
    """Context object providing tools access to application state.

    This acts as a facade, limiting what tools can access and preventing
    tight coupling to Application internals.
    """

    def __init__(
        self,
        tilemap,
        view_state,
        screen,
        tool_manager=None,
    ):
        self.tilemap = tilemap
        self.view_state = view_state
        self.screen = screen
        self.tool_manager = tool_manager


class ToolResult:
    """Result of a tool operation."""

    def __init__(
        self,
        handled: bool = False,
        tiles_modified: bool = False,
        message: str | None = None,
    ):
        self.handled = handled
        self.tiles_modified = tiles_modified
        self.message = message

    @staticmethod
    def handled() -> "ToolResult":
        """Event handled but no action needed."""
        return ToolResult(handled=True)

    @staticmethod
    def not_handled() -> "ToolResult":
        """Event not handled."""
        return ToolResult(handled=False)

    @staticmethod
    def modified(message: str | None = None) -> "ToolResult":
        """Tiles were modified."""
        return ToolResult(
            handled=True,
            tiles_modified=True,
            message=message,
        )
