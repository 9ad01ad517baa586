"""
Tiling Brush Editor - Editor Application

Main application class: a pygame window hosting the tiling brush over an
in-memory tilemap.
"""
from typing import Optional

import pygame
from pygame import Rect

from .core.constants import *
from .controllers.view_state import ViewState
from .rendering.grid_renderer import GridRenderer
from .rendering.tilemap_renderer import TilemapRenderer
from .tools.base_tool import ToolContext
from .tools.tiling_brush_tool import TilingBrushTool
from .tools.tool_manager import ToolManager
from tiling.core.geometry import CellPos
from tiling.core.tilemap import Tilemap


def seed_tilemap(tilemap: Tilemap):
    """Paint a few sample blocks to pick from."""
    # 4x4 checker block
    for y in range(1, 5):
        for x in range(1, 5):
            tilemap.set_tile(CellPos(x, y), (x + y) % 2)
    # 3x2 striped block
    for y in range(1, 3):
        for x in range(7, 10):
            tilemap.set_tile(CellPos(x, y), 2 + (x - 7))
    tilemap.modified = False


class EditorApplication:
    """Main editor application."""

    def __init__(self, grid_width: int = DEFAULT_GRID_WIDTH, grid_height: int = DEFAULT_GRID_HEIGHT):
        pygame.init()

        self.screen_width = SCREEN_WIDTH
        self.screen_height = SCREEN_HEIGHT
        self.screen = pygame.display.set_mode(
            (self.screen_width, self.screen_height),
            pygame.RESIZABLE
        )
        pygame.display.set_caption("Tiling Brush Editor")

        self.font = pygame.font.SysFont("monospace", 14)

        self.grid_width = grid_width
        self.grid_height = grid_height
        self.tilemap = Tilemap()
        seed_tilemap(self.tilemap)

        self.view_state = ViewState(self._get_canvas_rect(), scale=DEFAULT_SCALE)
        self.tool_manager = ToolManager()
        self.tool_manager.register_tool("tiling_brush", TilingBrushTool())
        self.context = ToolContext(
            self.tilemap, self.view_state, self.screen, tool_manager=self.tool_manager
        )
        self.tool_manager.set_active_tool("tiling_brush", self.context)

        self.status_message: Optional[str] = None
        self.edit_count = 0
        self.running = True
        self.clock = pygame.time.Clock()

    def _get_canvas_rect(self) -> Rect:
        """Get the canvas drawing area."""
        return Rect(
            CANVAS_OFFSET_X,
            CANVAS_OFFSET_Y,
            self.screen_width - CANVAS_OFFSET_X,
            self.screen_height - CANVAS_OFFSET_Y - STATUS_HEIGHT
        )

    def _on_resize(self, width: int, height: int):
        """Handle window resize."""
        self.screen_width = width
        self.screen_height = height
        self.screen = pygame.display.set_mode((self.screen_width, self.screen_height), pygame.RESIZABLE)
        self.view_state.canvas_rect = self._get_canvas_rect()
        self.context.screen = self.screen
        tool = self.tool_manager.get_active_tool()
        if tool and hasattr(tool, "set_screen"):
            tool.set_screen(self.screen)

    def handle_events(self, events) -> bool:
        """Dispatch events to the active tool. Returns False when the app should quit."""
        tool = self.tool_manager.get_active_tool()

        for event in events:
            if event.type == pygame.QUIT:
                return False

            if event.type == pygame.VIDEORESIZE:
                self._on_resize(event.w, event.h)
                continue

            if event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    return False
                if event.key == pygame.K_c and event.mod & pygame.KMOD_CTRL:
                    self.tilemap.clear()
                    continue
                if self.tool_manager.activate_by_hotkey(event.key, self.context):
                    tool = self.tool_manager.get_active_tool()
                    continue
                if tool:
                    tool.handle_key_down(event.key, event.mod, self.context)
                continue

            if tool is None:
                continue

            result = None
            if event.type == pygame.MOUSEBUTTONDOWN:
                result = tool.handle_mouse_down(event.pos, event.button, pygame.key.get_mods(), self.context)
            elif event.type == pygame.MOUSEBUTTONUP:
                result = tool.handle_mouse_up(event.pos, event.button, self.context)
            elif event.type == pygame.MOUSEMOTION:
                result = tool.handle_mouse_motion(event.pos, self.context)
            elif event.type == pygame.KEYUP:
                result = tool.handle_key_up(event.key, self.context)

            if result is None:
                continue
            if result.tiles_modified:
                self.edit_count += 1
            if result.message:
                self.status_message = result.message

        return True

    def run(self):
        """Main loop."""
        while self.running:
            events = pygame.event.get()
            self.running = self.handle_events(events)
            self._render()
            self.clock.tick(FPS)

        self.tool_manager.deactivate(self.context)
        pygame.quit()

    def _render(self):
        """Render the editor."""
        self.screen.fill(COLOR_BG)

        self.screen.set_clip(self.view_state.canvas_rect)
        TilemapRenderer.render(self.screen, self.view_state, self.tilemap)
        GridRenderer.render(self.screen, self.view_state, self.grid_width, self.grid_height)
        tool = self.tool_manager.get_active_tool()
        if tool:
            tool.draw_overlay(self.context)
        self.screen.set_clip(None)

        self._render_toolbar()
        self._render_status()

        pygame.display.flip()

    def _render_toolbar(self):
        """Render toolbar with the active tool name and key help."""
        pygame.draw.rect(self.screen, COLOR_TOOLBAR, (0, 0, self.screen_width, TOOLBAR_HEIGHT))
        name = self.tool_manager.get_active_tool_name() or "none"
        help_text = f"Tool: {name}   LMB paint | RMB drag pick | Shift+LMB move | Ctrl+C clear | Esc quit"
        text = self.font.render(help_text, True, COLOR_TEXT)
        self.screen.blit(text, (10, (TOOLBAR_HEIGHT - text.get_height()) // 2))

    def _render_status(self):
        """Render status bar."""
        status_y = self.screen_height - STATUS_HEIGHT
        pygame.draw.rect(self.screen, COLOR_STATUS, (0, status_y, self.screen_width, STATUS_HEIGHT))

        text_surf = self.font.render(self.status_text(), True, COLOR_TEXT)
        self.screen.blit(text_surf, (10, status_y + 8))

    def status_text(self) -> str:
        """Tile count, unsaved-changes marker, edit count and the last tool message."""
        text = f"Tiles: {len(self.tilemap)}"
        if self.tilemap.modified:
            text += " *"
        text += f"  Edits: {self.edit_count}"
        if self.status_message:
            text += f"  |  {self.status_message}"
        return text
