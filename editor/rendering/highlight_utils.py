"""
Tiling Brush Editor - Highlight Utilities

Shared drawing primitives for overlays: cell borders and text labels.
"""

from typing import Tuple

import pygame

from editor.core.constants import COLOR_LABEL_SHADOW, COLOR_TEXT


# Gold highlighting constants
HIGHLIGHT_COLOR = (255, 215, 0)  # Gold color
HIGHLIGHT_BORDER_WIDTH = 2


def draw_bounds_border(
    screen,
    rect: pygame.Rect,
    color: Tuple[int, int, int] = HIGHLIGHT_COLOR,
    border_width: int = HIGHLIGHT_BORDER_WIDTH
):
    """
    Draw a colored border just outside a screen rectangle.

    Args:
        screen: Pygame surface to draw on
        rect: Screen rectangle covered by the cells
        color: Border color (default: gold)
        border_width: Border width in pixels (default: 2)
    """
    border_rect = pygame.Rect(
        rect.x - border_width,
        rect.y - border_width,
        rect.width + border_width * 2,
        rect.height + border_width * 2
    )
    pygame.draw.rect(screen, color, border_rect, border_width)


def draw_label(screen, font: pygame.font.Font, pos: Tuple[int, int], text: str) -> pygame.Rect:
    """
    Draw a text label with a one pixel drop shadow.

    Args:
        screen: Pygame surface to draw on
        font: Font to render with
        pos: Top-left screen position of the label
        text: Label text

    Returns:
        Screen rectangle covered by the label
    """
    shadow = font.render(text, True, COLOR_LABEL_SHADOW)
    screen.blit(shadow, (pos[0] + 1, pos[1] + 1))
    text_surf = font.render(text, True, COLOR_TEXT)
    return screen.blit(text_surf, pos)
