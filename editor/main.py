"""
Tiling Brush Editor - Editor Main

Command-line entry point for the editor application.

Usage:
    tiling-editor [width height]

Defaults to a 48x32 cell grid if no size is given.
"""

import logging
import sys

from .application import EditorApplication
from .core.constants import DEFAULT_GRID_HEIGHT, DEFAULT_GRID_WIDTH


def parse_grid_size(args: list[str]) -> tuple[int, int]:
    """
    Parse the grid size from command-line arguments.

    Args:
        args: Arguments without the program name

    Returns:
        (width, height) in cells

    Raises:
        ValueError: If the argument count is wrong or a size is not a positive integer
    """
    if len(args) == 0:
        return DEFAULT_GRID_WIDTH, DEFAULT_GRID_HEIGHT

    if len(args) != 2:
        raise ValueError(f"Expected 0 or 2 arguments, got {len(args)}")

    width, height = int(args[0]), int(args[1])
    if width < 1 or height < 1:
        raise ValueError(f"Grid size must be positive, got {width}x{height}")

    return width, height


def show_usage():
    """Display usage information."""
    print("Usage: tiling-editor [width height]")
    print("")
    print("Arguments:")
    print(f"  width height   Grid size in cells (default: {DEFAULT_GRID_WIDTH} {DEFAULT_GRID_HEIGHT})")
    print("")
    print("Examples:")
    print("  tiling-editor")
    print("  tiling-editor 64 40")


def parse_arguments() -> tuple[int, int]:
    """Parse sys.argv, printing usage and exiting on bad input."""
    try:
        return parse_grid_size(sys.argv[1:])
    except ValueError as e:
        print(f"Error: {e}")
        print("")
        show_usage()
        sys.exit(1)


def main():
    """Main entry point for the editor."""
    width, height = parse_arguments()

    logging.basicConfig(level=logging.INFO, format="%(levelname)s %(name)s: %(message)s")

    app = EditorApplication(width, height)
    app.run()


if __name__ == "__main__":
    main()
