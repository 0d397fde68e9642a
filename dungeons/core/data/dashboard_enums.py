"""Centralized enums and constants.

This module contains the enums shared across the layout engine, the panel
renderer and the event loop, providing a single source of truth.
"""

from enum import Enum, auto


class CellCode(Enum):
    """Terrain codes stored in the map grid."""
    FLOOR = 0
    WALL = 1
    START = 2
    GOAL = 3


class PanelKind(Enum):
    """Panels painted into the dashboard regions."""
    TITLE = auto()
    DESCRIPTION = auto()
    OPTIONS = auto()
    MAP = auto()
    FOOTER = auto()


class BorderType(Enum):
    """Box-drawing glyph sets for panel borders."""
    PLAIN = auto()
    ROUNDED = auto()
    DOUBLE = auto()


class Direction(Enum):
    """Axis along which a layout splits its area."""
    HORIZONTAL = auto()
    VERTICAL = auto()


class LoopState(Enum):
    """States of the dashboard event loop."""
    RUNNING = auto()
    EXITED = auto()


# Two-character glyph per cell; unknown codes fall back to floor
CELL_GLYPHS = {
    CellCode.FLOOR.value: "  ",
    CellCode.WALL.value: "██",
    CellCode.START.value: "A ",
    CellCode.GOAL.value: "B ",
}

FLOOR_GLYPH = CELL_GLYPHS[CellCode.FLOOR.value]

# Border glyphs: top-left, top-right, bottom-left, bottom-right, horizontal, vertical
BORDER_GLYPHS = {
    BorderType.PLAIN: ("┌", "┐", "└", "┘", "─", "│"),
    BorderType.ROUNDED: ("╭", "╮", "╰", "╯", "─", "│"),
    BorderType.DOUBLE: ("╔", "╗", "╚", "╝", "═", "║"),
}
