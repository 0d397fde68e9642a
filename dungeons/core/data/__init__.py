"""Core data structures and definitions.

This package contains fundamental data types:
- data_structures.py: Rect and Padding for screen geometry
- dashboard_enums.py: Centralized enums for cell codes, panels, borders and loop state
"""

from .data_structures import Rect, Padding
from .dashboard_enums import (
    CellCode,
    PanelKind,
    BorderType,
    Direction,
    LoopState,
    CELL_GLYPHS,
    FLOOR_GLYPH,
    BORDER_GLYPHS,
)

__all__ = [
    "Rect",
    "Padding",
    "CellCode",
    "PanelKind",
    "BorderType",
    "Direction",
    "LoopState",
    "CELL_GLYPHS",
    "FLOOR_GLYPH",
    "BORDER_GLYPHS",
]
