"""Dashboard application layer.

This package contains the pieces that turn the core engine into the DUNGEONS
dashboard:
- grid.py: read-only map grid and the sample map
- app_state.py: exit flag, grid and path statistics
- panels.py: panel renderer for title, description, options, map and footer
- input_handler.py: key -> action dispatch
- dashboard.py: tick-driven render/input loop
"""

from .grid import Grid, SAMPLE_MAP, OUT_OF_BOUNDS
from .app_state import AppState, PathStats
from .panels import PanelData, PanelRenderer, wrap_text
from .input_handler import Action, InputHandler, RESERVED_ACTIONS
from .dashboard import Dashboard

__all__ = [
    "Grid",
    "SAMPLE_MAP",
    "OUT_OF_BOUNDS",
    "AppState",
    "PathStats",
    "PanelData",
    "PanelRenderer",
    "wrap_text",
    "Action",
    "InputHandler",
    "RESERVED_ACTIONS",
    "Dashboard",
]
