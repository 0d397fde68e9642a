"""Display surfaces for the dashboard.

- terminal_renderer.py: raw-mode ANSI terminal
- simple_renderer.py: headless renderer for demos and tests
"""

from .simple_renderer import SimpleRenderer
from .terminal_renderer import TerminalRenderer, parse_input

__all__ = [
    "SimpleRenderer",
    "TerminalRenderer",
    "parse_input",
]
