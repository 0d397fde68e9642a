"""Panel rendering for the dashboard.

Each panel paints into its own region of a Frame and never outside it.
Rendering is total: empty regions, regions too small for a border and empty
grids all degrade to drawing less, never to an error.
"""

import textwrap
from dataclasses import dataclass
from typing import Callable, Optional

from ..core.config_loader import DEFAULT_HELP_TEXT, DEFAULT_OPTIONS_TEXT, DEFAULT_TITLE_TEXT
from ..core.data import BORDER_GLYPHS, BorderType, Padding, PanelKind, Rect
from ..core.frame import Frame, Style
from .grid import Grid


NOT_COMPUTED = "not computed"


@dataclass(frozen=True)
class PanelData:
    """Everything the panels need to paint one frame."""
    grid: Grid
    minimal_steps: Optional[int] = None
    total_paths: Optional[int] = None
    title_text: str = DEFAULT_TITLE_TEXT
    options_text: str = DEFAULT_OPTIONS_TEXT
    help_text: str = DEFAULT_HELP_TEXT


class PanelRenderer:
    """Draws bordered, titled panels into a Frame."""

    def __init__(self):
        self.styles = {
            "dim": Style(fg="90"),                      # Dark gray
            "value": Style(fg="32", bold=True),         # Green bold
            "footer_text": Style(fg="38;2;226;232;240", bg="48;2;30;41;59"),  # Slate 200 on slate 800
            "footer_border": Style(fg="38;2;226;232;240"),
        }

        self.panel_titles = {
            PanelKind.DESCRIPTION: "Description",
            PanelKind.OPTIONS: "Options",
            PanelKind.MAP: "Map",
        }

        self.paddings = {
            PanelKind.DESCRIPTION: Padding(left=2, right=5, top=1, bottom=2),
            PanelKind.OPTIONS: Padding(left=5, right=10, top=1, bottom=2),
            PanelKind.MAP: Padding(left=5, right=10, top=1, bottom=2),
            PanelKind.FOOTER: Padding(),
        }

        self._handlers: dict[PanelKind, Callable[[Rect, PanelData, Frame], None]] = {
            PanelKind.TITLE: self._render_title,
            PanelKind.DESCRIPTION: self._render_description,
            PanelKind.OPTIONS: self._render_options,
            PanelKind.MAP: self._render_map,
            PanelKind.FOOTER: self._render_footer,
        }

    def render_panel(self, kind: PanelKind, region: Rect, data: PanelData, frame: Frame) -> None:
        """Paint one panel into ``region``."""
        if region.is_empty():
            return
        self._handlers[kind](region, data, frame)

    def _render_title(self, region: Rect, data: PanelData, frame: Frame) -> None:
        self._draw_centered(frame, data.title_text, region.x, region.y, region.width, self.styles["dim"])

    def _render_description(self, region: Rect, data: PanelData, frame: Frame) -> None:
        inner = self._draw_panel(frame, PanelKind.DESCRIPTION, region, BorderType.ROUNDED)
        if inner.is_empty():
            return

        lines = [
            ("Minimal steps: ", data.minimal_steps),
            ("  Total paths: ", data.total_paths),
        ]
        for offset, (label, value) in enumerate(lines[:inner.height]):
            y = inner.y + offset
            written = frame.set_string(inner.x, y, label, inner.width)
            value_text = NOT_COMPUTED if value is None else str(value)
            frame.set_string(inner.x + written, y, value_text, inner.width - written, self.styles["value"])

    def _render_options(self, region: Rect, data: PanelData, frame: Frame) -> None:
        inner = self._draw_panel(frame, PanelKind.OPTIONS, region, BorderType.ROUNDED)
        if inner.is_empty():
            return

        lines = wrap_text(data.options_text, inner.width)
        for offset, line in enumerate(lines[:inner.height]):
            frame.set_string(inner.x, inner.y + offset, line, inner.width, self.styles["dim"])

    def _render_map(self, region: Rect, data: PanelData, frame: Frame) -> None:
        inner = self._draw_panel(frame, PanelKind.MAP, region, BorderType.ROUNDED)
        if inner.is_empty():
            return

        for offset, line in enumerate(data.grid.render_rows()[:inner.height]):
            frame.set_string(inner.x, inner.y + offset, line, inner.width)

    def _render_footer(self, region: Rect, data: PanelData, frame: Frame) -> None:
        frame.set_style(region, self.styles["footer_text"])
        inner = self._draw_block(frame, region, "", BorderType.DOUBLE, self.styles["footer_border"])
        if inner.is_empty():
            return
        self._draw_centered(frame, data.help_text, inner.x, inner.y, inner.width)

    def _draw_panel(self, frame: Frame, kind: PanelKind, region: Rect, border_type: BorderType) -> Rect:
        """Draw a titled block and return the padded content area."""
        inner = self._draw_block(frame, region, self.panel_titles.get(kind, ""), border_type)
        return inner.inner(self.paddings[kind])

    def _draw_block(self, frame: Frame, region: Rect, title: str, border_type: BorderType,
                    style: Optional[Style] = None) -> Rect:
        """Draw a box border around ``region`` and return the area inside it.

        Regions narrower or shorter than two cells cannot hold a border and
        are left untouched.
        """
        if region.width < 2 or region.height < 2:
            return Rect(region.x, region.y, 0, 0)

        top_left, top_right, bottom_left, bottom_right, horizontal, vertical = BORDER_GLYPHS[border_type]
        left, top = region.left, region.top
        right, bottom = region.right - 1, region.bottom - 1

        for x in range(left + 1, right):
            frame.set_cell(x, top, horizontal, style)
            frame.set_cell(x, bottom, horizontal, style)
        for y in range(top + 1, bottom):
            frame.set_cell(left, y, vertical, style)
            frame.set_cell(right, y, vertical, style)
        frame.set_cell(left, top, top_left, style)
        frame.set_cell(right, top, top_right, style)
        frame.set_cell(left, bottom, bottom_left, style)
        frame.set_cell(right, bottom, bottom_right, style)

        if title:
            frame.set_string(left + 1, top, title, region.width - 2, style)

        return region.inner(Padding.uniform(1))

    def _draw_centered(self, frame: Frame, text: str, x: int, y: int, width: int,
                       style: Optional[Style] = None) -> None:
        """Draw one line of text centred in ``width`` cells, truncating if needed."""
        if width <= 0:
            return
        text = text[:width]
        start = x + (width - len(text)) // 2
        frame.set_string(start, y, text, width, style)


def wrap_text(text: str, width: int) -> list[str]:
    """Wrap on word boundaries, trimming whitespace at both ends of every line."""
    if width <= 0:
        return []
    return [line.strip() for line in textwrap.wrap(" ".join(text.split()), width=width)]
