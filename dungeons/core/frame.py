"""Off-screen character buffer that panels paint into.

A Frame mirrors the renderer's screen grid: one character and one style per
cell. Writes outside the frame are clipped silently, which keeps every panel
renderer total regardless of region size.
"""

from dataclasses import dataclass
from typing import Optional

from .data import Rect


RESET = "\033[0m"


@dataclass(frozen=True)
class Style:
    """Terminal colours and attributes for a run of cells.

    Colours are ANSI SGR parameter strings such as ``"90"`` (dark gray) or
    ``"38;2;226;232;240"`` (24-bit foreground).
    """
    fg: Optional[str] = None
    bg: Optional[str] = None
    bold: bool = False

    def ansi(self) -> str:
        params = []
        if self.bold:
            params.append("1")
        if self.fg:
            params.append(self.fg)
        if self.bg:
            params.append(self.bg)
        if not params:
            return ""
        return f"\033[{';'.join(params)}m"

    def patch(self, other: "Style") -> "Style":
        """Layer another style on top of this one."""
        return Style(
            fg=other.fg or self.fg,
            bg=other.bg or self.bg,
            bold=self.bold or other.bold,
        )


DEFAULT_STYLE = Style()


class Frame:
    """Character/style grid for a single screen repaint."""

    def __init__(self, width: int, height: int):
        self.area = Rect(0, 0, max(0, width), max(0, height))
        self._cells = [[" " for _ in range(self.area.width)] for _ in range(self.area.height)]
        self._styles = [[DEFAULT_STYLE for _ in range(self.area.width)] for _ in range(self.area.height)]

    @property
    def width(self) -> int:
        return self.area.width

    @property
    def height(self) -> int:
        return self.area.height

    def set_cell(self, x: int, y: int, char: str, style: Optional[Style] = None) -> None:
        if not self.area.contains_point(x, y):
            return
        self._cells[y][x] = char
        if style is not None:
            self._styles[y][x] = self._styles[y][x].patch(style)

    def set_string(self, x: int, y: int, text: str, max_width: Optional[int] = None,
                   style: Optional[Style] = None) -> int:
        """Write text starting at (x, y), one character per cell.

        Returns the number of characters written before clipping.
        """
        if max_width is not None:
            text = text[:max(0, max_width)]
        for offset, char in enumerate(text):
            self.set_cell(x + offset, y, char, style)
        return len(text)

    def set_style(self, region: Rect, style: Style) -> None:
        """Apply a style to every cell of a region."""
        clipped = region.intersection(self.area)
        for y in clipped.rows():
            for x in range(clipped.left, clipped.right):
                self._styles[y][x] = self._styles[y][x].patch(style)

    def char_at(self, x: int, y: int) -> str:
        if not self.area.contains_point(x, y):
            return ""
        return self._cells[y][x]

    def style_at(self, x: int, y: int) -> Style:
        if not self.area.contains_point(x, y):
            return DEFAULT_STYLE
        return self._styles[y][x]

    def text_at(self, x: int, y: int, length: int) -> str:
        """Read back ``length`` characters starting at (x, y)."""
        return "".join(self.char_at(x + offset, y) for offset in range(length))

    def plain_lines(self) -> list[str]:
        return ["".join(row) for row in self._cells]

    def styled_lines(self) -> list[str]:
        """Convert the grid to printable lines with ANSI styling."""
        lines = []
        for y in range(self.height):
            line = []
            for x in range(self.width):
                code = self._styles[y][x].ansi()
                if code:
                    line.append(code + self._cells[y][x] + RESET)
                else:
                    line.append(self._cells[y][x])
            lines.append("".join(line))
        return lines
