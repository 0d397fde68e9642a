"""Map grid model.

The grid is built once at startup and never changes. Codes outside the glyph
table are stored as floor, so every stored code has a glyph and none of them
can be mistaken for the out-of-bounds sentinel.
"""

from collections.abc import Iterator, Sequence
from dataclasses import dataclass, field

import numpy as np

from ..core.data import CELL_GLYPHS, FLOOR_GLYPH, CellCode


# Returned by cell_at for positions outside the grid; never stored
OUT_OF_BOUNDS = -1

SAMPLE_MAP = [
    [1, 1, 1, 1, 1, 1, 1, 1, 1, 1],
    [1, 2, 0, 0, 0, 0, 0, 1, 0, 1],
    [1, 1, 0, 1, 0, 1, 0, 1, 0, 1],
    [1, 0, 1, 0, 0, 1, 0, 0, 0, 1],
    [1, 0, 0, 0, 1, 0, 0, 1, 1, 1],
    [1, 0, 1, 0, 0, 1, 0, 0, 0, 1],
    [1, 0, 0, 1, 0, 0, 1, 0, 1, 1],
    [1, 1, 0, 0, 0, 1, 1, 0, 0, 1],
    [1, 0, 0, 1, 0, 0, 0, 0, 3, 1],
    [1, 1, 1, 1, 1, 1, 1, 1, 1, 1],
]


@dataclass(frozen=True, eq=False)
class Grid:
    """Read-only 2-D grid of cell codes, indexed [row][col]."""
    cells: np.ndarray = field(repr=False)

    def __post_init__(self):
        # Object dtype holds codes of any size until they are normalized
        raw = np.asarray(self.cells, dtype=object)
        if raw.ndim == 1 and raw.size == 0:
            raw = raw.reshape(0, 0)
        if raw.ndim != 2:
            raise ValueError(f"Grid must be two-dimensional, got {raw.ndim} dimensions")

        floor = CellCode.FLOOR.value
        cells = np.array(
            [[code if code in CELL_GLYPHS else floor for code in row] for row in raw.tolist()],
            dtype=np.int32,
        ).reshape(raw.shape)
        # Lock the buffer so the grid stays immutable for the session
        cells.flags.writeable = False
        object.__setattr__(self, "cells", cells)

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]]) -> "Grid":
        """Build a grid from equal-length rows of integer codes.

        Codes without a glyph are stored as floor.

        Raises:
            ValueError: Rows differ in length.
        """
        rows = [list(row) for row in rows]
        if rows:
            width = len(rows[0])
            for index, row in enumerate(rows):
                if len(row) != width:
                    raise ValueError(
                        f"Grid rows must have equal length: row 0 has {width}, row {index} has {len(row)}"
                    )
            return cls(rows)
        return cls(np.zeros((0, 0), dtype=np.int32))

    @classmethod
    def sample(cls) -> "Grid":
        return cls.from_rows(SAMPLE_MAP)

    @property
    def rows(self) -> int:
        return int(self.cells.shape[0])

    @property
    def cols(self) -> int:
        return int(self.cells.shape[1])

    def dimensions(self) -> tuple[int, int]:
        return (self.rows, self.cols)

    def is_valid_position(self, row: int, col: int) -> bool:
        return 0 <= row < self.rows and 0 <= col < self.cols

    def cell_at(self, row: int, col: int) -> int:
        """Return the stored code at (row, col), or OUT_OF_BOUNDS outside the grid."""
        if not self.is_valid_position(row, col):
            return OUT_OF_BOUNDS
        return int(self.cells[row, col])

    def glyph_at(self, row: int, col: int) -> str:
        """Two-character glyph for a cell; unknown and out-of-bounds codes draw as floor."""
        return CELL_GLYPHS.get(self.cell_at(row, col), FLOOR_GLYPH)

    def render_rows(self) -> list[str]:
        """Glyph text for every row, top to bottom."""
        return [
            "".join(CELL_GLYPHS.get(int(code), FLOOR_GLYPH) for code in row)
            for row in self.cells
        ]

    def __iter__(self) -> Iterator[tuple[int, ...]]:
        for row in self.cells:
            yield tuple(int(code) for code in row)
