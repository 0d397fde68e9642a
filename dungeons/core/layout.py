"""Layout partitioning engine.

Splits a screen rectangle into named sub-rectangles from a fixed set of
constraints. The dashboard shape is constant:

    +--------------------------------------+
    | title (1 row)                        |
    +-------------+------------------------+
    | description |                        |
    | (25%)       |                        |
    +-------------+  map (75% width)       |
    | options     |                        |
    | (75%)       |                        |
    +-------------+------------------------+
    | footer (3 rows)                      |
    +--------------------------------------+

Everything here is a pure function of the input area. Any size, including
0x0, produces a valid (possibly empty) region tree.
"""

from dataclasses import dataclass
from typing import Iterator, Union

from .data import Direction, PanelKind, Rect


@dataclass(frozen=True)
class Length:
    """Fixed size along the split axis."""
    value: int


@dataclass(frozen=True)
class Min:
    """At least ``value`` cells; also absorbs any space left over by the split."""
    value: int = 0


@dataclass(frozen=True)
class Percentage:
    """Share of the split area, rounded down."""
    value: int


Constraint = Union[Length, Min, Percentage]


def solve_sizes(total: int, constraints: list[Constraint]) -> list[int]:
    """Resolve constraints into sizes along one axis.

    Fixed lengths are served first, then minimums, then percentages. Each
    allocation is clamped to what is still available, so the sizes never sum
    to more than ``total``. Percentages round down and the last percentage in
    the split picks up the rounding remainder. Space nobody claims goes to the
    last Min constraint, or stays blank when there is none.
    """
    total = max(0, total)
    sizes = [0] * len(constraints)
    remaining = total

    for index, constraint in enumerate(constraints):
        if isinstance(constraint, Length):
            sizes[index] = min(max(0, constraint.value), remaining)
            remaining -= sizes[index]

    min_indices = [i for i, c in enumerate(constraints) if isinstance(c, Min)]
    for index in min_indices:
        sizes[index] = min(max(0, constraints[index].value), remaining)
        remaining -= sizes[index]

    percent_indices = [i for i, c in enumerate(constraints) if isinstance(c, Percentage)]
    claimed_percent = 0
    assigned = 0
    for position, index in enumerate(percent_indices):
        claimed_percent += max(0, constraints[index].value)
        if position == len(percent_indices) - 1:
            size = total * claimed_percent // 100 - assigned
        else:
            size = total * max(0, constraints[index].value) // 100
        size = min(max(0, size), remaining)
        sizes[index] = size
        assigned += size
        remaining -= size

    if min_indices and remaining > 0:
        sizes[min_indices[-1]] += remaining

    return sizes


@dataclass(frozen=True)
class Layout:
    """A single split of an area along one axis."""
    direction: Direction
    constraints: tuple[Constraint, ...]

    @classmethod
    def vertical(cls, constraints: list[Constraint]) -> "Layout":
        return cls(Direction.VERTICAL, tuple(constraints))

    @classmethod
    def horizontal(cls, constraints: list[Constraint]) -> "Layout":
        return cls(Direction.HORIZONTAL, tuple(constraints))

    def split(self, area: Rect) -> tuple[Rect, ...]:
        """Split ``area`` into one contiguous rect per constraint."""
        if self.direction == Direction.VERTICAL:
            sizes = solve_sizes(area.height, list(self.constraints))
            rects = []
            offset = area.y
            for size in sizes:
                rects.append(Rect(area.x, offset, area.width, size))
                offset += size
            return tuple(rects)

        sizes = solve_sizes(area.width, list(self.constraints))
        rects = []
        offset = area.x
        for size in sizes:
            rects.append(Rect(offset, area.y, size, area.height))
            offset += size
        return tuple(rects)


# Fixed dashboard layout
MAIN_LAYOUT = Layout.vertical([Length(1), Min(0), Length(3)])
BLOCK_LAYOUT = Layout.vertical([Percentage(100)])
ROW_LAYOUT = Layout.horizontal([Percentage(25), Percentage(75)])
LEFT_COLUMN_LAYOUT = Layout.vertical([Percentage(25), Percentage(75)])


@dataclass(frozen=True)
class RegionTree:
    """Named regions for one frame.

    ``left_column`` is the narrow column that description and options are
    stacked inside; it is not painted on its own.
    """
    title: Rect
    description: Rect
    options: Rect
    map: Rect
    footer: Rect
    left_column: Rect

    @property
    def rows(self) -> tuple[tuple[Rect, ...], ...]:
        """Content regions as a 2-D arrangement: one row of description, options, map."""
        return ((self.description, self.options, self.map),)

    def panels(self) -> Iterator[tuple[PanelKind, Rect]]:
        """Yield every panel with its region, in paint order."""
        yield PanelKind.TITLE, self.title
        yield PanelKind.DESCRIPTION, self.description
        yield PanelKind.OPTIONS, self.options
        yield PanelKind.MAP, self.map
        yield PanelKind.FOOTER, self.footer

    def region_for(self, kind: PanelKind) -> Rect:
        return dict(self.panels())[kind]


def partition(screen: Rect) -> RegionTree:
    """Compute the dashboard region tree for a screen rectangle."""
    title_area, main_area, footer_area = MAIN_LAYOUT.split(screen)
    (row_area,) = BLOCK_LAYOUT.split(main_area)
    left_column, map_area = ROW_LAYOUT.split(row_area)
    description_area, options_area = LEFT_COLUMN_LAYOUT.split(left_column)

    return RegionTree(
        title=title_area,
        description=description_area,
        options=options_area,
        map=map_area,
        footer=footer_area,
        left_column=left_column,
    )
