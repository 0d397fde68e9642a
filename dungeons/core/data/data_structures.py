"""Screen geometry data structures.

Data Flow:
1. Terminal size -> Rect (whole screen)
2. Rect -> Layout engine -> RegionTree of sub-rects
3. Sub-rect -> Panel renderer (border, padding, content)

Rects are never mutated. Every operation returns a new Rect.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class Padding:
    """Inner spacing of a panel, in cells."""
    left: int = 0
    right: int = 0
    top: int = 0
    bottom: int = 0

    @classmethod
    def uniform(cls, value: int) -> "Padding":
        return cls(value, value, value, value)

    @property
    def horizontal(self) -> int:
        return self.left + self.right

    @property
    def vertical(self) -> int:
        return self.top + self.bottom


@dataclass(frozen=True)
class Rect:
    """Rectangular area of the screen in character cells.

    Uses (x, y) for the top-left corner, x growing to the right and y growing
    downwards, matching terminal row/column addressing. Width and height are
    never negative; a Rect with zero width or height is empty and legal.
    """
    x: int = 0
    y: int = 0
    width: int = 0
    height: int = 0

    def __post_init__(self):
        if self.width < 0 or self.height < 0:
            raise ValueError(f"Rect size must be non-negative, got {self.width}x{self.height}")

    def __repr__(self) -> str:
        return f"Rect(x={self.x}, y={self.y}, w={self.width}, h={self.height})"

    @property
    def left(self) -> int:
        return self.x

    @property
    def right(self) -> int:
        """Exclusive right edge."""
        return self.x + self.width

    @property
    def top(self) -> int:
        return self.y

    @property
    def bottom(self) -> int:
        """Exclusive bottom edge."""
        return self.y + self.height

    @property
    def area(self) -> int:
        return self.width * self.height

    def is_empty(self) -> bool:
        return self.width == 0 or self.height == 0

    def contains(self, other: "Rect") -> bool:
        """Check whether another rect lies entirely inside this one.

        Empty rects positioned on or inside the boundary are contained.
        """
        return (
            self.left <= other.left
            and self.top <= other.top
            and other.right <= self.right
            and other.bottom <= self.bottom
        )

    def contains_point(self, x: int, y: int) -> bool:
        return self.left <= x < self.right and self.top <= y < self.bottom

    def intersects(self, other: "Rect") -> bool:
        """Check whether two rects share at least one cell."""
        if self.is_empty() or other.is_empty():
            return False
        return (
            self.left < other.right
            and other.left < self.right
            and self.top < other.bottom
            and other.top < self.bottom
        )

    def intersection(self, other: "Rect") -> "Rect":
        left = max(self.left, other.left)
        top = max(self.top, other.top)
        right = min(self.right, other.right)
        bottom = min(self.bottom, other.bottom)
        return Rect(left, top, max(0, right - left), max(0, bottom - top))

    def inner(self, padding: Padding) -> "Rect":
        """Shrink the rect by a padding, collapsing to zero instead of going negative."""
        if self.width < padding.horizontal or self.height < padding.vertical:
            return Rect(self.x, self.y, 0, 0)
        return Rect(
            self.x + padding.left,
            self.y + padding.top,
            self.width - padding.horizontal,
            self.height - padding.vertical,
        )

    def rows(self):
        """Iterate over the y coordinate of every row in the rect."""
        return range(self.top, self.bottom)
