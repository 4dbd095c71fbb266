"""Rectangle and tile-position helpers shared by the generation layers."""

from __future__ import annotations

import math

from warren.types import TileCoord, TilePos, Vector


class Rect:
    """Rectangle/bounding box in tile coordinates.

    ``x2``/``y2`` are exclusive: a Rect(2, 3, 4, 5) covers tiles
    x in [2, 6) and y in [3, 8).
    """

    def __init__(self, x: TileCoord, y: TileCoord, w: TileCoord, h: TileCoord) -> None:
        self.x1: TileCoord = x
        self.y1: TileCoord = y
        self.x2: TileCoord = x + w
        self.y2: TileCoord = y + h

    @classmethod
    def from_bounds(
        cls, x1: TileCoord, y1: TileCoord, x2: TileCoord, y2: TileCoord
    ) -> Rect:
        """Create a Rect from corner coordinates (x1, y1, x2, y2)."""
        width = x2 - x1
        height = y2 - y1
        return cls(x1, y1, width, height)

    @property
    def width(self) -> TileCoord:
        return self.x2 - self.x1

    @property
    def height(self) -> TileCoord:
        return self.y2 - self.y1

    @property
    def area(self) -> int:
        return self.width * self.height

    def center(self) -> TilePos:
        """Integer center tile, rounding toward the top-left."""
        return (self.x1 + self.width // 2, self.y1 + self.height // 2)

    def exact_center(self) -> Vector:
        return (self.x1 + self.width / 2, self.y1 + self.height / 2)

    def overlap(self, other: Rect) -> tuple[int, int]:
        """Return the (x, y) extent of the overlap, zero on a disjoint axis."""
        x_overlap = max(0, min(self.x2, other.x2) - max(self.x1, other.x1))
        y_overlap = max(0, min(self.y2, other.y2) - max(self.y1, other.y1))
        return (x_overlap, y_overlap)

    def union(self, other: Rect) -> Rect:
        """Smallest rect covering both."""
        return Rect.from_bounds(
            min(self.x1, other.x1),
            min(self.y1, other.y1),
            max(self.x2, other.x2),
            max(self.y2, other.y2),
        )

    def clipped(self, map_width: TileCoord, map_height: TileCoord) -> Rect:
        """Return a copy clipped to ``[0, map_width) x [0, map_height)``."""
        x1 = min(max(self.x1, 0), map_width)
        y1 = min(max(self.y1, 0), map_height)
        x2 = min(max(self.x2, x1), map_width)
        y2 = min(max(self.y2, y1), map_height)
        return Rect.from_bounds(x1, y1, x2, y2)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Rect):
            return NotImplemented
        return (self.x1, self.y1, self.x2, self.y2) == (
            other.x1,
            other.y1,
            other.x2,
            other.y2,
        )

    def __hash__(self) -> int:
        return hash((self.x1, self.y1, self.x2, self.y2))

    def __repr__(self) -> str:
        return f"Rect(x1={self.x1}, y1={self.y1}, x2={self.x2}, y2={self.y2})"


# =============================================================================
# BOUNDS CHECKING HELPERS
# =============================================================================


def is_valid_tile_pos(
    pos: TilePos, map_width: TileCoord, map_height: TileCoord
) -> bool:
    """Check if tile position is within map bounds."""
    x, y = pos
    return 0 <= x < map_width and 0 <= y < map_height


def distance(a: tuple[float, float], b: tuple[float, float]) -> float:
    """Euclidean distance between two points."""
    return math.dist(a, b)


def manhattan(a: TilePos, b: TilePos) -> int:
    """Sum of absolute coordinate differences."""
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


def footprint_offsets(width: int) -> tuple[int, int]:
    """Half-open offset range of a ``width``-wide block centred on a tile.

    ``(width - 1) // 2`` tiles precede the centre and the rest (centre
    included) follow it, so even widths always extend the same way and
    parallel corridor edges never drift. A block for tile ``p`` covers
    ``range(p + lo, p + hi)`` on each axis.
    """
    before = (width - 1) // 2
    return (-before, width - before)
