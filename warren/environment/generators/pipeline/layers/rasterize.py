"""Tilemap rasterization: turning room and corridor footprints into floor.

All carving clips silently to the map bounds.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import TYPE_CHECKING

from warren.environment.generators.pipeline.layer import GenerationLayer
from warren.environment.tile_types import TileType
from warren.util.coordinates import Rect, footprint_offsets

if TYPE_CHECKING:
    import numpy as np

    from warren.environment.generators.pipeline.context import GenerationContext
    from warren.environment.map import Room
    from warren.types import TilePos


def carve_rect(tiles: np.ndarray, rect: Rect) -> None:
    """Mark every in-bounds tile of ``rect`` as FLOOR."""
    map_width, map_height = tiles.shape
    r = rect.clipped(map_width, map_height)
    tiles[r.x1 : r.x2, r.y1 : r.y2] = TileType.FLOOR


def carve_rooms(tiles: np.ndarray, rooms: Iterable[Room]) -> None:
    """Carve each room's full bounding box."""
    for room in rooms:
        carve_rect(tiles, room.bounds)


def carve_corridor(tiles: np.ndarray, path: Iterable[TilePos], width: int) -> None:
    """Carve a ``width``-wide corridor along ``path``.

    Each point gets a square block of side ``width``; ``(width - 1) // 2``
    tiles precede the point on each axis and the remainder follow it.
    """
    lo, hi = footprint_offsets(width)
    for x, y in path:
        carve_rect(tiles, Rect.from_bounds(x + lo, y + lo, x + hi, y + hi))


class RoomCarveLayer(GenerationLayer):
    """Carves every room of the layout into the tilemap."""

    def apply(self, ctx: GenerationContext) -> None:
        carve_rooms(ctx.tiles, ctx.rooms)
