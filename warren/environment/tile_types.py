"""
Tile types for the dungeon grid.

The tilemap is a NumPy ``uint8`` array of `TileType` values with shape
``(width, height)``, indexed ``tiles[x, y]``. The numeric values are part of
the output contract consumed by renderers: 0 = wall, 1 = floor, 2 = door.
"""

from enum import IntEnum

import numpy as np

from warren.types import TileCoord


class TileType(IntEnum):
    WALL = 0
    FLOOR = 1
    DOOR = 2


def new_tilemap(width: TileCoord, height: TileCoord) -> np.ndarray:
    """Create a solid map: every tile is WALL."""
    return np.full(
        (width, height),
        fill_value=TileType.WALL,
        dtype=np.uint8,
        order="F",
    )
