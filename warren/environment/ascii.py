"""Plain-text rendering of a tilemap for debugging and the CLI."""

from __future__ import annotations

import numpy as np

from warren import config
from warren.environment.generators.base import DungeonData
from warren.environment.tile_types import TileType

# Indexed by TileType value.
_GLYPHS = np.array(
    [config.ASCII_WALL, config.ASCII_FLOOR, config.ASCII_DOOR], dtype="<U1"
)
assert len(_GLYPHS) == len(TileType)


def render_ascii(dungeon: DungeonData | np.ndarray) -> str:
    """Render a dungeon (or a bare ``(width, height)`` tile array) as text.

    One line per map row, top row first: ``#`` wall, ``.`` floor, ``+`` door.
    """
    tiles = dungeon.tiles if isinstance(dungeon, DungeonData) else dungeon
    rows = _GLYPHS[tiles.T]
    return "\n".join("".join(row) for row in rows)
