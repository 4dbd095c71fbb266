from __future__ import annotations

import numpy as np

from warren.environment.tile_types import TileType, new_tilemap


def test_tile_values_are_stable() -> None:
    """Renderers rely on 0 = wall, 1 = floor, 2 = door."""
    assert (TileType.WALL, TileType.FLOOR, TileType.DOOR) == (0, 1, 2)


def test_new_tilemap_is_solid() -> None:
    tiles = new_tilemap(7, 4)

    assert tiles.shape == (7, 4)
    assert tiles.dtype == np.uint8
    assert tiles.flags.f_contiguous
    assert np.all(tiles == TileType.WALL)

