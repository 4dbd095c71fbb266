from __future__ import annotations

from collections import deque
from collections.abc import Iterable

import numpy as np

from warren.environment.generators.dungeon_config import DungeonConfig
from warren.environment.generators.pipeline import GenerationContext
from warren.environment.map import Room
from warren.environment.tile_types import TileType
from warren.types import RoomId, TilePos
from warren.util.rng import RandomSource


def make_context(
    width: int = 30, height: int = 30, seed: int = 0, **overrides
) -> GenerationContext:
    """An empty context with a validated config and a seeded random source."""
    config = DungeonConfig(width=width, height=height, seed=seed, **overrides)
    config.validate()
    return GenerationContext.create_empty(config, RandomSource(seed))


def reachable_room_ids(rooms: Iterable[Room]) -> set[RoomId]:
    """Room ids reachable from the first room over ``connected_to`` edges."""
    by_id = {room.id: room for room in rooms}
    if not by_id:
        return set()

    start = next(iter(by_id))
    seen = {start}
    queue = deque([start])
    while queue:
        room = by_id[queue.popleft()]
        for neighbor_id in room.connected_to:
            if neighbor_id in by_id and neighbor_id not in seen:
                seen.add(neighbor_id)
                queue.append(neighbor_id)
    return seen


def walkable_map(tiles: np.ndarray) -> np.ndarray:
    """Boolean map of floor and door tiles."""
    return (tiles == TileType.FLOOR) | (tiles == TileType.DOOR)


def reachable_tiles(tiles: np.ndarray, start: TilePos) -> set[TilePos]:
    """Walkable tiles 4-connected to ``start``."""
    walkable = walkable_map(tiles)
    width, height = tiles.shape
    seen = {start}
    queue = deque([start])
    while queue:
        x, y = queue.popleft()
        for nx, ny in ((x + 1, y), (x - 1, y), (x, y + 1), (x, y - 1)):
            if (
                0 <= nx < width
                and 0 <= ny < height
                and walkable[nx, ny]
                and (nx, ny) not in seen
            ):
                seen.add((nx, ny))
                queue.append((nx, ny))
    return seen
