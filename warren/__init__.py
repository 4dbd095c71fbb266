"""warren: seeded procedural dungeon generation.

Quick start:
    from warren import DungeonGenerator, render_ascii

    dungeon = DungeonGenerator(width=40, height=30, seed=42).generate()
    print(render_ascii(dungeon))
"""

from warren.environment.ascii import render_ascii
from warren.environment.generators import (
    DungeonConfig,
    DungeonConfigError,
    DungeonData,
    DungeonGenerator,
    DungeonMetadata,
    generate_dungeon,
)
from warren.environment.map import Connection, Door, Room, RoomKind
from warren.environment.tile_types import TileType
from warren.util.rng import RandomSource

__all__ = [
    "Connection",
    "Door",
    "DungeonConfig",
    "DungeonConfigError",
    "DungeonData",
    "DungeonGenerator",
    "DungeonMetadata",
    "RandomSource",
    "Room",
    "RoomKind",
    "TileType",
    "generate_dungeon",
    "render_ascii",
]
