from __future__ import annotations

from typing import Literal, TypeAlias

# =============================================================================
# SPATIAL TYPES
# =============================================================================

TileCoord: TypeAlias = int  # Always integer tile position

# Map coordinates - absolute positions on the dungeon grid
TilePos: TypeAlias = tuple[TileCoord, TileCoord]  # Example: (5, 3) = tile 5,3 on map

# Directions - discrete grid steps
UnitStep: TypeAlias = Literal[-1, 0, 1]
Direction: TypeAlias = tuple[UnitStep, UnitStep]  # Example: (-1, 0) = westward step

# Continuous point, e.g. the exact center of a room
Vector: TypeAlias = tuple[float, float]

# =============================================================================
# GENERATION TYPES
# =============================================================================

# Stable identity of a room or corridor entity, e.g. "room_3".
RoomId: TypeAlias = str

# Seeds are plain integers; None asks the generator to pick one.
RandomSeed: TypeAlias = int | None

RngAlgorithm: TypeAlias = Literal["mersenne", "lcg"]

# Cardinal neighbourhood used by pathfinding and door placement.
CARDINAL_DIRECTIONS: tuple[Direction, ...] = ((0, -1), (1, 0), (0, 1), (-1, 0))
