"""Door placement on room perimeters."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from warren.environment.generators.pipeline.layer import GenerationLayer
from warren.environment.map import Door, RoomKind
from warren.environment.tile_types import TileType
from warren.types import CARDINAL_DIRECTIONS
from warren.util.coordinates import distance, is_valid_tile_pos

if TYPE_CHECKING:
    import numpy as np

    from warren.environment.generators.pipeline.context import GenerationContext
    from warren.environment.map import Room
    from warren.types import TilePos, RoomId

logger = logging.getLogger(__name__)


def _has_floor_neighbor(tiles: np.ndarray, pos: TilePos) -> bool:
    map_width, map_height = tiles.shape
    x, y = pos
    for dx, dy in CARDINAL_DIRECTIONS:
        nx, ny = x + dx, y + dy
        if 0 <= nx < map_width and 0 <= ny < map_height:
            if tiles[nx, ny] == TileType.FLOOR:
                return True
    return False


def door_candidates(tiles: np.ndarray, room: Room) -> list[TilePos]:
    """Perimeter tiles of ``room`` that can hold a door.

    Candidates are the top and bottom rows and the left and right columns
    of the room's bounds, corners excluded, that lie on the map and touch a
    FLOOR tile orthogonally.
    """
    map_width, map_height = tiles.shape
    left, top = room.x, room.y
    right, bottom = room.x + room.width - 1, room.y + room.height - 1

    perimeter: list[TilePos] = []
    for x in range(left + 1, right):
        perimeter.append((x, top))
        perimeter.append((x, bottom))
    for y in range(top + 1, bottom):
        perimeter.append((left, y))
        perimeter.append((right, y))

    return [
        pos
        for pos in perimeter
        if is_valid_tile_pos(pos, map_width, map_height)
        and _has_floor_neighbor(tiles, pos)
    ]


def closest_candidate(candidates: list[TilePos], target: TilePos) -> TilePos | None:
    """Candidate nearest to ``target``; the first one wins ties."""
    if not candidates:
        return None
    return min(candidates, key=lambda pos: distance(pos, target))


class DoorPlacementLayer(GenerationLayer):
    """Places one door per connected pair of ROOM-kind entities.

    Rooms are visited in list order and each room's candidate tiles are
    computed once. For each neighbour the candidate closest to the
    neighbour's center becomes the door. A pair already holding a door is
    skipped, and a room with no usable perimeter tile skips silently,
    leaving the neighbour to place the door from its own side. Corridor
    entities never get doors.
    """

    def apply(self, ctx: GenerationContext) -> None:
        rooms = ctx.rooms_of_kind(RoomKind.ROOM)
        rooms_by_id: dict[RoomId, Room] = {room.id: room for room in rooms}
        placed_pairs: set[frozenset[RoomId]] = set()

        for room in rooms:
            candidates: list[TilePos] | None = None
            for neighbor_id in room.neighbor_ids:
                neighbor = rooms_by_id.get(neighbor_id)
                if neighbor is None:
                    continue
                pair = frozenset((room.id, neighbor_id))
                if pair in placed_pairs:
                    continue

                if candidates is None:
                    candidates = door_candidates(ctx.tiles, room)
                location = closest_candidate(candidates, neighbor.center())
                if location is None:
                    continue

                x, y = location
                ctx.tiles[x, y] = TileType.DOOR
                ctx.doors.append(Door(x, y, (room.id, neighbor_id)))
                placed_pairs.add(pair)

        logger.debug("Doors: %d placed", len(ctx.doors))
