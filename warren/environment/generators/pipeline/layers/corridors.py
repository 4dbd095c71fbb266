"""Corridor layer: A* routes between connected rooms, carved into the map."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from warren import config as tuning
from warren.environment.generators.pipeline.layer import GenerationLayer
from warren.environment.map import Room, RoomKind, connect_rooms
from warren.util.coordinates import Rect
from warren.util.pathfinding import find_path

from .rasterize import carve_corridor

if TYPE_CHECKING:
    from warren.environment.generators.pipeline.context import GenerationContext
    from warren.types import TilePos

logger = logging.getLogger(__name__)


def corridor_entity(
    from_room: Room,
    to_room: Room,
    start: TilePos,
    end: TilePos,
    corridor_width: int,
    map_width: int,
    map_height: int,
) -> Room:
    """Build the CORRIDOR-kind entity reported for a carved route.

    It spans the box between the two endpoints, widened by the corridor
    width and clipped to the map. It is for reporting only and takes no
    part in pathfinding or connectivity.
    """
    bounds = Rect(
        min(start[0], end[0]),
        min(start[1], end[1]),
        abs(end[0] - start[0]) + corridor_width,
        abs(end[1] - start[1]) + corridor_width,
    ).clipped(map_width, map_height)
    corridor = Room(
        id=f"corridor_{from_room.id}_{to_room.id}",
        x=bounds.x1,
        y=bounds.y1,
        width=bounds.width,
        height=bounds.height,
        kind=RoomKind.CORRIDOR,
    )
    connect_rooms(corridor, from_room)
    connect_rooms(corridor, to_room)
    return corridor


class CorridorLayer(GenerationLayer):
    """Carves a corridor for every connection in ``ctx.connections``.

    Searches that find no path are logged, recorded in
    ``ctx.failed_connections`` and left uncarved; generation carries on.
    """

    def apply(self, ctx: GenerationContext) -> None:
        width = ctx.config.corridor_width
        corridors: list[Room] = []

        for connection in ctx.connections:
            from_room = ctx.room_by_id(connection.from_id)
            to_room = ctx.room_by_id(connection.to_id)
            if from_room is None or to_room is None:
                raise KeyError(f"Connection references unknown room: {connection}")

            start = from_room.center()
            end = to_room.center()
            path = find_path(ctx.tiles, start, end, width)
            if not path:
                logger.warning(
                    "No corridor route between %s and %s; leaving it uncarved",
                    from_room.id,
                    to_room.id,
                )
                ctx.failed_connections.append(connection)
                continue

            carve_corridor(ctx.tiles, path, width)
            if len(path) > tuning.CORRIDOR_ROOM_MIN_PATH:
                corridors.append(
                    corridor_entity(
                        from_room, to_room, start, end, width, ctx.width, ctx.height
                    )
                )

        ctx.rooms.extend(corridors)
        logger.debug(
            "Corridors: %d carved, %d failed, %d corridor entities",
            len(ctx.connections) - len(ctx.failed_connections),
            len(ctx.failed_connections),
            len(corridors),
        )
