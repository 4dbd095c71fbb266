"""Connectivity graph over room centers.

A Prim-style spanning tree guarantees every room is reachable; extra random
edges, scaled by the complexity level, add loops so the dungeon is not a
pure tree. Both kinds of edge update ``Room.connected_to`` symmetrically.
"""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING

from warren.environment.generators.pipeline.layer import GenerationLayer
from warren.environment.map import Connection, Room, RoomKind, connect_rooms
from warren.util.coordinates import distance

if TYPE_CHECKING:
    from warren.environment.generators.pipeline.context import GenerationContext
    from warren.util.rng import RandomSource

logger = logging.getLogger(__name__)


def build_spanning_tree(rooms: list[Room]) -> list[Connection]:
    """Connect all rooms by repeatedly attaching the nearest outsider.

    Starts from the first room. Each step scans every (connected,
    unconnected) pair and adds the one with the shortest Euclidean distance
    between integer centers; ties go to the pair found first. O(n^3) in the
    worst case, which is fine for dozens of rooms.
    """
    if len(rooms) < 2:
        return []

    centers = {room.id: room.center() for room in rooms}
    connected: list[Room] = [rooms[0]]
    connected_ids = {rooms[0].id}
    edges: list[Connection] = []

    while len(connected) < len(rooms):
        best: tuple[Room, Room, float] | None = None
        for inside in connected:
            for outside in rooms:
                if outside.id in connected_ids:
                    continue
                d = distance(centers[inside.id], centers[outside.id])
                if best is None or d < best[2]:
                    best = (inside, outside, d)

        assert best is not None
        inside, outside, d = best
        connect_rooms(inside, outside)
        edges.append(Connection(inside.id, outside.id, d, spanning=True))
        connected.append(outside)
        connected_ids.add(outside.id)

    return edges


def add_extra_connections(
    rooms: list[Room], rng: RandomSource, complexity_level: float
) -> list[Connection]:
    """Add up to ``floor(len(rooms) * complexity_level)`` random extra edges.

    Each attempt picks two rooms at random; identical or already connected
    pairs are skipped, so the result may hold fewer edges than attempts.
    """
    if len(rooms) < 2:
        return []

    attempts = math.floor(len(rooms) * complexity_level)
    last = len(rooms) - 1
    edges: list[Connection] = []
    for _ in range(attempts):
        a = rooms[rng.next_int(0, last)]
        b = rooms[rng.next_int(0, last)]
        if a is b or a.is_connected(b.id):
            continue
        connect_rooms(a, b)
        d = distance(a.center(), b.center())
        edges.append(Connection(a.id, b.id, d, spanning=False))
    return edges


class ConnectivityLayer(GenerationLayer):
    """Builds the room graph: spanning tree first, then complexity edges."""

    def apply(self, ctx: GenerationContext) -> None:
        rooms = ctx.rooms_of_kind(RoomKind.ROOM)
        tree = build_spanning_tree(rooms)
        extra = add_extra_connections(rooms, ctx.rng, ctx.config.complexity_level)
        ctx.connections = tree + extra
        logger.debug(
            "Connectivity: %d rooms, %d tree edges, %d extra edges",
            len(rooms),
            len(tree),
            len(extra),
        )
