from __future__ import annotations

import logging

import numpy as np
import pytest

from tests.helpers import make_context, reachable_tiles
from warren.environment.generators.pipeline.layers import (
    CorridorLayer,
    RoomCarveLayer,
)
from warren.environment.generators.pipeline.layers.corridors import corridor_entity
from warren.environment.map import Connection, Room, RoomKind, connect_rooms
from warren.environment.tile_types import TileType


def _connected_pair(a: Room, b: Room) -> Connection:
    connect_rooms(a, b)
    return Connection(a.id, b.id, 0.0)


class TestCorridorEntity:
    def test_spans_endpoints(self) -> None:
        a = Room("a", 0, 0, 4, 4)
        b = Room("b", 10, 5, 4, 4)

        corridor = corridor_entity(a, b, (2, 2), (12, 7), 1, 30, 30)

        assert corridor.id == "corridor_a_b"
        assert corridor.kind is RoomKind.CORRIDOR
        assert (corridor.x, corridor.y, corridor.width, corridor.height) == (
            2,
            2,
            11,
            6,
        )
        assert corridor.neighbor_ids == ("a", "b")
        assert a.is_connected("corridor_a_b")
        assert b.is_connected("corridor_a_b")

    def test_clipped_to_map(self) -> None:
        a = Room("a", 0, 0, 4, 4)
        b = Room("b", 24, 24, 6, 6)

        corridor = corridor_entity(a, b, (2, 2), (27, 27), 5, 30, 30)

        assert corridor.x + corridor.width <= 30
        assert corridor.y + corridor.height <= 30


class TestCorridorLayer:
    def test_joins_room_floors(self) -> None:
        ctx = make_context(30, 30)
        a = Room("a", 2, 2, 4, 4)
        b = Room("b", 20, 18, 5, 5)
        ctx.rooms = [a, b]
        ctx.connections = [_connected_pair(a, b)]
        RoomCarveLayer().apply(ctx)

        CorridorLayer().apply(ctx)

        assert ctx.failed_connections == []
        assert b.center() in reachable_tiles(ctx.tiles, a.center())

    def test_long_route_registers_corridor_entity(self) -> None:
        ctx = make_context(30, 30)
        a = Room("a", 2, 2, 4, 4)
        b = Room("b", 20, 18, 5, 5)
        ctx.rooms = [a, b]
        ctx.connections = [_connected_pair(a, b)]
        RoomCarveLayer().apply(ctx)

        CorridorLayer().apply(ctx)

        corridors = ctx.rooms_of_kind(RoomKind.CORRIDOR)
        assert [c.id for c in corridors] == ["corridor_a_b"]
        assert corridors[0].neighbor_ids == ("a", "b")

    def test_coincident_centers_carve_nothing_new(self) -> None:
        ctx = make_context(30, 30)
        a = Room("a", 2, 2, 8, 8)
        b = Room("b", 4, 4, 4, 4)
        ctx.rooms = [a, b]
        ctx.connections = [_connected_pair(a, b)]
        RoomCarveLayer().apply(ctx)
        before = ctx.tiles.copy()

        CorridorLayer().apply(ctx)

        assert np.array_equal(ctx.tiles, before)
        assert ctx.rooms_of_kind(RoomKind.CORRIDOR) == []

    def test_unroutable_connection_reported(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        """A 3-wide corridor cannot centre on the map corner."""
        ctx = make_context(30, 30, corridor_width=3)
        a = Room("a", 2, 2, 4, 4)
        b = Room("b", 28, 28, 2, 2)
        ctx.rooms = [a, b]
        connection = _connected_pair(a, b)
        ctx.connections = [connection]
        RoomCarveLayer().apply(ctx)

        with caplog.at_level(logging.WARNING):
            CorridorLayer().apply(ctx)

        assert ctx.failed_connections == [connection]
        assert "No corridor route" in caplog.text
        assert np.count_nonzero(ctx.tiles == TileType.FLOOR) == 16 + 4
