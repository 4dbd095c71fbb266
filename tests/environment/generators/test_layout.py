"""Tests for the room layout steps: candidates, separation, selection, merging."""

from __future__ import annotations

import pytest

from tests.helpers import make_context
from warren.environment.generators.dungeon_config import DungeonConfig
from warren.environment.generators.pipeline.layers import (
    RestoreLayoutLayer,
    RoomLayoutLayer,
)
from warren.environment.generators.pipeline.layers.layout import (
    generate_candidates,
    merge_overlapping_rooms,
    select_rooms,
    separate_rooms,
    try_merge,
)
from warren.environment.map import Room, RoomKind, connect_rooms
from warren.util.rng import RandomSource

# =============================================================================
# Candidate generation
# =============================================================================


class TestGenerateCandidates:
    def test_three_candidates_per_room(self) -> None:
        config = DungeonConfig(width=30, height=30, min_room_size=4, max_room_size=8)

        candidates = generate_candidates(RandomSource(1), config, target=5)

        assert len(candidates) == 15
        assert [room.id for room in candidates[:3]] == ["room_0", "room_1", "room_2"]

    def test_candidates_inside_border(self) -> None:
        config = DungeonConfig(width=30, height=20, min_room_size=4, max_room_size=8)

        for room in generate_candidates(RandomSource(2), config, target=10):
            assert 4 <= room.width <= 8
            assert 4 <= room.height <= 8
            assert room.x >= 1 and room.x + room.width <= 29
            assert room.y >= 1 and room.y + room.height <= 19

    def test_oversized_rooms_clamped_to_map(self) -> None:
        """max_room_size larger than the map never yields an impossible room."""
        config = DungeonConfig(width=10, height=10, min_room_size=4, max_room_size=50)

        for room in generate_candidates(RandomSource(3), config, target=10):
            assert room.width <= 8
            assert room.height <= 8
            assert room.x + room.width <= 9


# =============================================================================
# Separation
# =============================================================================


class TestSeparateRooms:
    def test_overlapping_pair_pushed_apart(self) -> None:
        a = Room("a", 10, 10, 4, 4)
        b = Room("b", 11, 10, 4, 4)

        separate_rooms([a, b], 40, 40)

        # a moves first (left by the force), then b moves right past it.
        assert (a.x, a.y) == (8, 10)
        assert (b.x, b.y) == (13, 10)
        assert 0 in a.bounds.overlap(b.bounds)

    def test_disjoint_rooms_untouched(self) -> None:
        a = Room("a", 2, 2, 4, 4)
        b = Room("b", 20, 20, 4, 4)

        separate_rooms([a, b], 40, 40)

        assert (a.x, a.y, b.x, b.y) == (2, 2, 20, 20)

    def test_clamped_to_map_border(self) -> None:
        a = Room("a", 1, 1, 4, 4)
        b = Room("b", 2, 2, 4, 4)

        separate_rooms([a, b], 20, 20)

        for room in (a, b):
            assert room.x >= 1 and room.y >= 1
            assert room.x + room.width <= 19
            assert room.y + room.height <= 19


# =============================================================================
# Selection
# =============================================================================


class TestSelectRooms:
    def _candidates(self) -> list[Room]:
        return [
            Room("c0", 1, 1, 4, 4),
            Room("c1", 2, 2, 6, 6),
            Room("c2", 30, 30, 5, 5),
        ]

    def test_largest_spread_rooms_first(self) -> None:
        selected = select_rooms(self._candidates(), 2, 50, 50)

        assert [room.id for room in selected] == ["c1", "c2"]

    def test_leftovers_fill_in_generation_order(self) -> None:
        """c0 is too close to c1 but still fills the last slot."""
        selected = select_rooms(self._candidates(), 3, 50, 50)

        assert [room.id for room in selected] == ["c1", "c2", "c0"]

    def test_never_more_than_available(self) -> None:
        assert len(select_rooms(self._candidates(), 10, 50, 50)) == 3


# =============================================================================
# Merging
# =============================================================================


class TestMerging:
    def test_partial_overlap_merges_to_union(self) -> None:
        first = Room("a", 2, 2, 6, 6)
        second = Room("b", 5, 5, 6, 6)

        assert try_merge(first, second)
        assert (first.x, first.y, first.width, first.height) == (2, 2, 9, 9)

    def test_near_containment_rejected(self) -> None:
        first = Room("a", 2, 2, 6, 6)
        second = Room("b", 3, 3, 4, 4)

        assert not try_merge(first, second)
        assert (first.width, first.height) == (6, 6)

    def test_disjoint_rejected(self) -> None:
        assert not try_merge(Room("a", 0, 0, 4, 4), Room("b", 10, 10, 4, 4))

    def test_certain_merge_collapses_pair(self) -> None:
        """Two overlapping rooms with probability 1 become one."""
        rooms = [Room("a", 2, 2, 6, 6), Room("b", 5, 5, 6, 6)]

        merges = merge_overlapping_rooms(rooms, RandomSource(0), 1.0)

        assert merges == 1
        assert len(rooms) == 1
        assert rooms[0].id == "a"
        assert rooms[0].bounds.x2 == 11
        assert rooms[0].bounds.y2 == 11

    def test_zero_probability_draws_nothing(self) -> None:
        rooms = [Room("a", 2, 2, 6, 6), Room("b", 5, 5, 6, 6)]
        rng = RandomSource(0)
        expected = RandomSource(0).next()

        assert merge_overlapping_rooms(rooms, rng, 0.0) == 0
        assert len(rooms) == 2
        assert rng.next() == expected

    def test_merging_connected_rooms_rejected(self) -> None:
        rooms = [Room("a", 2, 2, 6, 6), Room("b", 5, 5, 6, 6)]
        connect_rooms(rooms[0], rooms[1])

        with pytest.raises(ValueError):
            merge_overlapping_rooms(rooms, RandomSource(0), 1.0)


# =============================================================================
# Layers
# =============================================================================


class TestRoomLayoutLayer:
    def test_places_rooms_within_requested_count(self) -> None:
        ctx = make_context(40, 40, seed=5, min_rooms=3, max_rooms=6)

        RoomLayoutLayer().apply(ctx)

        assert 1 <= len(ctx.rooms) <= 6
        for room in ctx.rooms:
            assert room.kind is RoomKind.ROOM
            assert room.x >= 1 and room.y >= 1
            assert room.x + room.width <= 39
            assert room.y + room.height <= 39

    def test_snapshots_base_rooms(self) -> None:
        ctx = make_context(40, 40, seed=5)

        RoomLayoutLayer().apply(ctx)

        assert [r.to_dict() for r in ctx.base_rooms] == [
            r.to_dict() for r in ctx.rooms
        ]
        assert ctx.base_rooms[0] is not ctx.rooms[0]

    def test_same_seed_same_layout(self) -> None:
        first = make_context(40, 40, seed=9)
        second = make_context(40, 40, seed=9)

        RoomLayoutLayer().apply(first)
        RoomLayoutLayer().apply(second)

        assert [r.to_dict() for r in first.rooms] == [
            r.to_dict() for r in second.rooms
        ]


class TestRestoreLayoutLayer:
    def test_restores_copies_without_connections(self) -> None:
        a = Room("a", 2, 2, 4, 4)
        b = Room("b", 20, 20, 4, 4)
        connect_rooms(a, b)
        ctx = make_context(40, 40)

        RestoreLayoutLayer([a, b]).apply(ctx)

        assert [room.id for room in ctx.rooms] == ["a", "b"]
        assert all(not room.connected_to for room in ctx.rooms)
        assert ctx.rooms[0] is not a
        # The source layout is left untouched
        assert a.is_connected("b")

    def test_skips_corridor_entities(self) -> None:
        rooms = [
            Room("a", 2, 2, 4, 4),
            Room("corridor_a_b", 4, 4, 10, 1, kind=RoomKind.CORRIDOR),
        ]
        ctx = make_context(40, 40)

        RestoreLayoutLayer(rooms).apply(ctx)

        assert [room.id for room in ctx.rooms] == ["a"]
