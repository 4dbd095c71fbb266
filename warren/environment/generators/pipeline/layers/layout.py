"""Room layout layers.

These layers decide where the rooms of a dungeon go:
- RoomLayoutLayer: Generates candidates, pushes them apart, keeps the best
  spread and merges a few overlapping pairs into L/T shapes
- RestoreLayoutLayer: Reuses a previously generated layout so that only
  corridors and doors are rebuilt

Algorithm sketch (RoomLayoutLayer):
1. Roll a target room count and create 3x that many random candidates
2. Repulsion relaxation: every overlapping pair pushes apart along the
   line between their centers, for a fixed number of iterations
3. Greedy selection of the largest candidates whose centers keep a minimum
   spacing, topped up from the leftovers if too few qualify
4. Controlled overlapping: random pairs with a partial overlap become their
   union bounding box

Merging must run before any connectivity edge exists. A merged-away room
is simply dropped, which is only safe while no adjacency references it.
"""

from __future__ import annotations

import logging
import math
from typing import TYPE_CHECKING

from warren import config as tuning
from warren.environment.generators.pipeline.layer import GenerationLayer
from warren.environment.map import Room, RoomKind
from warren.util.coordinates import distance

if TYPE_CHECKING:
    from warren.environment.generators.dungeon_config import DungeonConfig
    from warren.environment.generators.pipeline.context import GenerationContext
    from warren.types import TileCoord
    from warren.util.rng import RandomSource

logger = logging.getLogger(__name__)


def _round_half_up(value: float) -> int:
    # round() is banker's rounding; displacements use the usual half-up rule.
    return math.floor(value + 0.5)


def _clamp(value: int, lo: int, hi: int) -> int:
    return max(lo, min(hi, value))


def generate_candidates(
    rng: RandomSource, config: DungeonConfig, target: int
) -> list[Room]:
    """Create randomly sized and placed candidate rooms.

    Every candidate lies fully inside the map minus a one-tile border. Room
    sides are clamped so that they always fit inside that border.
    """
    margin = tuning.ROOM_MARGIN
    max_width = min(config.max_room_size, config.width - 2 * margin)
    max_height = min(config.max_room_size, config.height - 2 * margin)

    candidates: list[Room] = []
    for index in range(target * tuning.CANDIDATE_MULTIPLIER):
        width = rng.next_int(config.min_room_size, max_width)
        height = rng.next_int(config.min_room_size, max_height)
        x = rng.next_int(margin, config.width - width - margin)
        y = rng.next_int(margin, config.height - height - margin)
        candidates.append(
            Room(id=f"room_{index}", x=x, y=y, width=width, height=height)
        )
    return candidates


def separate_rooms(
    rooms: list[Room],
    map_width: TileCoord,
    map_height: TileCoord,
    iterations: int = tuning.SEPARATION_ITERATIONS,
    force: float = tuning.SEPARATION_FORCE,
) -> None:
    """Push overlapping rooms apart in place.

    Each iteration visits rooms in order and moves each one immediately by
    the sum of unit vectors away from every room it overlaps, scaled by
    ``force``. Positions are rounded to whole tiles and clamped back inside
    the map border. This is a packing heuristic: some overlap may remain.
    """
    margin = tuning.ROOM_MARGIN
    for _ in range(iterations):
        moved = False
        for room in rooms:
            bounds = room.bounds
            cx, cy = room.exact_center()
            force_x = 0.0
            force_y = 0.0

            for other in rooms:
                if other is room:
                    continue
                x_overlap, y_overlap = bounds.overlap(other.bounds)
                if x_overlap <= 0 or y_overlap <= 0:
                    continue
                ox, oy = other.exact_center()
                dx = cx - ox
                dy = cy - oy
                length = math.hypot(dx, dy) or 1.0
                force_x += (dx / length) * force
                force_y += (dy / length) * force

            new_x = _clamp(
                _round_half_up(room.x + force_x),
                margin,
                map_width - room.width - margin,
            )
            new_y = _clamp(
                _round_half_up(room.y + force_y),
                margin,
                map_height - room.height - margin,
            )
            if (new_x, new_y) != (room.x, room.y):
                room.x, room.y = new_x, new_y
                moved = True

        # A pass that moves nothing would repeat identically forever.
        if not moved:
            break


def select_rooms(
    candidates: list[Room],
    target: int,
    map_width: TileCoord,
    map_height: TileCoord,
) -> list[Room]:
    """Pick up to ``target`` well-spread rooms, largest first.

    A candidate is accepted when its center is at least
    ``SELECTION_SPACING_RATIO * min(map_width, map_height)`` away from every
    room accepted so far. If too few qualify, the remaining slots are filled
    with leftover candidates in generation order.
    """
    min_spacing = min(map_width, map_height) * tuning.SELECTION_SPACING_RATIO

    selected: list[Room] = []
    for candidate in sorted(candidates, key=lambda room: room.area, reverse=True):
        if len(selected) >= target:
            break
        center = candidate.exact_center()
        if all(
            distance(center, room.exact_center()) >= min_spacing for room in selected
        ):
            selected.append(candidate)

    if len(selected) < target:
        chosen = {room.id for room in selected}
        for candidate in candidates:
            if len(selected) >= target:
                break
            if candidate.id not in chosen:
                selected.append(candidate)
                chosen.add(candidate.id)

    return selected


def try_merge(first: Room, second: Room) -> bool:
    """Grow ``first`` to cover ``second`` if they overlap partially.

    The overlap must be positive on both axes and, on each axis, strictly
    smaller than ``MERGE_OVERLAP_RATIO`` of the smaller room's side. That
    rules out near-containment and favours L- and T-shaped unions.

    Returns:
        True if ``first`` now covers both rooms and ``second`` should go.
    """
    x_overlap, y_overlap = first.bounds.overlap(second.bounds)
    if x_overlap <= 0 or y_overlap <= 0:
        return False
    ratio = tuning.MERGE_OVERLAP_RATIO
    if x_overlap >= min(first.width, second.width) * ratio:
        return False
    if y_overlap >= min(first.height, second.height) * ratio:
        return False

    first.set_bounds(first.bounds.union(second.bounds))
    return True


def merge_overlapping_rooms(
    rooms: list[Room], rng: RandomSource, probability: float
) -> int:
    """Randomly merge partially overlapping pairs, in place.

    Every unordered pair is rolled with ``probability``; successful rolls
    attempt `try_merge`. The absorbed room is removed from ``rooms`` and the
    scan continues with the room that takes its slot.

    Returns:
        Number of merges performed.
    """
    if probability <= 0:
        return 0
    if any(room.connected_to for room in rooms):
        raise ValueError("Rooms must be merged before any connections exist")

    merges = 0
    i = 0
    while i < len(rooms):
        j = i + 1
        while j < len(rooms):
            if rng.next_bool(probability) and try_merge(rooms[i], rooms[j]):
                logger.debug("Merged %s into %s", rooms[j].id, rooms[i].id)
                del rooms[j]
                merges += 1
                continue
            j += 1
        i += 1
    return merges


class RoomLayoutLayer(GenerationLayer):
    """Generates a fresh room layout and records it as the base layout."""

    def apply(self, ctx: GenerationContext) -> None:
        """Place rooms in ``ctx.rooms`` and snapshot them to ``ctx.base_rooms``.

        Args:
            ctx: The generation context to modify.
        """
        cfg = ctx.config
        target = ctx.rng.next_int(cfg.min_rooms, cfg.max_rooms)

        candidates = generate_candidates(ctx.rng, cfg, target)
        separate_rooms(candidates, ctx.width, ctx.height)
        rooms = select_rooms(candidates, target, ctx.width, ctx.height)
        selected = len(rooms)
        merges = merge_overlapping_rooms(
            rooms, ctx.rng, cfg.overlap_chance * cfg.complexity_level
        )

        ctx.rooms = rooms
        ctx.snapshot_base_rooms()
        logger.debug(
            "Layout: target=%d candidates=%d selected=%d merges=%d",
            target,
            len(candidates),
            selected,
            merges,
        )


class RestoreLayoutLayer(GenerationLayer):
    """Reuses a cached room layout instead of generating a new one.

    Rooms are copied with their adjacency cleared, so the cache is never
    mutated by later layers.
    """

    def __init__(self, base_rooms: list[Room]) -> None:
        self.base_rooms = base_rooms

    def apply(self, ctx: GenerationContext) -> None:
        ctx.rooms = [
            room.copy(keep_connections=False)
            for room in self.base_rooms
            if room.kind is RoomKind.ROOM
        ]
        ctx.snapshot_base_rooms()
        logger.debug("Restored %d base rooms", len(ctx.rooms))
