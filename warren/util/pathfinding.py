from __future__ import annotations

import heapq
import itertools
import logging
from typing import TYPE_CHECKING

from warren import config
from warren.environment.tile_types import TileType
from warren.types import CARDINAL_DIRECTIONS, TilePos
from warren.util.coordinates import footprint_offsets, manhattan

if TYPE_CHECKING:
    import numpy as np

logger = logging.getLogger(__name__)


def find_path(
    tiles: np.ndarray,
    start: TilePos,
    goal: TilePos,
    corridor_width: int = 1,
) -> list[TilePos]:
    """
    Calculates a corridor route from a start to a goal position using A*.

    Movement is 4-directional. Walls never block: the search tunnels through
    solid rock, but stepping onto an existing FLOOR tile costs
    ``FLOOR_STEP_COST`` instead of ``WALL_STEP_COST``, so routes prefer to
    reuse rooms and corridors that are already carved. A tile is a valid
    step only if the whole corridor footprint centred on it (see
    `footprint_offsets`) stays inside the map.

    The open set is a binary heap ordered by f-score with insertion order
    breaking ties. The search ends as soon as the goal is generated as a
    neighbour (or popped, when start and goal coincide).

    Args:
        tiles: 2D array of TileType values, indexed [x, y].
        start: The (x, y) starting coordinate.
        goal: The (x, y) target coordinate.
        corridor_width: Width of the corridor that will be carved along the
            path, used for the footprint bounds check.

    Returns:
        A list of (x, y) tuples from start to goal, both included. A single
        point when start == goal. An empty list if no path exists.
    """
    map_width, map_height = tiles.shape
    lo, hi = footprint_offsets(corridor_width)

    def fits(x: int, y: int) -> bool:
        return (
            x + lo >= 0
            and y + lo >= 0
            and x + hi <= map_width
            and y + hi <= map_height
        )

    # Plain nested lists are much faster than numpy scalar indexing here.
    is_floor: list[list[bool]] = (tiles == TileType.FLOOR).tolist()

    counter = itertools.count()
    open_heap: list[tuple[float, int, TilePos]] = [
        (float(manhattan(start, goal)), next(counter), start)
    ]
    g_score: dict[TilePos, float] = {start: 0.0}
    came_from: dict[TilePos, TilePos] = {}
    closed: set[TilePos] = set()

    while open_heap:
        _, _, current = heapq.heappop(open_heap)
        if current in closed:
            continue  # Stale heap entry superseded by a cheaper one
        if current == goal:
            return _reconstruct_path(came_from, current)
        closed.add(current)

        cx, cy = current
        current_g = g_score[current]
        for dx, dy in CARDINAL_DIRECTIONS:
            nx, ny = cx + dx, cy + dy
            neighbor = (nx, ny)
            if neighbor in closed or not fits(nx, ny):
                continue

            if is_floor[nx][ny]:
                tentative_g = current_g + config.FLOOR_STEP_COST
            else:
                tentative_g = current_g + config.WALL_STEP_COST

            if neighbor == goal:
                came_from[neighbor] = current
                return _reconstruct_path(came_from, neighbor)

            if tentative_g < g_score.get(neighbor, float("inf")):
                g_score[neighbor] = tentative_g
                came_from[neighbor] = current
                f_score = tentative_g + manhattan(neighbor, goal)
                heapq.heappush(open_heap, (f_score, next(counter), neighbor))

    logger.debug("No corridor path from %s to %s", start, goal)
    return []


def _reconstruct_path(
    came_from: dict[TilePos, TilePos], end: TilePos
) -> list[TilePos]:
    path = [end]
    node = end
    while node in came_from:
        node = came_from[node]
        path.append(node)
    path.reverse()
    return path
