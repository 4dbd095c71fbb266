"""Entities placed on the dungeon grid: rooms, corridors and doors."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from warren.types import RoomId, TileCoord, TilePos, Vector
from warren.util.coordinates import Rect


class RoomKind(Enum):
    ROOM = "room"
    CORRIDOR = "corridor"
    INTERSECTION = "intersection"


@dataclass
class Room:
    """A rectangular room or corridor entity.

    ``connected_to`` is an insertion-ordered set of neighbour ids (a dict with
    ``None`` values): membership is O(1) and iteration order is stable across
    processes, which keeps door placement deterministic. Edges must be added
    through `connect_rooms` so adjacency stays symmetric.
    """

    id: RoomId
    x: TileCoord
    y: TileCoord
    width: TileCoord
    height: TileCoord
    kind: RoomKind = RoomKind.ROOM
    connected_to: dict[RoomId, None] = field(default_factory=dict)

    @property
    def bounds(self) -> Rect:
        return Rect(self.x, self.y, self.width, self.height)

    @property
    def area(self) -> int:
        return self.width * self.height

    def center(self) -> TilePos:
        return self.bounds.center()

    def exact_center(self) -> Vector:
        return self.bounds.exact_center()

    def is_connected(self, other_id: RoomId) -> bool:
        return other_id in self.connected_to

    @property
    def neighbor_ids(self) -> tuple[RoomId, ...]:
        return tuple(self.connected_to)

    def set_bounds(self, rect: Rect) -> None:
        self.x, self.y = rect.x1, rect.y1
        self.width, self.height = rect.width, rect.height

    def copy(self, *, keep_connections: bool = True) -> Room:
        """Independent copy; adjacency is copied or cleared, never shared."""
        return Room(
            id=self.id,
            x=self.x,
            y=self.y,
            width=self.width,
            height=self.height,
            kind=self.kind,
            connected_to=dict(self.connected_to) if keep_connections else {},
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "x": self.x,
            "y": self.y,
            "width": self.width,
            "height": self.height,
            "kind": self.kind.value,
            "connectedTo": list(self.neighbor_ids),
        }


def connect_rooms(a: Room, b: Room) -> None:
    """Record a symmetric edge between two rooms."""
    if a.id == b.id:
        raise ValueError(f"Cannot connect room {a.id!r} to itself")
    a.connected_to[b.id] = None
    b.connected_to[a.id] = None


@dataclass(frozen=True)
class Door:
    """A door tile and the pair of rooms it joins."""

    x: TileCoord
    y: TileCoord
    connects_rooms: tuple[RoomId, RoomId]

    @property
    def position(self) -> TilePos:
        return (self.x, self.y)

    def to_dict(self) -> dict[str, Any]:
        return {"x": self.x, "y": self.y, "connectsRooms": list(self.connects_rooms)}


@dataclass(frozen=True)
class Connection:
    """An edge of the room connectivity graph."""

    from_id: RoomId
    to_id: RoomId
    distance: float
    spanning: bool = True

    @property
    def pair(self) -> frozenset[RoomId]:
        return frozenset((self.from_id, self.to_id))

    def to_dict(self) -> dict[str, Any]:
        return {
            "from": self.from_id,
            "to": self.to_id,
            "distance": self.distance,
            "spanning": self.spanning,
        }
