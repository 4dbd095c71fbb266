"""Base classes for map generation."""

from __future__ import annotations

import abc
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

import numpy as np

from warren.environment.map import Connection, Door, Room, RoomKind

if TYPE_CHECKING:
    from warren.types import RoomId, TileCoord


@dataclass(frozen=True)
class DungeonMetadata:
    """Summary of a generated dungeon.

    Attributes:
        width: Map width in tiles.
        height: Map height in tiles.
        room_count: Number of ROOM-kind entities (corridors excluded).
        seed: Seed the dungeon was generated from.
    """

    width: TileCoord
    height: TileCoord
    room_count: int
    seed: int

    def to_dict(self) -> dict[str, Any]:
        return {
            "width": self.width,
            "height": self.height,
            "roomCount": self.room_count,
            "seed": self.seed,
        }


@dataclass
class DungeonData:
    """A container for all data produced by a dungeon generator.

    Instances are snapshots: they share no mutable state with the generator
    that produced them or with each other.

    Attributes:
        metadata: Map extent, room count and the seed used.
        rooms: Rooms followed by the corridor entities registered for them.
        tiles: 2D numpy array of TileType values, shape (width, height).
        doors: Door placements, at most one per connected room pair.
        connections: Every edge of the connectivity graph, tree edges first.
        failed_connections: Edges whose corridor search found no path.
    """

    metadata: DungeonMetadata
    rooms: list[Room]
    tiles: np.ndarray
    doors: list[Door]
    connections: list[Connection] = field(default_factory=list)
    failed_connections: list[Connection] = field(default_factory=list)

    @property
    def tilemap(self) -> list[list[int]]:
        """The tiles as rows: ``tilemap[y][x]``."""
        return self.tiles.T.tolist()

    def room_by_id(self, room_id: RoomId) -> Room:
        for room in self.rooms:
            if room.id == room_id:
                return room
        raise KeyError(room_id)

    def rooms_of_kind(self, kind: RoomKind) -> list[Room]:
        return [room for room in self.rooms if room.kind is kind]

    def to_dict(self) -> dict[str, Any]:
        """JSON-ready representation for rendering collaborators."""
        return {
            "metadata": self.metadata.to_dict(),
            "rooms": [room.to_dict() for room in self.rooms],
            "tilemap": self.tilemap,
            "doors": [door.to_dict() for door in self.doors],
            "connections": [c.to_dict() for c in self.connections],
            "failedConnections": [c.to_dict() for c in self.failed_connections],
        }


class BaseMapGenerator(abc.ABC):
    """Abstract base class for map generation algorithms."""

    def __init__(self, map_width: TileCoord, map_height: TileCoord) -> None:
        self.map_width = map_width
        self.map_height = map_height

    @abc.abstractmethod
    def generate(self) -> DungeonData:
        """Generate the map layout and its structural data."""
        raise NotImplementedError
