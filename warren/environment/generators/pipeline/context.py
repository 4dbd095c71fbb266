"""Generation context for the pipeline dungeon generator.

The GenerationContext is the mutable scratch state of one generation run.
Each layer in the pipeline receives the same context and modifies it in
place. Nothing in the context outlives the run: the pipeline turns it into an
independent `DungeonData` snapshot at the end.
"""

from __future__ import annotations

from dataclasses import dataclass, field

import numpy as np

from warren.environment.generators.base import DungeonData, DungeonMetadata
from warren.environment.generators.dungeon_config import DungeonConfig
from warren.environment.map import Connection, Door, Room, RoomKind
from warren.environment.tile_types import new_tilemap
from warren.types import RoomId
from warren.util.rng import RandomSource


@dataclass
class GenerationContext:
    """Mutable state container passed through the generation pipeline.

    Attributes:
        config: The validated configuration for this run.
        rng: The single random source all layers draw from.
        tiles: 2D numpy array of TileType values. Shape: (width, height).
        rooms: Rooms (and later corridor entities) in creation order.
        connections: Edges of the connectivity graph, tree edges first.
        failed_connections: Edges the corridor layer could not carve.
        doors: Placed doors.
        base_rooms: Snapshot of the room layout taken after layout and
            before connectivity, for regeneration with preserved rooms.
    """

    config: DungeonConfig
    rng: RandomSource
    tiles: np.ndarray
    rooms: list[Room] = field(default_factory=list)
    connections: list[Connection] = field(default_factory=list)
    failed_connections: list[Connection] = field(default_factory=list)
    doors: list[Door] = field(default_factory=list)
    base_rooms: list[Room] = field(default_factory=list)

    @classmethod
    def create_empty(
        cls, config: DungeonConfig, rng: RandomSource
    ) -> GenerationContext:
        """Create a context with a solid (all-wall) tilemap and no rooms."""
        tiles = new_tilemap(config.width, config.height)
        return cls(config=config, rng=rng, tiles=tiles)

    @property
    def width(self) -> int:
        return self.config.width

    @property
    def height(self) -> int:
        return self.config.height

    def room_by_id(self, room_id: RoomId) -> Room | None:
        for room in self.rooms:
            if room.id == room_id:
                return room
        return None

    def rooms_of_kind(self, kind: RoomKind) -> list[Room]:
        return [room for room in self.rooms if room.kind is kind]

    def snapshot_base_rooms(self) -> None:
        """Remember the current ROOM-kind layout with adjacency cleared."""
        self.base_rooms = [
            room.copy(keep_connections=False)
            for room in self.rooms_of_kind(RoomKind.ROOM)
        ]

    def to_dungeon_data(self, seed: int) -> DungeonData:
        """Convert this context to an independent DungeonData snapshot."""
        return DungeonData(
            metadata=DungeonMetadata(
                width=self.width,
                height=self.height,
                room_count=len(self.rooms_of_kind(RoomKind.ROOM)),
                seed=seed,
            ),
            rooms=[room.copy() for room in self.rooms],
            tiles=self.tiles.copy(order="F"),
            doors=list(self.doors),
            connections=list(self.connections),
            failed_connections=list(self.failed_connections),
        )
