"""Map generation algorithms for warren.

- DungeonGenerator: Stateful front end holding config, RNG and layout cache
- generate_dungeon: The generation algorithm as a pure function
- PipelineGenerator: Layered pipeline the algorithm is assembled from

Dungeons are built by one pipeline:
    RoomLayoutLayer + RoomCarveLayer + ConnectivityLayer + CorridorLayer
    + DoorPlacementLayer
"""

from .base import BaseMapGenerator, DungeonData, DungeonMetadata
from .dungeon import DungeonGenerator, create_dungeon_layers, generate_dungeon
from .dungeon_config import DungeonConfig, DungeonConfigError
from .pipeline import GenerationContext, GenerationLayer, PipelineGenerator

__all__ = [
    "BaseMapGenerator",
    "DungeonConfig",
    "DungeonConfigError",
    "DungeonData",
    "DungeonGenerator",
    "DungeonMetadata",
    "GenerationContext",
    "GenerationLayer",
    "PipelineGenerator",
    "create_dungeon_layers",
    "generate_dungeon",
]
