"""Generation layers for the pipeline dungeon generator.

Each layer transforms the GenerationContext in a specific way:
- Layout layers: Place rooms, or restore a cached layout
- Rasterize layers: Carve rooms into the solid tilemap
- Connectivity layers: Decide which rooms are joined
- Corridor layers: Route and carve corridors along those joins
- Door layers: Mark room entrances
"""

from .connectivity import ConnectivityLayer
from .corridors import CorridorLayer
from .doors import DoorPlacementLayer
from .layout import RestoreLayoutLayer, RoomLayoutLayer
from .rasterize import RoomCarveLayer

__all__ = [
    "ConnectivityLayer",
    "CorridorLayer",
    "DoorPlacementLayer",
    "RestoreLayoutLayer",
    "RoomCarveLayer",
    "RoomLayoutLayer",
]
