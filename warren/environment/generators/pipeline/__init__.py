"""Pipeline-based dungeon generation.

This package provides a layered architecture for dungeon generation. Each
layer transforms a shared GenerationContext, and the pipeline outputs an
independent DungeonData snapshot.

Example usage:
    from warren.environment.generators.pipeline import (
        ConnectivityLayer,
        CorridorLayer,
        DoorPlacementLayer,
        PipelineGenerator,
        RoomCarveLayer,
        RoomLayoutLayer,
    )

    generator = PipelineGenerator(
        layers=[
            RoomLayoutLayer(),
            RoomCarveLayer(),
            ConnectivityLayer(),
            CorridorLayer(),
            DoorPlacementLayer(),
        ],
        config=config,
        rng=RandomSource(seed),
        seed=seed,
    )
    dungeon = generator.generate()
"""

from .context import GenerationContext
from .layer import GenerationLayer
from .layers import (
    ConnectivityLayer,
    CorridorLayer,
    DoorPlacementLayer,
    RestoreLayoutLayer,
    RoomCarveLayer,
    RoomLayoutLayer,
)
from .pipeline import PipelineGenerator

__all__ = [
    "ConnectivityLayer",
    "CorridorLayer",
    "DoorPlacementLayer",
    "GenerationContext",
    "GenerationLayer",
    "PipelineGenerator",
    "RestoreLayoutLayer",
    "RoomCarveLayer",
    "RoomLayoutLayer",
]
