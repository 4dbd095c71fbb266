"""Pipeline generator that orchestrates layer-based dungeon generation.

The PipelineGenerator runs a sequence of GenerationLayers, each transforming
a shared GenerationContext. This keeps each stage of the algorithm (layout,
rasterization, connectivity, corridors, doors) in its own layer.
"""

from __future__ import annotations

import logging
from time import perf_counter
from typing import TYPE_CHECKING

from warren.environment.generators.base import BaseMapGenerator, DungeonData
from warren.util.metrics import TimingTable

from .context import GenerationContext

if TYPE_CHECKING:
    from warren.environment.generators.dungeon_config import DungeonConfig
    from warren.util.rng import RandomSource

    from .layer import GenerationLayer

logger = logging.getLogger(__name__)


class PipelineGenerator(BaseMapGenerator):
    """Dungeon generator that runs layers sequentially on a shared context.

    The pipeline creates an empty GenerationContext and passes it through
    each layer in order. Layers modify the context in place, building up
    the final dungeon.

    Example:
        generator = PipelineGenerator(
            layers=[
                RoomLayoutLayer(),
                RoomCarveLayer(),
                ConnectivityLayer(),
                CorridorLayer(),
                DoorPlacementLayer(),
            ],
            config=DungeonConfig(seed=12345),
            rng=RandomSource(12345),
            seed=12345,
        )
        dungeon = generator.generate()

    Attributes:
        layers: List of GenerationLayer instances to apply.
        config: Validated configuration handed to every layer.
        rng: Random source shared by every layer.
        seed: Seed recorded in the output metadata.
        timings: Rolling per-layer durations in milliseconds.
    """

    def __init__(
        self,
        layers: list[GenerationLayer],
        config: DungeonConfig,
        rng: RandomSource,
        seed: int,
        timings: TimingTable | None = None,
    ) -> None:
        super().__init__(config.width, config.height)
        self.layers = layers
        self.config = config
        self.rng = rng
        self.seed = seed
        self.timings = timings if timings is not None else TimingTable()

    def build(self) -> GenerationContext:
        """Run every layer and return the finished scratch context."""
        ctx = GenerationContext.create_empty(self.config, self.rng)

        for layer in self.layers:
            start = perf_counter()
            layer.apply(ctx)
            elapsed_ms = (perf_counter() - start) * 1000.0
            self.timings.record(layer.name, elapsed_ms)
            logger.debug("%s finished in %.2fms", layer.name, elapsed_ms)

        return ctx

    def generate(self) -> DungeonData:
        """Generate a dungeon by running all layers in sequence.

        Returns:
            An independent DungeonData snapshot of the finished context.
        """
        return self.build().to_dungeon_data(self.seed)
