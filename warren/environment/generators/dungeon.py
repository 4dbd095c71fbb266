"""Dungeon generation with rooms, corridors and doors.

`generate_dungeon` is the whole algorithm as a pure function of its config,
random source and seed. `DungeonGenerator` is the stateful front end: it owns
the configuration, the random source and the cached base layout that lets
callers rebuild corridors and doors around an unchanged set of rooms.
"""

from __future__ import annotations

import logging
import random
from typing import TYPE_CHECKING, Any

from warren import config as tuning
from warren.util.metrics import TimingTable
from warren.util.rng import RandomSource

from .dungeon_config import DungeonConfig
from .pipeline import (
    ConnectivityLayer,
    CorridorLayer,
    DoorPlacementLayer,
    GenerationLayer,
    PipelineGenerator,
    RestoreLayoutLayer,
    RoomCarveLayer,
    RoomLayoutLayer,
)

if TYPE_CHECKING:
    from warren.environment.map import Room

    from .base import DungeonData

logger = logging.getLogger(__name__)

_seed_source = random.SystemRandom()


def _entropy_seed() -> int:
    return _seed_source.randint(0, tuning.AUTO_SEED_MAX)


def create_dungeon_layers(
    base_rooms: list[Room] | None = None,
) -> list[GenerationLayer]:
    """Assemble the layer sequence for one dungeon.

    Args:
        base_rooms: A cached layout to reuse. When given, layout generation
            is replaced by restoring these rooms.

    Returns:
        Layers in execution order.
    """
    layout: GenerationLayer
    if base_rooms:
        layout = RestoreLayoutLayer(base_rooms)
    else:
        layout = RoomLayoutLayer()

    return [
        # 1. Decide where rooms go (or reuse a cached layout)
        layout,
        # 2. Carve room interiors into the solid map
        RoomCarveLayer(),
        # 3. Spanning tree plus complexity edges
        ConnectivityLayer(),
        # 4. A* corridors along every edge
        CorridorLayer(),
        # 5. One door per connected room pair
        DoorPlacementLayer(),
    ]


def generate_dungeon(
    config: DungeonConfig,
    rng: RandomSource,
    seed: int,
    base_rooms: list[Room] | None = None,
    timings: TimingTable | None = None,
) -> tuple[DungeonData, list[Room]]:
    """Build one dungeon.

    The caller is responsible for seeding ``rng``; this function only draws
    from it.

    Args:
        config: A validated configuration.
        rng: Random source every layer draws from.
        seed: Seed recorded in the output metadata.
        base_rooms: Layout to reuse instead of generating a new one.
        timings: Optional per-layer timing statistics to update.

    Returns:
        The dungeon snapshot and the base room layout it was built on.
    """
    generator = PipelineGenerator(
        layers=create_dungeon_layers(base_rooms),
        config=config,
        rng=rng,
        seed=seed,
        timings=timings,
    )
    ctx = generator.build()
    if not ctx.base_rooms:
        logger.warning("Generated dungeon has no rooms")
    return ctx.to_dungeon_data(seed), ctx.base_rooms


class DungeonGenerator:
    """Stateful dungeon generator.

    Example:
        generator = DungeonGenerator(width=40, height=30, seed=7)
        dungeon = generator.generate()
        # Same rooms, fresh corridors and doors
        rerouted = generator.generate(preserve_base_rooms=True)

    Attributes:
        timings: Rolling per-layer durations in milliseconds over recent
            `generate` calls.
    """

    def __init__(self, config: DungeonConfig | None = None, **overrides: Any) -> None:
        """Create a generator.

        Args:
            config: Base configuration. Defaults to `DungeonConfig()`.
            **overrides: Field overrides applied on top of ``config``.

        Raises:
            DungeonConfigError: If the resulting configuration is invalid.
        """
        base = config if config is not None else DungeonConfig()
        self._config = base.replace(**overrides).validate()
        self._seed = self._resolve_seed(self._config)
        self._rng = RandomSource(self._seed, self._config.rng_algorithm)
        self._base_rooms: list[Room] = []
        self.timings = TimingTable()

    @staticmethod
    def _resolve_seed(config: DungeonConfig) -> int:
        return config.seed if config.seed is not None else _entropy_seed()

    @property
    def seed(self) -> int:
        """The seed every `generate` call runs with."""
        return self._seed

    def generate(self, preserve_base_rooms: bool = False) -> DungeonData:
        """Generate a dungeon.

        The random source is reset before every run, so repeated calls yield
        the same dungeon. Without a configured seed, one is drawn from
        system entropy when the generator is created (or when the seed is
        cleared by `update_config`) and reported in the metadata.

        Args:
            preserve_base_rooms: Reuse the cached room layout and rebuild
                only connectivity, corridors and doors. Ignored (a full run
                happens) when nothing is cached yet.

        Returns:
            An independent snapshot of the generated dungeon.
        """
        seed = self._seed
        self._rng.reset(seed, self._config.rng_algorithm)

        reuse = preserve_base_rooms and bool(self._base_rooms)
        if preserve_base_rooms and not reuse:
            logger.debug("No cached layout; generating rooms from scratch")

        data, base_rooms = generate_dungeon(
            self._config,
            self._rng,
            seed,
            base_rooms=self._base_rooms if reuse else None,
            timings=self.timings,
        )
        if not reuse:
            self._base_rooms = base_rooms

        logger.debug(
            "Generated %dx%d dungeon (seed=%d): %d rooms, %d doors",
            data.metadata.width,
            data.metadata.height,
            seed,
            data.metadata.room_count,
            len(data.doors),
        )
        return data

    def get_config(self) -> DungeonConfig:
        """Return the current configuration.

        DungeonConfig is frozen, so the returned value cannot alter the
        generator.
        """
        return self._config

    def update_config(
        self, changes: dict[str, Any] | None = None, /, **kwargs: Any
    ) -> DungeonConfig:
        """Merge ``changes`` into the configuration.

        The merged configuration is validated before it replaces the current
        one; on failure the generator is left untouched. Changing the seed or
        the map extent drops the cached base layout. Setting the seed back to
        None draws a new entropy seed.

        Raises:
            DungeonConfigError: If the merged configuration is invalid.

        Returns:
            The new configuration.
        """
        merged = {**(changes or {}), **kwargs}
        new_config = self._config.replace(**merged).validate()
        old_config = self._config

        self._config = new_config
        if new_config.seed != old_config.seed:
            self._seed = self._resolve_seed(new_config)
        self._rng.reset(self._seed, new_config.rng_algorithm)
        if (
            new_config.seed != old_config.seed
            or new_config.width != old_config.width
            or new_config.height != old_config.height
        ):
            self._base_rooms = []
        return new_config

    def clear_base_rooms(self) -> None:
        self._base_rooms = []

    def has_base_rooms(self) -> bool:
        return bool(self._base_rooms)
