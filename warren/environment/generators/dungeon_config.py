"""Runtime configuration for the dungeon generator."""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Any

from warren import config
from warren.types import RandomSeed, RngAlgorithm

_RNG_ALGORITHMS = ("mersenne", "lcg")


class DungeonConfigError(ValueError):
    """Raised when a DungeonConfig violates its preconditions.

    Attributes:
        problems: One human-readable line per violated rule.
    """

    def __init__(self, problems: list[str]) -> None:
        self.problems = problems
        super().__init__("Invalid dungeon configuration: " + "; ".join(problems))


@dataclass(frozen=True)
class DungeonConfig:
    """Parameters for one dungeon.

    Attributes:
        width: Map width in tiles.
        height: Map height in tiles.
        min_rooms: Lower bound of the requested room count.
        max_rooms: Upper bound of the requested room count.
        min_room_size: Smallest room side in tiles.
        max_room_size: Largest room side in tiles (clamped to the map).
        complexity_level: 0-1. Scales extra corridors and merge chances.
        corridor_width: Corridor width in tiles, at least 1.
        overlap_chance: 0-1 probability factor for merging overlapping rooms.
        seed: Seed for deterministic output; None picks one per generation.
        rng_algorithm: "mersenne" or "lcg" (portable linear congruential).
    """

    width: int = config.DEFAULT_WIDTH
    height: int = config.DEFAULT_HEIGHT
    min_rooms: int = config.DEFAULT_MIN_ROOMS
    max_rooms: int = config.DEFAULT_MAX_ROOMS
    min_room_size: int = config.DEFAULT_MIN_ROOM_SIZE
    max_room_size: int = config.DEFAULT_MAX_ROOM_SIZE
    complexity_level: float = config.DEFAULT_COMPLEXITY_LEVEL
    corridor_width: int = config.DEFAULT_CORRIDOR_WIDTH
    overlap_chance: float = config.DEFAULT_OVERLAP_CHANCE
    seed: RandomSeed = None
    rng_algorithm: RngAlgorithm = config.DEFAULT_RNG_ALGORITHM

    def problems(self) -> list[str]:
        """Return every violated precondition; empty when the config is valid."""
        problems: list[str] = []
        if self.width <= 0 or self.height <= 0:
            problems.append(
                f"map size must be positive, got {self.width}x{self.height}"
            )
        if self.min_rooms < 1:
            problems.append(f"min_rooms must be at least 1, got {self.min_rooms}")
        if self.min_rooms > self.max_rooms:
            problems.append(
                f"min_rooms ({self.min_rooms}) exceeds max_rooms ({self.max_rooms})"
            )
        if self.min_room_size < 1:
            problems.append(
                f"min_room_size must be at least 1, got {self.min_room_size}"
            )
        if self.min_room_size > self.max_room_size:
            problems.append(
                f"min_room_size ({self.min_room_size}) exceeds "
                f"max_room_size ({self.max_room_size})"
            )
        needed = self.min_room_size + 2 * config.ROOM_MARGIN
        if self.width > 0 and self.height > 0 and min(self.width, self.height) < needed:
            problems.append(
                f"map {self.width}x{self.height} cannot hold a "
                f"{self.min_room_size}-tile room with a "
                f"{config.ROOM_MARGIN}-tile margin (needs {needed}x{needed})"
            )
        if not 0.0 <= self.complexity_level <= 1.0:
            problems.append(
                f"complexity_level must be within [0, 1], got {self.complexity_level}"
            )
        if not 0.0 <= self.overlap_chance <= 1.0:
            problems.append(
                f"overlap_chance must be within [0, 1], got {self.overlap_chance}"
            )
        if self.corridor_width < 1:
            problems.append(
                f"corridor_width must be at least 1, got {self.corridor_width}"
            )
        elif self.width > 0 and self.height > 0:
            if self.corridor_width > min(self.width, self.height):
                problems.append(
                    f"corridor_width ({self.corridor_width}) does not fit in a "
                    f"{self.width}x{self.height} map"
                )
        if self.seed is not None and self.seed < 0:
            problems.append(f"seed must be non-negative, got {self.seed}")
        if self.rng_algorithm not in _RNG_ALGORITHMS:
            problems.append(
                f"rng_algorithm must be one of {_RNG_ALGORITHMS}, "
                f"got {self.rng_algorithm!r}"
            )
        return problems

    def validate(self) -> DungeonConfig:
        """Raise DungeonConfigError unless the config is consistent.

        Returns:
            self, so construction and validation chain.
        """
        problems = self.problems()
        if problems:
            raise DungeonConfigError(problems)
        return self

    def replace(self, **changes: Any) -> DungeonConfig:
        """Return a copy with ``changes`` applied (not validated)."""
        unknown = set(changes) - {f.name for f in dataclasses.fields(self)}
        if unknown:
            raise DungeonConfigError(
                [f"unknown config field {name!r}" for name in sorted(unknown)]
            )
        return dataclasses.replace(self, **changes)
