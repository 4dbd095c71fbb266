"""Deterministic random number generation for dungeon building.

Every stochastic decision the generator makes (room sizes, positions, merge
rolls, extra corridor picks) is drawn from a single `RandomSource` held by the
generator instance. This ensures that:

1. A dungeon is fully reproducible from its seed
2. No module-level random state leaks between generator instances
3. The integer and boolean helpers derive from one float stream, so two
   backends with the same float stream produce the same dungeon

Two backends are available:
    - "mersenne": Python's Mersenne Twister (`random.Random`). The default.
    - "lcg": the small linear congruential recurrence
      ``state = (state * 9301 + 49297) % 233280``. Low quality, but trivially
      portable, so other implementations of the generator can reproduce the
      same dungeon bit-for-bit.

Usage:
    from warren.util.rng import RandomSource

    source = RandomSource(seed=42)
    width = source.next_int(4, 12)
    if source.next_bool(0.3):
        ...

    # Start the same stream over
    source.reset(42)
"""

from __future__ import annotations

import math
from random import Random
from typing import Protocol

from warren import config
from warren.types import RngAlgorithm


class FloatStream(Protocol):
    """Anything producing uniform floats in [0.0, 1.0)."""

    def random(self) -> float: ...


class LinearCongruentialRandom:
    """Seeded linear congruential generator.

    Output is ``state / M`` after each step, so values lie in [0.0, 1.0).
    """

    def __init__(self, seed: int) -> None:
        if seed < 0:
            raise ValueError(f"LCG seed must be non-negative, got {seed}")
        self._state = seed % config.LCG_MODULUS

    def random(self) -> float:
        """Advance the recurrence and return the new state scaled to [0, 1)."""
        self._state = (
            self._state * config.LCG_MULTIPLIER + config.LCG_INCREMENT
        ) % config.LCG_MODULUS
        return self._state / config.LCG_MODULUS


def _make_stream(seed: int, algorithm: RngAlgorithm) -> FloatStream:
    match algorithm:
        case "mersenne":
            return Random(seed)
        case "lcg":
            return LinearCongruentialRandom(seed)
        case _:
            raise ValueError(f"Unknown RNG algorithm: {algorithm!r}")


class RandomSource:
    """Seeded random stream feeding every stochastic generation decision.

    The source is a pure function of its seed: two sources built with the
    same seed and algorithm return identical sequences from every method.
    """

    def __init__(self, seed: int, algorithm: RngAlgorithm = "mersenne") -> None:
        self._algorithm: RngAlgorithm = algorithm
        self._seed = seed
        self._stream = _make_stream(seed, algorithm)

    @property
    def seed(self) -> int:
        return self._seed

    @property
    def algorithm(self) -> RngAlgorithm:
        return self._algorithm

    def reset(
        self, seed: int | None = None, algorithm: RngAlgorithm | None = None
    ) -> None:
        """Restart the stream, optionally with a new seed or backend.

        Args:
            seed: New seed. Defaults to the current seed.
            algorithm: New backend. Defaults to the current backend.
        """
        if seed is not None:
            self._seed = seed
        if algorithm is not None:
            self._algorithm = algorithm
        self._stream = _make_stream(self._seed, self._algorithm)

    # -------------------------------------------------------------------------
    # Draws
    # -------------------------------------------------------------------------

    def next(self) -> float:
        """Return random float in [0.0, 1.0)."""
        return self._stream.random()

    # Lets a RandomSource stand in wherever a Random-like `random()` is used.
    random = next

    def next_int(self, lo: int, hi: int) -> int:
        """Return random integer N such that lo <= N <= hi.

        Derived as ``floor(next() * (hi - lo + 1)) + lo`` so that every
        backend maps the same float stream to the same integers.
        """
        if hi < lo:
            raise ValueError(f"Empty integer range [{lo}, {hi}]")
        return math.floor(self.next() * (hi - lo + 1)) + lo

    def next_bool(self, probability: float = 0.5) -> bool:
        """Return True with the given probability."""
        if not 0.0 <= probability <= 1.0:
            raise ValueError(f"Probability must be within [0, 1], got {probability}")
        return self.next() < probability

    def __repr__(self) -> str:
        return f"RandomSource(seed={self._seed}, algorithm={self._algorithm!r})"
