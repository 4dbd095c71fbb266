"""Abstract base class for generation layers.

A layer is one stage of dungeon generation. The pipeline hands every layer
the same GenerationContext, in order, and each layer leaves its result on it
for the next: the room layout, the carved tiles, the connectivity graph,
the corridors and finally the doors.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .context import GenerationContext


class GenerationLayer(ABC):
    """One stage of the dungeon pipeline.

    Layers hold no per-run state; anything a later layer needs goes on the
    context. All randomness must come from ``ctx.rng`` so a run is a pure
    function of its seed.
    """

    @property
    def name(self) -> str:
        """Label used for logging and timing statistics."""
        return type(self).__name__

    @abstractmethod
    def apply(self, ctx: GenerationContext) -> None:
        """Run this stage, mutating ``ctx`` in place.

        Args:
            ctx: The generation context to modify.
        """
        raise NotImplementedError
