"""Rolling timing statistics for generation layers.

`MostRecentNVar` keeps a ring buffer of the newest samples and reports
percentiles over it. `TimingTable` maps a label (a layer name) to one such
variable, which is what `PipelineGenerator.timings` holds.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping

import numpy as np

from warren import config


class MostRecentNVar:
    """Track statistics for the most recent N samples."""

    def __init__(self, num_samples: int = 1000) -> None:
        if num_samples < 1:
            raise ValueError(f"num_samples must be at least 1, got {num_samples}")
        self.num_samples = num_samples
        self.samples = np.zeros(num_samples, dtype=np.float64)
        self.count = 0
        self.write_index = 0

    def record(self, value: float) -> None:
        self.samples[self.write_index] = value
        self.write_index = (self.write_index + 1) % self.num_samples
        self.count += 1

    @property
    def sample_count(self) -> int:
        return min(self.count, self.num_samples)

    def valid_samples(self) -> np.ndarray:
        """Retained samples, oldest first."""
        if self.count <= self.num_samples:
            return self.samples[: self.count]
        # Wrapped: the oldest sample sits at the write index
        return np.roll(self.samples, -self.write_index)

    def get_percentiles(self) -> tuple[float, float, float]:
        """Return (p50, p95, p99); all zero before the first sample."""
        valid = self.valid_samples()
        if len(valid) == 0:
            return (0.0, 0.0, 0.0)
        p50, p95, p99 = np.percentile(valid, [50, 95, 99])
        return (float(p50), float(p95), float(p99))

    @property
    def p50(self) -> float:
        return self.get_percentiles()[0]

    @property
    def p95(self) -> float:
        return self.get_percentiles()[1]

    @property
    def p99(self) -> float:
        return self.get_percentiles()[2]

    @property
    def mean(self) -> float:
        valid = self.valid_samples()
        return float(valid.mean()) if len(valid) else 0.0

    def get_percentiles_string(self) -> str:
        p50, p95, p99 = self.get_percentiles()
        return f"p50={p50:.2f} p95={p95:.2f} p99={p99:.2f}"


class TimingTable(Mapping[str, MostRecentNVar]):
    """Per-label rolling timings in milliseconds, in first-recorded order."""

    def __init__(self, num_samples: int = config.LAYER_TIMING_SAMPLES) -> None:
        self.num_samples = num_samples
        self._vars: dict[str, MostRecentNVar] = {}

    def record(self, label: str, elapsed_ms: float) -> None:
        var = self._vars.get(label)
        if var is None:
            var = MostRecentNVar(self.num_samples)
            self._vars[label] = var
        var.record(elapsed_ms)

    def __getitem__(self, label: str) -> MostRecentNVar:
        return self._vars[label]

    def __iter__(self) -> Iterator[str]:
        return iter(self._vars)

    def __len__(self) -> int:
        return len(self._vars)

    def report(self) -> str:
        """One aligned line per label, e.g. ``CorridorLayer  p50=1.20 ...``."""
        if not self._vars:
            return ""
        width = max(len(label) for label in self._vars)
        return "\n".join(
            f"{label:<{width}}  {var.get_percentiles_string()} ms"
            for label, var in self._vars.items()
        )

    def to_dict(self) -> dict[str, dict[str, float]]:
        return {
            label: {"p50_ms": var.p50, "p95_ms": var.p95, "p99_ms": var.p99}
            for label, var in self._vars.items()
        }
