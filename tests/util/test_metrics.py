from __future__ import annotations

import numpy as np
import pytest

from warren.util.metrics import MostRecentNVar, TimingTable


class TestMostRecentNVar:
    def test_wraps_to_newest_samples(self) -> None:
        """Only the newest N samples contribute to the statistics."""
        var = MostRecentNVar(num_samples=3)
        for value in (100.0, 1.0, 2.0, 3.0):
            var.record(value)

        assert var.sample_count == 3
        assert var.valid_samples().tolist() == [1.0, 2.0, 3.0]
        assert var.mean == 2.0
        assert var.p50 == 2.0

    def test_percentiles(self) -> None:
        var = MostRecentNVar(num_samples=100)
        for value in range(1, 101):
            var.record(float(value))

        expected = np.percentile(np.arange(1, 101, dtype=np.float64), [50, 95, 99])
        assert np.allclose(var.get_percentiles(), expected)
        assert var.get_percentiles_string().startswith("p50=50.50")

    def test_empty_var_reports_zero(self) -> None:
        var = MostRecentNVar(num_samples=10)

        assert var.sample_count == 0
        assert var.get_percentiles() == (0.0, 0.0, 0.0)
        assert var.mean == 0.0

    def test_needs_room_for_a_sample(self) -> None:
        with pytest.raises(ValueError):
            MostRecentNVar(num_samples=0)


class TestTimingTable:
    def test_records_per_label_in_first_seen_order(self) -> None:
        table = TimingTable(num_samples=5)
        table.record("RoomLayoutLayer", 2.0)
        table.record("CorridorLayer", 4.0)
        table.record("RoomLayoutLayer", 6.0)

        assert list(table) == ["RoomLayoutLayer", "CorridorLayer"]
        assert len(table) == 2
        assert table["RoomLayoutLayer"].sample_count == 2
        assert table["RoomLayoutLayer"].mean == 4.0

    def test_unknown_label_raises(self) -> None:
        with pytest.raises(KeyError):
            TimingTable()["missing"]

    def test_report_and_dict(self) -> None:
        table = TimingTable()
        table.record("A", 1.0)
        table.record("Longer", 3.0)

        lines = table.report().split("\n")
        assert lines[0].startswith("A       p50=1.00")
        assert lines[1].startswith("Longer  p50=3.00")
        assert table.to_dict()["Longer"] == {
            "p50_ms": 3.0,
            "p95_ms": 3.0,
            "p99_ms": 3.0,
        }

    def test_empty_report(self) -> None:
        assert TimingTable().report() == ""
