from __future__ import annotations

import json

import pytest

from warren.__main__ import main


def test_ascii_output(capsys: pytest.CaptureFixture[str]) -> None:
    assert main(["--width", "30", "--height", "20", "--seed", "4"]) == 0

    lines = capsys.readouterr().out.rstrip("\n").split("\n")
    assert len(lines) == 20
    assert all(len(line) == 30 for line in lines)


def test_json_output(capsys: pytest.CaptureFixture[str]) -> None:
    exit_code = main(
        ["--width", "30", "--height", "20", "--seed", "4", "--format", "json"]
    )

    assert exit_code == 0
    document = json.loads(capsys.readouterr().out)
    assert document["metadata"] == {
        "width": 30,
        "height": 20,
        "roomCount": document["metadata"]["roomCount"],
        "seed": 4,
    }
    assert len(document["tilemap"]) == 20
    assert {"rooms", "doors", "connections", "failedConnections"} <= set(document)


def test_same_seed_same_output(capsys: pytest.CaptureFixture[str]) -> None:
    main(["--seed", "9", "--rng", "lcg"])
    first = capsys.readouterr().out
    main(["--seed", "9", "--rng", "lcg"])

    assert capsys.readouterr().out == first


def test_invalid_config_exits_with_status_2(
    capsys: pytest.CaptureFixture[str],
) -> None:
    assert main(["--min-rooms", "9", "--max-rooms", "3"]) == 2

    captured = capsys.readouterr()
    assert captured.out == ""
    assert "min_rooms" in captured.err
