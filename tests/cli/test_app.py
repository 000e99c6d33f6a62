import json
import logging
import os
from collections.abc import Generator
from pathlib import Path

import pytest
from typer.testing import CliRunner

from hitting_tracker.cli.app import app
from tests.ingest.conftest import outing_row, player_row

runner = CliRunner()


@pytest.fixture(autouse=True)
def _isolate(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Generator[None]:
    for key in list(os.environ):
        if key.startswith("HITTING__"):
            monkeypatch.delenv(key)
    # no hitting.yaml in the working directory
    monkeypatch.chdir(tmp_path)
    yield
    logging.getLogger().handlers.clear()


def _at_bat(
    ab_id: str, result: str, pitches: list[tuple[str, float, float]], exit_velocity: float | None = None
) -> dict:
    row: dict = {
        "id": ab_id,
        "result": result,
        "pitches": [
            {"id": f"{ab_id}-{i}", "location": {"x": x, "y": y}, "outcome": outcome}
            for i, (outcome, x, y) in enumerate(pitches)
        ],
    }
    if exit_velocity is not None:
        row["exitVelocity"] = exit_velocity
    return row


def _export(tmp_path: Path) -> Path:
    at_bats = [
        _at_bat("a1", "single", [("ball", 0.0, 0.0), ("in_play_hit", 0.1, 0.1)], exit_velocity=78.0),
        _at_bat("a2", "strikeout", [("strike_looking", 0.0, 0.0), ("strike_swinging", 1.3, 0.0), ("foul", 0.0, 0.0)]),
        _at_bat("a3", "out", [("in_play_out", 0.0, -0.5)], exit_velocity=64.0),
        _at_bat("a4", "double", [("in_play_hit", -0.5, 0.5)]),
        _at_bat("a5", "walk", [("ball", 0.0, 1.4)] * 4),
        _at_bat("a6", "out", [("foul", 0.0, 0.0), ("in_play_out", 0.0, 0.0)]),
    ]
    document = {
        "players": [player_row(), player_row(id="p2", name="Ada Bench", bats="L")],
        "outings": [
            outing_row(id="o2", date="2025-03-20", type="game", atBats=at_bats[3:]),
            outing_row(id="o1", date="2025-03-14", atBats=at_bats[:3]),
        ],
    }
    path = tmp_path / "outings.json"
    path.write_text(json.dumps(document))
    return path


class TestPlayersCommand:
    def test_lists_roster(self, tmp_path: Path) -> None:
        result = runner.invoke(app, ["players", "--data", str(_export(tmp_path))])
        assert result.exit_code == 0
        assert "Casey Jones" in result.output
        assert "Ada Bench" in result.output

    def test_default_data_path_from_working_directory(self, tmp_path: Path) -> None:
        _export(tmp_path)
        result = runner.invoke(app, ["players"])
        assert result.exit_code == 0
        assert "Casey Jones" in result.output

    def test_data_path_from_env(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        path = _export(tmp_path)
        moved = path.rename(tmp_path / "elsewhere.json")
        monkeypatch.setenv("HITTING__DATA__PATH", str(moved))
        result = runner.invoke(app, ["players"])
        assert result.exit_code == 0
        assert "Ada Bench" in result.output

    def test_yaml_export(self, tmp_path: Path) -> None:
        path = tmp_path / "roster.yaml"
        path.write_text("players:\n  - id: y1\n    name: Yaml Hitter\n    number: '3'\n    bats: S\noutings: []\n")
        result = runner.invoke(app, ["players", "--data", str(path)])
        assert result.exit_code == 0
        assert "Yaml Hitter" in result.output

    def test_missing_export_fails(self, tmp_path: Path) -> None:
        result = runner.invoke(app, ["players", "--data", str(tmp_path / "absent.json")])
        assert result.exit_code == 1
        assert "could not load" in result.output

    def test_bad_config_fails(self, tmp_path: Path) -> None:
        config = tmp_path / "hitting.yaml"
        config.write_text("trends:\n  window: 0\n")
        result = runner.invoke(app, ["players", "--data", str(_export(tmp_path)), "--config", str(config)])
        assert result.exit_code == 1
        assert "trends.window" in result.output


class TestSummaryCommand:
    def test_summary(self, tmp_path: Path) -> None:
        result = runner.invoke(app, ["summary", "p1", "--data", str(_export(tmp_path))])
        assert result.exit_code == 0
        assert "AVG: .400" in result.output
        assert "(2 hits in 5 at-bats)" in result.output
        assert "Avg Exit Velo: 71.0 mph" in result.output

    def test_unknown_player(self, tmp_path: Path) -> None:
        result = runner.invoke(app, ["summary", "nobody", "--data", str(_export(tmp_path))])
        assert result.exit_code == 1
        assert "no player with ID 'nobody'" in result.output


class TestDisciplineCommand:
    def test_discipline(self, tmp_path: Path) -> None:
        result = runner.invoke(app, ["discipline", "p1", "--data", str(_export(tmp_path))])
        assert result.exit_code == 0
        assert "Pitches: 13" in result.output
        assert "Chase Rate" in result.output

    def test_player_without_pitches(self, tmp_path: Path) -> None:
        result = runner.invoke(app, ["discipline", "p2", "--data", str(_export(tmp_path))])
        assert result.exit_code == 0
        assert "No pitch data yet" in result.output


class TestTrendsCommand:
    def test_oldest_first(self, tmp_path: Path) -> None:
        result = runner.invoke(app, ["trends", "p1", "--data", str(_export(tmp_path))])
        assert result.exit_code == 0
        assert result.output.index("BP 3/14") < result.output.index("Game 3/20")

    def test_filter_by_type(self, tmp_path: Path) -> None:
        result = runner.invoke(app, ["trends", "p1", "--type", "game", "--data", str(_export(tmp_path))])
        assert result.exit_code == 0
        assert "Game 3/20" in result.output
        assert "BP 3/14" not in result.output

    def test_metric_and_window(self, tmp_path: Path) -> None:
        args = ["trends", "p1", "--metric", "whiff_rate", "--window", "1", "--data", str(_export(tmp_path))]
        result = runner.invoke(app, args)
        assert result.exit_code == 0
        assert "Trend: whiff_rate" in result.output
        assert "Rolling (1)" in result.output

    def test_window_must_be_positive(self, tmp_path: Path) -> None:
        result = runner.invoke(app, ["trends", "p1", "--window", "0", "--data", str(_export(tmp_path))])
        assert result.exit_code != 0

    def test_no_outings(self, tmp_path: Path) -> None:
        result = runner.invoke(app, ["trends", "p2", "--data", str(_export(tmp_path))])
        assert result.exit_code == 0
        assert "No outing data yet." in result.output


class TestReportCardCommand:
    def test_graded(self, tmp_path: Path) -> None:
        result = runner.invoke(app, ["report-card", "p1", "--data", str(_export(tmp_path))])
        assert result.exit_code == 0
        assert "Overall" in result.output
        assert "Power" in result.output
        assert "Batting Avg: .400" in result.output

    def test_not_enough_at_bats(self, tmp_path: Path) -> None:
        result = runner.invoke(app, ["report-card", "p2", "--data", str(_export(tmp_path))])
        assert result.exit_code == 0
        assert "0 at-bats recorded, 5 needed" in result.output


class TestHeatmapCommand:
    def test_grid(self, tmp_path: Path) -> None:
        result = runner.invoke(app, ["heatmap", "p1", "--data", str(_export(tmp_path))])
        assert result.exit_code == 0
        assert "Hit rate by zone" in result.output

    def test_configured_dimensions(self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("HITTING__HEATMAP__ROWS", "1")
        monkeypatch.setenv("HITTING__HEATMAP__COLS", "1")
        result = runner.invoke(app, ["heatmap", "p1", "--data", str(_export(tmp_path))])
        assert result.exit_code == 0
        assert "15% (2/13)" in result.output


def test_no_command_shows_nothing_and_exits_cleanly() -> None:
    result = runner.invoke(app, [])
    assert result.exit_code == 0
