import logging
from collections import Counter
from dataclasses import dataclass
from typing import Annotated

import typer

from hitting_tracker.cli._logging import configure_logging
from hitting_tracker.cli._output import (
    print_discipline,
    print_error,
    print_heat_map,
    print_report_card,
    print_roster,
    print_summary,
    print_trends,
)
from hitting_tracker.config import TrackerSettings, create_config, load_settings
from hitting_tracker.domain.errors import PlayerNotFoundError
from hitting_tracker.domain.hitting import OutingType, Player
from hitting_tracker.domain.result import Err, Ok
from hitting_tracker.domain.stats import all_pitches, zone_heat_map
from hitting_tracker.domain.trends import TrendMetric, filter_trends
from hitting_tracker.exceptions import TrackerException
from hitting_tracker.ingest.file_source import source_for_path
from hitting_tracker.ingest.loader import load_roster
from hitting_tracker.repos.memory_repo import InMemoryOutingRepo, InMemoryPlayerRepo
from hitting_tracker.services.player_report import PlayerReport, build_player_report

logger = logging.getLogger(__name__)

app = typer.Typer(name="hitting", help="Hitting tracker: practice stats and report cards")


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Enable DEBUG logging")] = False,
) -> None:
    """Hitting tracker: practice stats and report cards."""
    configure_logging(verbose=verbose)
    if ctx.invoked_subcommand is None:
        raise typer.Exit()


_PlayerArg = Annotated[str, typer.Argument(help="Player ID")]
_DataOpt = Annotated[str | None, typer.Option("--data", help="Export file with players and outings (JSON or YAML)")]
_ConfigOpt = Annotated[str, typer.Option("--config", help="Path to the YAML config file")]


@dataclass(frozen=True)
class _Workspace:
    settings: TrackerSettings
    players: InMemoryPlayerRepo
    outings: InMemoryOutingRepo


def _open_workspace(data: str | None, config_path: str) -> _Workspace:
    try:
        settings = load_settings(create_config(yaml_path=config_path, data_path=data))
    except TrackerException as exc:
        print_error(str(exc))
        raise typer.Exit(code=1) from None

    match load_roster(source_for_path(settings.data_path)):
        case Ok(roster):
            return _Workspace(
                settings=settings,
                players=InMemoryPlayerRepo(roster.players),
                outings=InMemoryOutingRepo(roster.outings),
            )
        case Err(error):
            print_error(f"could not load {error.source_detail}: {error.message}")
            raise typer.Exit(code=1)


def _require_player(workspace: _Workspace, player_id: str) -> Player:
    player = workspace.players.get_by_id(player_id)
    if player is None:
        error = PlayerNotFoundError(message=f"no player with ID '{player_id}'", player_id=player_id)
        print_error(error.message)
        raise typer.Exit(code=1)
    return player


def _player_report(workspace: _Workspace, player_id: str) -> PlayerReport:
    player = _require_player(workspace, player_id)
    return build_player_report(
        player,
        workspace.outings.get_by_player(player_id),
        hard_hit_mph=workspace.settings.hard_hit_mph,
    )


@app.command()
def players(data: _DataOpt = None, config: _ConfigOpt = "hitting.yaml") -> None:
    """List the roster."""
    workspace = _open_workspace(data, config)
    counts = Counter(o.player_id for o in workspace.outings.all())
    print_roster(workspace.players.all(), dict(counts))


@app.command()
def summary(player_id: _PlayerArg, data: _DataOpt = None, config: _ConfigOpt = "hitting.yaml") -> None:
    """Show batting results and batted-ball quality for a player."""
    report = _player_report(_open_workspace(data, config), player_id)
    print_summary(report.player, report.summary, report.outing_count)


@app.command()
def discipline(player_id: _PlayerArg, data: _DataOpt = None, config: _ConfigOpt = "hitting.yaml") -> None:
    """Show plate discipline rates for a player."""
    report = _player_report(_open_workspace(data, config), player_id)
    print_discipline(report.discipline)


@app.command()
def trends(
    player_id: _PlayerArg,
    metric: Annotated[TrendMetric, typer.Option("--metric", help="Metric to chart")] = TrendMetric.AVG,
    outing_type: Annotated[OutingType | None, typer.Option("--type", help="Only include this outing type")] = None,
    window: Annotated[int | None, typer.Option("--window", min=1, help="Rolling average window")] = None,
    data: _DataOpt = None,
    config: _ConfigOpt = "hitting.yaml",
) -> None:
    """Show per-outing progression for a player."""
    workspace = _open_workspace(data, config)
    report = _player_report(workspace, player_id)
    points = filter_trends(report.trends, outing_type)
    print_trends(points, metric, window if window is not None else workspace.settings.trend_window)


@app.command("report-card")
def report_card(player_id: _PlayerArg, data: _DataOpt = None, config: _ConfigOpt = "hitting.yaml") -> None:
    """Grade a player's power, contact and discipline."""
    report = _player_report(_open_workspace(data, config), player_id)
    print_report_card(report.report_card, report.summary.at_bats)


@app.command()
def heatmap(player_id: _PlayerArg, data: _DataOpt = None, config: _ConfigOpt = "hitting.yaml") -> None:
    """Show hit rate by pitch location for a player."""
    workspace = _open_workspace(data, config)
    _require_player(workspace, player_id)
    pitches = all_pitches(workspace.outings.get_by_player(player_id))
    logger.debug("Bucketing %d pitches for %s", len(pitches), player_id)
    print_heat_map(zone_heat_map(pitches, workspace.settings.heatmap_rows, workspace.settings.heatmap_cols))
