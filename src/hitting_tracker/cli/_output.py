from collections.abc import Sequence

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from hitting_tracker.domain.display import (
    format_avg,
    format_decimal,
    format_mph,
    format_pct,
    format_slg,
    format_whole,
    outing_type_label,
)
from hitting_tracker.domain.grades import MIN_AT_BATS, CategoryGrade, LetterGrade, ReportCardData, grade_band
from hitting_tracker.domain.hitting import Player
from hitting_tracker.domain.stats import HittingSummary, PlateDisciplineStats, ZoneCell
from hitting_tracker.domain.trends import OutingTrendPoint, TrendMetric, metric_values, rolling_average

console = Console(highlight=False)
err_console = Console(stderr=True, highlight=False)

_BAND_COLORS = {"A": "green", "B": "blue", "C": "yellow", "D": "dark_orange", "F": "red"}


def _graded(grade: LetterGrade) -> str:
    color = _BAND_COLORS[grade_band(grade)]
    return f"[{color}]{grade}[/{color}]"


def _format_metric(metric: TrendMetric, value: float) -> str:
    match metric:
        case TrendMetric.AVG:
            return format_avg(value)
        case TrendMetric.EXIT_VELO:
            return format_decimal(value) if value > 0 else "--"
        case _:
            return f"{format_whole(value)}%"


def print_error(message: str) -> None:
    err_console.print(f"[red bold]Error:[/red bold] {escape(message)}")


def print_roster(players: Sequence[Player], outing_counts: dict[str, int]) -> None:
    if not players:
        console.print("No players on the roster.")
        return
    table = Table(title="Roster")
    table.add_column("ID")
    table.add_column("Name")
    table.add_column("#", justify="right")
    table.add_column("Bats")
    table.add_column("Outings", justify="right")
    for p in players:
        table.add_row(p.id, p.name, p.number, str(p.bats), str(outing_counts.get(p.id, 0)))
    console.print(table)


def print_summary(player: Player, summary: HittingSummary, outing_count: int) -> None:
    console.print(f"[bold]{escape(player.name)}[/bold] #{player.number}  Bats {player.bats}  {outing_count} outings")
    console.print(f"  AVG: {format_avg(summary.avg)}  ({summary.hits} hits in {summary.at_bats} at-bats)")
    console.print(f"  SLG: {format_slg(summary.slg)}")
    console.print(
        f"  1B: {summary.singles}  2B: {summary.doubles}  3B: {summary.triples}  HR: {summary.home_runs}"
    )
    console.print(f"  K: {summary.strikeouts}  BB: {summary.walks}  HBP: {summary.hit_by_pitch}")
    console.print(f"  Barrel %: {format_pct(summary.barrel_pct)}")
    exit_velo = format_mph(summary.avg_exit_velo) if summary.avg_exit_velo > 0 else "--"
    console.print(f"  Avg Exit Velo: {exit_velo}")
    console.print(f"  Hard Hit %: {format_pct(summary.hard_hit_pct)}")


def print_discipline(stats: PlateDisciplineStats) -> None:
    if stats.total_pitches == 0:
        console.print("No pitch data yet. Track pitches in live sessions for discipline stats.")
        return
    console.print(
        f"Pitches: {stats.total_pitches}  Swings: {stats.swings}  "
        f"Pitches/AB: {format_decimal(stats.avg_pitches_per_ab)}"
    )
    table = Table(title="Plate Discipline")
    table.add_column("Metric")
    table.add_column("Value", justify="right")
    rows = [
        ("Swing %", stats.swing_pct),
        ("Chase Rate", stats.chase_pct),
        ("Called Strike %", stats.called_strike_pct),
        ("Contact %", stats.contact_pct),
        ("Whiff Rate", stats.whiff_rate),
        ("Foul %", stats.foul_pct),
        ("First Pitch Swing %", stats.first_pitch_swing_pct),
        ("First Pitch Hit %", stats.first_pitch_hit_pct),
    ]
    for label, value in rows:
        table.add_row(label, format_pct(value))
    console.print(table)


def print_trends(points: Sequence[OutingTrendPoint], metric: TrendMetric, window: int) -> None:
    if not points:
        console.print("No outing data yet.")
        return
    values = metric_values(points, metric)
    rolling = rolling_average(values, window)
    table = Table(title=f"Trend: {metric}")
    table.add_column("Outing")
    table.add_column("Type")
    table.add_column("H/AB", justify="right")
    table.add_column("Value", justify="right")
    table.add_column(f"Rolling ({window})", justify="right")
    for point, value, smoothed in zip(points, values, rolling):
        table.add_row(
            point.label,
            outing_type_label(point.type),
            f"{point.hits}/{point.at_bats}",
            _format_metric(metric, value),
            _format_metric(metric, smoothed),
        )
    console.print(table)
    console.print(f"Avg: {_format_metric(metric, sum(values) / len(values))}")


def _print_category(category: CategoryGrade) -> None:
    console.print(f"[bold]{category.label}[/bold]  {format_whole(category.score)}  {_graded(category.grade)}")
    if not category.metrics:
        console.print("  No pitch data")
        return
    for m in category.metrics:
        console.print(f"  {m.label}: {m.display_value}  {format_whole(m.score)}  {_graded(m.grade)}")


def print_report_card(report: ReportCardData, total_at_bats: int) -> None:
    if not report.has_enough_data:
        console.print(
            f"Not enough data for a report card: {total_at_bats} at-bats recorded, {MIN_AT_BATS} needed."
        )
        return
    console.print(f"[bold]Overall[/bold]  {format_whole(report.overall.score)}  {_graded(report.overall.grade)}")
    for category in (report.power, report.contact, report.discipline):
        _print_category(category)


def print_heat_map(grid: Sequence[Sequence[ZoneCell]]) -> None:
    table = Table(title="Hit rate by zone", caption="top = high, left = inside", show_header=False)
    for _ in grid[0] if grid else ():
        table.add_column(justify="center")
    for row in grid:
        cells = []
        for cell in row:
            if cell.hit_rate is None:
                cells.append("[dim]-[/dim]")
            else:
                cells.append(f"{format_whole(cell.hit_rate * 100)}% ({cell.hits}/{cell.total})")
        table.add_row(*cells)
    console.print(table)
